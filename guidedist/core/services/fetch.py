"""
Guideline fetch — one read of the canonical document from its source.

Supports http(s) for the published copy and file:// for a local one.
No retries and no caching: a failed read is reported, never papered over.
"""

from __future__ import annotations

import http.client
import logging
import urllib.error
import urllib.request
from urllib.parse import urlparse

from guidedist.core.errors import FetchError
from guidedist.core.models.guideline import GuidelineDocument
from guidedist.core.models.settings import DEFAULT_TIMEOUT, Settings

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("http", "https", "file")

_BOM = "\ufeff"


def fetch_guideline(
    source_uri: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str | None = None,
) -> GuidelineDocument:
    """Fetch the guideline text from ``source_uri``.

    Args:
        source_uri: http://, https:// or file:// location of the document.
        timeout: Network timeout in seconds.
        user_agent: User-Agent header for http(s) requests.

    Returns:
        GuidelineDocument holding the decoded text.

    Raises:
        FetchError: Unsupported scheme, unreachable source, non-2xx
            status, or a body that is not UTF-8.
    """
    scheme = urlparse(source_uri).scheme.lower()
    if scheme not in SUPPORTED_SCHEMES:
        raise FetchError(
            source_uri,
            f"Unsupported source URI {source_uri!r} "
            f"(expected one of: {', '.join(s + '://' for s in SUPPORTED_SCHEMES)})",
        )

    headers = {"User-Agent": user_agent or Settings().user_agent}

    logger.info("Fetching guidelines from %s", source_uri)
    try:
        req = urllib.request.Request(source_uri, headers=headers)
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status = getattr(resp, "status", None)
            if status is not None and not 200 <= status < 300:
                raise FetchError(
                    source_uri,
                    f"Fetching {source_uri} failed: HTTP {status}",
                    status=status,
                )
            body = resp.read()
    except urllib.error.HTTPError as e:
        raise FetchError(
            source_uri,
            f"Fetching {source_uri} failed: HTTP {e.code} {e.reason}",
            status=e.code,
        ) from e
    except urllib.error.URLError as e:
        raise FetchError(source_uri, f"Cannot reach {source_uri}: {e.reason}") from e
    except OSError as e:
        raise FetchError(source_uri, f"Cannot reach {source_uri}: {e}") from e
    except (http.client.InvalidURL, ValueError) as e:
        raise FetchError(source_uri, f"Invalid source URI {source_uri!r}: {e}") from e
    except http.client.HTTPException as e:
        raise FetchError(source_uri, f"Bad response from {source_uri}: {e!r}") from e

    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FetchError(source_uri, f"{source_uri} is not valid UTF-8 text: {e}") from e

    if text.startswith(_BOM):
        text = text[len(_BOM):]

    doc = GuidelineDocument(source_uri=source_uri, text=text)
    logger.debug("Fetched %d bytes from %s", doc.size, source_uri)
    return doc
