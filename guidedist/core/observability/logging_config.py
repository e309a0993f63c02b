"""
Logging setup for the guidedist CLI.

The click group callback hands its flags to ``setup_logging()`` once per
invocation. Modules log through ``logging.getLogger(__name__)``.

Console level, highest precedence first:
    --debug  >  --verbose  >  --quiet  >  GUIDEDIST_LOG_LEVEL  >  WARNING

GUIDEDIST_LOG_FILE also writes every record at or above
GUIDEDIST_LOG_FILE_LEVEL (default: the console level) to that file.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

ENV_LOG_LEVEL = "GUIDEDIST_LOG_LEVEL"
ENV_LOG_FILE = "GUIDEDIST_LOG_FILE"
ENV_LOG_FILE_LEVEL = "GUIDEDIST_LOG_FILE_LEVEL"

# Console output gets chattier as the level drops; warnings and errors
# are shown as bare messages next to the command's own output.
_CONSOLE_FORMATS = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s"),
)
_CONSOLE_DATEFMT = "%H:%M:%S"

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"


def setup_logging(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Configure the root logger from CLI flags and the environment.

    Args:
        debug: ``--debug`` was given.
        verbose: ``--verbose`` was given.
        quiet: ``--quiet`` was given.
        environ: Environment to read GUIDEDIST_LOG_* from (default: os.environ).

    Returns:
        The console log level in effect.
    """
    env = os.environ if environ is None else environ

    if debug:
        console_level = logging.DEBUG
    elif verbose:
        console_level = logging.INFO
    elif quiet:
        console_level = logging.ERROR
    else:
        console_level = level_from_name(env.get(ENV_LOG_LEVEL))

    handlers: list[logging.Handler] = [_console_handler(console_level)]

    log_file = env.get(ENV_LOG_FILE)
    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(level_from_name(env.get(ENV_LOG_FILE_LEVEL), default=console_level))
        fh.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(fh)

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(min(h.level for h in handlers))
    return console_level


def level_from_name(name: str | None, default: int = logging.WARNING) -> int:
    """``"info"`` → ``logging.INFO``; blank or unknown names give ``default``."""
    if not name:
        return default
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else default


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    for threshold, fmt in _CONSOLE_FORMATS:
        if level <= threshold:
            handler.setFormatter(logging.Formatter(fmt, datefmt=_CONSOLE_DATEFMT))
            break
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))
    return handler
