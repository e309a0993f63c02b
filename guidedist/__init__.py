"""guidedist — fetch the canonical guideline document into a project instruction file."""

__version__ = "0.1.0"
