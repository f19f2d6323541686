"""Resolve link text into absolute URLs and check URL fragments against documents."""

__version__ = "0.18.1"
__all__ = ["errors", "url", "path", "request", "fragments"]