"""Helpers for zsync-style delta downloads: ranges, URLs, digests and progress."""

__version__ = "0.1.0"

__all__ = ["digest", "progress", "ranges", "urls", "util"]