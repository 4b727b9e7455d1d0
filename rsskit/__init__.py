"""Data classes, extension readers and XML element builders for RSS feed parts."""

__version__ = "0.1.0"

__all__ = ["category", "cloud", "enclosure", "errors", "extension"]