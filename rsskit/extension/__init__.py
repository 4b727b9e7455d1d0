"""Namespaced extensions for RSS channels and items, and helpers to read them."""

__all__ = ["atom", "base", "dublincore", "itunes", "podcast", "syndication", "util"]