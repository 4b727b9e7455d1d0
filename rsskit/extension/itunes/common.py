"""Helpers that turn generic iTunes extension elements into typed values."""

from __future__ import annotations

from rsskit.extension.base import Extension
from rsskit.extension.itunes.category import ITunesCategory
from rsskit.extension.itunes.owner import ITunesOwner


def _take_first(mapping: dict[str, list[Extension]], key: str) -> Extension | None:
    extensions = mapping.pop(key, None)
    if not extensions:
        return None
    return extensions[0]


def _first_child_value(element: Extension, key: str) -> str | None:
    children = element.children.get(key)
    if not children:
        return None
    return children[0].value


def parse_image(mapping: dict[str, list[Extension]]) -> str | None:
    """Remove the ``image`` entry and return the ``href`` of its first element."""
    element = _take_first(mapping, "image")
    if element is None:
        return None
    return element.attrs.get("href")


def parse_categories(mapping: dict[str, list[Extension]]) -> list[ITunesCategory]:
    """Remove the ``category`` entry and return its categories.

    Only the first nested category of each element is kept, one level deep.
    """
    categories = []
    for element in mapping.pop("category", []):
        nested = element.children.get("category")
        subcategory = ITunesCategory(text=nested[0].attrs.get("text", "")) if nested else None
        categories.append(
            ITunesCategory(text=element.attrs.get("text", ""), subcategory=subcategory)
        )
    return categories


def parse_owner(mapping: dict[str, list[Extension]]) -> ITunesOwner | None:
    """Remove the ``owner`` entry and return the owner its first element describes."""
    element = _take_first(mapping, "owner")
    if element is None:
        return None
    return ITunesOwner(
        name=_first_child_value(element, "name"),
        email=_first_child_value(element, "email"),
    )