"""The iTunes extension of a channel."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from rsskit.extension.base import Extension
from rsskit.extension.itunes.category import ITunesCategory
from rsskit.extension.itunes.common import parse_categories, parse_image, parse_owner
from rsskit.extension.itunes.owner import ITunesOwner
from rsskit.extension.util import remove_extension_value


def _text_element(tag: str, text: str) -> ET.Element:
    element = ET.Element(tag)
    element.text = text
    return element


@dataclass
class ITunesChannelExtension:
    """iTunes podcast elements attached to a channel."""

    author: str | None = None
    block: str | None = None
    categories: list[ITunesCategory] = field(default_factory=list)
    image: str | None = None
    explicit: str | None = None
    complete: str | None = None
    new_feed_url: str | None = None
    owner: ITunesOwner | None = None
    subtitle: str | None = None
    summary: str | None = None
    keywords: str | None = None
    type: str | None = None

    @classmethod
    def from_map(cls, mapping: dict[str, list[Extension]]) -> ITunesChannelExtension:
        """Build the extension from elements keyed by local name."""
        remaining = dict(mapping)
        return cls(
            author=remove_extension_value(remaining, "author"),
            block=remove_extension_value(remaining, "block"),
            categories=parse_categories(remaining),
            image=parse_image(remaining),
            explicit=remove_extension_value(remaining, "explicit"),
            complete=remove_extension_value(remaining, "complete"),
            new_feed_url=remove_extension_value(remaining, "new-feed-url"),
            owner=parse_owner(remaining),
            subtitle=remove_extension_value(remaining, "subtitle"),
            summary=remove_extension_value(remaining, "summary"),
            keywords=remove_extension_value(remaining, "keywords"),
            type=remove_extension_value(remaining, "type"),
        )

    def to_xml(self) -> list[ET.Element]:
        """Return the ``itunes:`` elements for the fields that are set, in standard order."""
        elements: list[ET.Element] = []
        if self.author is not None:
            elements.append(_text_element("itunes:author", self.author))
        if self.block is not None:
            elements.append(_text_element("itunes:block", self.block))
        elements.extend(category.to_xml() for category in self.categories)
        if self.image is not None:
            elements.append(ET.Element("itunes:image", {"href": self.image}))
        if self.explicit is not None:
            elements.append(_text_element("itunes:explicit", self.explicit))
        if self.complete is not None:
            elements.append(_text_element("itunes:complete", self.complete))
        if self.new_feed_url is not None:
            elements.append(_text_element("itunes:new-feed-url", self.new_feed_url))
        if self.owner is not None:
            elements.append(self.owner.to_xml())
        for tag, value in (
            ("itunes:subtitle", self.subtitle),
            ("itunes:summary", self.summary),
            ("itunes:keywords", self.keywords),
            ("itunes:type", self.type),
        ):
            if value is not None:
                elements.append(_text_element(tag, value))
        return elements