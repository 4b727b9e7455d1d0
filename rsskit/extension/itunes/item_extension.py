"""The iTunes extension of an item."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from rsskit.extension.base import Extension
from rsskit.extension.itunes.common import parse_image
from rsskit.extension.util import remove_extension_value

NAMESPACE = "http://www.itunes.com/dtds/podcast-1.0.dtd"


def _text_element(tag: str, text: str) -> ET.Element:
    element = ET.Element(tag)
    element.text = text
    return element


@dataclass
class ITunesItemExtension:
    """iTunes podcast elements attached to an item (an episode)."""

    author: str | None = None
    block: str | None = None
    image: str | None = None
    duration: str | None = None
    explicit: str | None = None
    closed_captioned: str | None = None
    order: str | None = None
    subtitle: str | None = None
    summary: str | None = None
    keywords: str | None = None
    episode: str | None = None
    season: str | None = None
    episode_type: str | None = None

    @classmethod
    def from_map(cls, mapping: dict[str, list[Extension]]) -> ITunesItemExtension:
        """Build the extension from elements keyed by local name."""
        remaining = dict(mapping)
        return cls(
            author=remove_extension_value(remaining, "author"),
            block=remove_extension_value(remaining, "block"),
            image=parse_image(remaining),
            duration=remove_extension_value(remaining, "duration"),
            explicit=remove_extension_value(remaining, "explicit"),
            closed_captioned=remove_extension_value(remaining, "isClosedCaptioned"),
            order=remove_extension_value(remaining, "order"),
            subtitle=remove_extension_value(remaining, "subtitle"),
            summary=remove_extension_value(remaining, "summary"),
            keywords=remove_extension_value(remaining, "keywords"),
            episode=remove_extension_value(remaining, "episode"),
            season=remove_extension_value(remaining, "season"),
            episode_type=remove_extension_value(remaining, "episodeType"),
        )

    def to_xml(self) -> list[ET.Element]:
        """Return the ``itunes:`` elements for the fields that are set, in standard order."""
        elements: list[ET.Element] = []
        if self.author is not None:
            elements.append(_text_element("itunes:author", self.author))
        if self.block is not None:
            elements.append(_text_element("itunes:block", self.block))
        if self.image is not None:
            elements.append(ET.Element("itunes:image", {"href": self.image}))
        for tag, value in (
            ("itunes:duration", self.duration),
            ("itunes:explicit", self.explicit),
            ("itunes:isClosedCaptioned", self.closed_captioned),
            ("itunes:order", self.order),
            ("itunes:subtitle", self.subtitle),
            ("itunes:summary", self.summary),
            ("itunes:keywords", self.keywords),
            ("itunes:episode", self.episode),
            ("itunes:season", self.season),
            ("itunes:episodeType", self.episode_type),
        ):
            if value is not None:
                elements.append(_text_element(tag, value))
        return elements

    def used_namespaces(self) -> dict[str, str]:
        """Return the namespace declarations this extension needs."""
        return {"itunes": NAMESPACE}