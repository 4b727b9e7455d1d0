"""The enclosure element of an item."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

_ATTRIBUTES = (
    ("url", "url"),
    ("length", "length"),
    ("type", "mime_type"),
)


@dataclass
class Enclosure:
    """A media object attached to an RSS item."""

    url: str = ""
    length: str = ""
    mime_type: str = ""

    @classmethod
    def from_xml(cls, element: ET.Element) -> Enclosure:
        """Build an Enclosure from the attributes of an ``<enclosure>`` element."""
        return cls(
            **{field: element.get(attr) for attr, field in _ATTRIBUTES if attr in element.attrib}
        )

    def to_xml(self) -> ET.Element:
        """Return this enclosure as an empty ``<enclosure>`` element carrying every attribute."""
        return ET.Element("enclosure", {attr: getattr(self, field) for attr, field in _ATTRIBUTES})