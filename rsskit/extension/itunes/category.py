"""The iTunes category element."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass


@dataclass
class ITunesCategory:
    """A category for an iTunes podcast, with an optional subcategory."""

    text: str = ""
    subcategory: ITunesCategory | None = None

    def to_xml(self) -> ET.Element:
        """Return this category as an ``itunes:category`` element."""
        element = ET.Element("itunes:category", {"text": self.text})
        if self.subcategory is not None:
            element.append(self.subcategory.to_xml())
        return element