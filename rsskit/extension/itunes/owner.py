"""The iTunes owner element."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass


@dataclass
class ITunesOwner:
    """The contact information for the owner of an iTunes podcast."""

    name: str | None = None
    email: str | None = None

    def to_xml(self) -> ET.Element:
        """Return this owner as an ``itunes:owner`` element."""
        element = ET.Element("itunes:owner")
        for tag, value in (("itunes:name", self.name), ("itunes:email", self.email)):
            if value is not None:
                ET.SubElement(element, tag).text = value
        return element