"""The category element of a channel or item."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from rsskit.extension.util import element_text


@dataclass
class Category:
    """A category in an RSS feed."""

    name: str = ""
    domain: str | None = None

    @classmethod
    def from_xml(cls, element: ET.Element) -> Category:
        """Build a Category from a ``<category>`` element."""
        return cls(name=element_text(element) or "", domain=element.get("domain"))

    def to_xml(self) -> ET.Element:
        """Return this category as a ``<category>`` element."""
        element = ET.Element("category")
        if self.domain is not None:
            element.set("domain", self.domain)
        element.text = self.name
        return element