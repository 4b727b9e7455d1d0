"""The Dublin Core metadata extension."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from rsskit.extension.base import Extension
from rsskit.extension.util import get_extension_values

NAMESPACE = "http://purl.org/dc/elements/1.1/"

# Local element name and the attribute holding its values, in output order.
_ELEMENTS = (
    ("contributor", "contributors"),
    ("coverage", "coverages"),
    ("creator", "creators"),
    ("date", "dates"),
    ("description", "descriptions"),
    ("format", "formats"),
    ("identifier", "identifiers"),
    ("language", "languages"),
    ("publisher", "publishers"),
    ("relation", "relations"),
    ("rights", "rights"),
    ("source", "sources"),
    ("subject", "subjects"),
    ("title", "titles"),
    ("type", "types"),
)
_FIELD_BY_ELEMENT = dict(_ELEMENTS)


@dataclass
class DublinCoreExtension:
    """Dublin Core elements attached to a channel or item."""

    contributors: list[str] = field(default_factory=list)
    coverages: list[str] = field(default_factory=list)
    creators: list[str] = field(default_factory=list)
    dates: list[str] = field(default_factory=list)
    descriptions: list[str] = field(default_factory=list)
    formats: list[str] = field(default_factory=list)
    identifiers: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    publishers: list[str] = field(default_factory=list)
    relations: list[str] = field(default_factory=list)
    rights: list[str] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
    subjects: list[str] = field(default_factory=list)
    titles: list[str] = field(default_factory=list)
    types: list[str] = field(default_factory=list)

    @classmethod
    def from_map(cls, mapping: dict[str, list[Extension]]) -> DublinCoreExtension:
        """Build the extension from elements keyed by local name; unknown names are ignored."""
        return cls(
            **{
                _FIELD_BY_ELEMENT[key]: get_extension_values(extensions)
                for key, extensions in mapping.items()
                if key in _FIELD_BY_ELEMENT
            }
        )

    def to_xml(self) -> list[ET.Element]:
        """Return one ``dc:`` text element per value, grouped in the standard element order."""
        elements = []
        for name, attr in _ELEMENTS:
            for value in getattr(self, attr):
                element = ET.Element(f"dc:{name}")
                element.text = value
                elements.append(element)
        return elements

    def used_namespaces(self) -> dict[str, str]:
        """Return the namespace declarations this extension needs."""
        return {"dc": NAMESPACE}