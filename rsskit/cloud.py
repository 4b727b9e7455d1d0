"""The cloud element of a channel."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

_ATTRIBUTES = (
    ("domain", "domain"),
    ("port", "port"),
    ("path", "path"),
    ("registerProcedure", "register_procedure"),
    ("protocol", "protocol"),
)


@dataclass
class Cloud:
    """A cloud to register with for notifications of channel updates."""

    domain: str = ""
    port: str = ""
    path: str = ""
    register_procedure: str = ""
    protocol: str = ""

    @classmethod
    def from_xml(cls, element: ET.Element) -> Cloud:
        """Build a Cloud from the attributes of a ``<cloud>`` element."""
        return cls(
            **{field: element.get(attr) for attr, field in _ATTRIBUTES if attr in element.attrib}
        )

    def to_xml(self) -> ET.Element:
        """Return this cloud as an empty ``<cloud>`` element carrying every attribute."""
        return ET.Element("cloud", {attr: getattr(self, field) for attr, field in _ATTRIBUTES})