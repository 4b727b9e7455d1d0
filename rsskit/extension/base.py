"""The generic namespaced extension element."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field


@dataclass
class Extension:
    """A namespaced extension element such as an iTunes or Dublin Core tag."""

    name: str = ""
    value: str | None = None
    attrs: dict[str, str] = field(default_factory=dict)
    children: dict[str, list[Extension]] = field(default_factory=dict)

    def to_xml(self) -> ET.Element:
        """Return this extension as an XML element, attributes and children sorted by key."""
        element = ET.Element(self.name, {key: self.attrs[key] for key in sorted(self.attrs)})
        element.text = self.value
        for key in sorted(self.children):
            element.extend(child.to_xml() for child in self.children[key])
        return element


ExtensionMap = dict[str, dict[str, list[Extension]]]