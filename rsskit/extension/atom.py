"""The Atom link extension."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from rsskit.extension.base import Extension

NAMESPACE = "http://www.w3.org/2005/Atom"


@dataclass
class Link:
    """An Atom link."""

    href: str = ""
    rel: str = "alternate"
    hreflang: str | None = None
    mime_type: str | None = None
    title: str | None = None
    length: str | None = None


@dataclass
class AtomExtension:
    """Atom elements attached to a channel."""

    links: list[Link] = field(default_factory=list)

    @classmethod
    def from_map(cls, mapping: dict[str, list[Extension]]) -> AtomExtension:
        """Build the extension from elements keyed by local name.

        Link elements without an ``href`` attribute are dropped.
        """
        links = []
        for ext in mapping.get("link", []):
            attrs = ext.attrs
            if "href" not in attrs:
                continue
            links.append(
                Link(
                    href=attrs["href"],
                    rel=attrs.get("rel", Link().rel),
                    hreflang=attrs.get("hreflang"),
                    mime_type=attrs.get("type"),
                    title=attrs.get("title"),
                    length=attrs.get("length"),
                )
            )
        return cls(links=links)

    def to_xml(self) -> list[ET.Element]:
        """Return one empty ``atom:link`` element per link."""
        elements = []
        for link in self.links:
            element = ET.Element("atom:link", {"href": link.href, "rel": link.rel})
            for attr, value in (
                ("hreflang", link.hreflang),
                ("type", link.mime_type),
                ("title", link.title),
                ("length", link.length),
            ):
                if value is not None:
                    element.set(attr, value)
            elements.append(element)
        return elements

    def used_namespaces(self) -> dict[str, str]:
        """Return the namespace declarations this extension needs."""
        return {"atom": NAMESPACE}