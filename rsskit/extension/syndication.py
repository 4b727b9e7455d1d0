"""The RSS 1.0 syndication module extension."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum

from rsskit.extension.base import Extension

NAMESPACE = "http://purl.org/rss/1.0/modules/syndication/"

_U32_MAX = 0xFFFFFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")


class UpdatePeriod(Enum):
    """The unit of time between refreshes of a channel."""

    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, text: str) -> UpdatePeriod:
        """Return the period named by ``text``; raise ValueError for an unknown name."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"unknown update period: {text!r}") from None

    def __str__(self) -> str:
        return self.value


def _parse_frequency(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    number = int(text)
    return number if number <= _U32_MAX else None


def _first_value(mapping: dict[str, list[Extension]], key: str) -> str | None:
    extensions = mapping.get(key)
    if not extensions:
        return None
    return extensions[0].value


@dataclass
class SyndicationExtension:
    """How often a channel is refreshed."""

    period: UpdatePeriod = UpdatePeriod.DAILY
    frequency: int = 1
    base: str = "1970-01-01T00:00+00:00"

    @classmethod
    def from_map(cls, mapping: dict[str, list[Extension]]) -> SyndicationExtension:
        """Build the extension from elements keyed by local name.

        Values that cannot be parsed leave the corresponding default in place.
        """
        ext = cls()
        period = _first_value(mapping, "updatePeriod")
        if period is not None:
            try:
                ext.period = UpdatePeriod.parse(period)
            except ValueError:
                pass
        frequency = _first_value(mapping, "updateFrequency")
        if frequency is not None:
            parsed = _parse_frequency(frequency)
            if parsed is not None:
                ext.frequency = parsed
        base = _first_value(mapping, "updateBase")
        if base is not None:
            ext.base = base
        return ext

    def to_xml(self, namespaces: dict[str, str]) -> list[ET.Element]:
        """Return the elements for every prefix in ``namespaces`` bound to this namespace."""
        elements = []
        for prefix in sorted(namespaces):
            if namespaces[prefix] != NAMESPACE:
                continue
            for name, text in (
                ("updatePeriod", str(self.period)),
                ("updateFrequency", str(self.frequency)),
                ("updateBase", self.base),
            ):
                element = ET.Element(f"{prefix}:{name}")
                element.text = text
                elements.append(element)
        return elements