"""The podcast namespace extension."""

from __future__ import annotations

from dataclasses import dataclass

from rsskit.extension.base import Extension
from rsskit.extension.util import remove_extension_value

NAMESPACE = "https://github.com/Podcastindex-org/podcast-namespace/blob/main/docs/1.0.md"


@dataclass
class PodcastChannelExtension:
    """Podcast namespace elements attached to a channel."""

    guid: str | None = None

    @classmethod
    def from_map(cls, mapping: dict[str, list[Extension]]) -> PodcastChannelExtension:
        """Build the extension from elements keyed by local name."""
        return cls(guid=remove_extension_value(dict(mapping), "guid"))