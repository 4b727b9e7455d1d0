from rsskit.extension.base import Extension
from rsskit.extension.podcast import PodcastChannelExtension


def test_from_map_reads_guid():
    guid = "ead4c236-bf58-58c6-a2c6-a6b28d128cb6"
    mapping = {"guid": [Extension(name="podcast:guid", value=guid)]}
    assert PodcastChannelExtension.from_map(mapping).guid == guid


def test_from_map_uses_first_guid():
    mapping = {
        "guid": [
            Extension(name="podcast:guid", value="first"),
            Extension(name="podcast:guid", value="second"),
        ]
    }
    assert PodcastChannelExtension.from_map(mapping).guid == "first"


def test_from_map_without_guid():
    assert PodcastChannelExtension.from_map({"other": []}) == PodcastChannelExtension()


def test_from_map_does_not_mutate_input():
    mapping = {"guid": [Extension(name="podcast:guid", value="abc")]}
    PodcastChannelExtension.from_map(mapping)
    assert list(mapping) == ["guid"]