import xml.etree.ElementTree as ET

from rsskit.extension.base import Extension
from rsskit.extension.dublincore import NAMESPACE, DublinCoreExtension
from rsskit.extension.util import parse_extension_element


def _ext(name, value):
    return Extension(name=f"dc:{name}", value=value)


def test_from_map_collects_values():
    mapping = {
        "creator": [_ext("creator", "Alice"), _ext("creator", "Bob")],
        "rights": [_ext("rights", "Open access")],
        "type": [_ext("type", "Text")],
    }
    ext = DublinCoreExtension.from_map(mapping)
    assert ext.creators == ["Alice", "Bob"]
    assert ext.rights == ["Open access"]
    assert ext.types == ["Text"]
    assert ext.titles == []


def test_from_map_skips_missing_values_and_unknown_keys():
    mapping = {
        "title": [_ext("title", None), _ext("title", "Only")],
        "unknown": [_ext("unknown", "ignored")],
    }
    ext = DublinCoreExtension.from_map(mapping)
    assert ext == DublinCoreExtension(titles=["Only"])


def test_to_xml_order_and_text():
    ext = DublinCoreExtension(
        types=["Text"], contributors=["Carol"], titles=["A", "B"], dates=["2017-01-01"]
    )
    elements = ext.to_xml()
    assert [e.tag for e in elements] == [
        "dc:contributor",
        "dc:date",
        "dc:title",
        "dc:title",
        "dc:type",
    ]
    assert [e.text for e in elements] == ["Carol", "2017-01-01", "A", "B", "Text"]


def test_to_xml_empty_extension_has_no_elements():
    assert DublinCoreExtension().to_xml() == []


def test_used_namespaces():
    assert DublinCoreExtension().used_namespaces() == {"dc": NAMESPACE}
    assert NAMESPACE == "http://purl.org/dc/elements/1.1/"