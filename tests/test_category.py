import xml.etree.ElementTree as ET

from rsskit.category import Category
from rsskit.extension.util import parse_document


def test_from_xml_with_domain():
    element = parse_document('<category domain="http://example.com">Technology</category>')
    category = Category.from_xml(element)
    assert category == Category(name="Technology", domain="http://example.com")


def test_from_xml_without_domain():
    category = Category.from_xml(parse_document("<category> News </category>"))
    assert category.name == "News"
    assert category.domain is None


def test_from_xml_empty_name():
    category = Category.from_xml(parse_document("<category/>"))
    assert category.name == ""


def test_from_xml_ignores_other_attributes():
    element = parse_document('<category scheme="x" domain="d">c</category>')
    assert Category.from_xml(element) == Category(name="c", domain="d")


def test_to_xml_with_domain():
    element = Category(name="Technology", domain="http://example.com").to_xml()
    assert element.tag == "category"
    assert element.text == "Technology"
    assert dict(element.attrib) == {"domain": "http://example.com"}


def test_to_xml_without_domain_has_no_attributes():
    element = Category(name="Technology").to_xml()
    assert dict(element.attrib) == {}
    assert element.text == "Technology"


def test_round_trip():
    original = Category(name="Tech & Science", domain="http://example.com/cats")
    text = ET.tostring(original.to_xml(), encoding="unicode")
    assert Category.from_xml(parse_document(text)) == original