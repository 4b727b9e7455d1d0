"""Parsing helpers for XML documents and extension elements."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from xml.parsers import expat
from xml.parsers.expat import errors as expat_errors

from rsskit.errors import EofError, XmlSyntaxError
from rsskit.extension.base import Extension, ExtensionMap

_EOF_CODES = frozenset(
    {
        expat_errors.codes[expat_errors.XML_ERROR_NO_ELEMENTS],
        expat_errors.codes[expat_errors.XML_ERROR_UNCLOSED_TOKEN],
    }
)


def parse_document(text: str | bytes) -> ET.Element:
    """Parse an XML document, keeping prefixed names such as ``itunes:author`` verbatim.

    Raises EofError if the input ends before the document is complete, and
    XmlSyntaxError if it is not well-formed.
    """
    builder = ET.TreeBuilder()
    parser = expat.ParserCreate()
    parser.buffer_text = True
    started = False

    def start(tag: str, attrs: dict[str, str]) -> None:
        nonlocal started
        started = True
        builder.start(tag, attrs)

    parser.StartElementHandler = start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data

    try:
        parser.Parse(text, True)
    except expat.ExpatError as exc:
        if not started or exc.code in _EOF_CODES:
            raise EofError() from exc
        raise XmlSyntaxError(str(exc)) from exc
    return builder.close()


def _own_text(element: ET.Element) -> str:
    return "".join([element.text or "", *(child.tail or "" for child in element)])


def _local_name(tag: str) -> str:
    _, sep, local = tag.partition(":")
    return local if sep else tag


def element_text(element: ET.Element) -> str | None:
    """Return the trimmed text directly inside an element, or None if there is none."""
    text = _own_text(element).strip()
    return text or None


def extension_name(element_name: str) -> tuple[str, str] | None:
    """Split a prefixed element name into ``(prefix, local name)``.

    Returns None when the name has no prefix.
    """
    ns, sep, name = element_name.partition(":")
    if not ns or not sep:
        return None
    return ns, name


def parse_extension_element(element: ET.Element) -> Extension:
    """Build an Extension, with its children keyed by local name, from an element."""
    extension = Extension(name=element.tag, attrs=dict(element.attrib))
    for child in element:
        extension.children.setdefault(_local_name(child.tag), []).append(
            parse_extension_element(child)
        )
    extension.value = element_text(element)
    return extension


def parse_extension(element: ET.Element, ns: str, name: str, extensions: ExtensionMap) -> None:
    """Parse an extension element and file it in ``extensions`` under ``ns`` and ``name``."""
    extensions.setdefault(ns, {}).setdefault(name, []).append(parse_extension_element(element))


def get_extension_values(extensions: list[Extension]) -> list[str]:
    """Return the values of the extensions that have one, in order."""
    return [ext.value for ext in extensions if ext.value is not None]


def remove_extension_value(mapping: dict[str, list[Extension]], key: str) -> str | None:
    """Remove ``key`` from the mapping and return the value of its first extension."""
    extensions = mapping.pop(key, None)
    if not extensions:
        return None
    return extensions[0].value