# rsskit

Building blocks for RSS feeds in Python. The package has plain data classes
for parts of a feed and its namespace extensions. It has helpers that turn
parsed XML into those classes. It also has `to_xml` methods that turn the
classes back into `xml.etree.ElementTree` elements.

It needs nothing outside the standard library.

## What is included

Feed elements:

- `rsskit.category.Category` is a `<category>` with a name and an optional
  `domain`.
- `rsskit.cloud.Cloud` is the `<cloud>` element: domain, port, path,
  register procedure and protocol.
- `rsskit.enclosure.Enclosure` is an item's `<enclosure>`: URL, length and
  MIME type.

Namespace extensions live under `rsskit.extension`:

- `base.Extension` is a generic namespaced element. It holds a name, a
  value, attributes and children, and the children are keyed by local name.
- `dublincore.DublinCoreExtension` covers the Dublin Core `dc:` elements.
- `syndication.SyndicationExtension` and `syndication.UpdatePeriod` cover
  the syndication module's update period, frequency and base.
- `atom.AtomExtension` and `atom.Link` cover `atom:link` elements.
- `podcast.PodcastChannelExtension` covers the podcast namespace `guid`.
- The iTunes podcast tags are covered by
  `itunes.channel_extension.ITunesChannelExtension`,
  `itunes.item_extension.ITunesItemExtension`,
  `itunes.category.ITunesCategory` and `itunes.owner.ITunesOwner`.
  `itunes.common` holds the helpers that read the image, categories and
  owner out of an extension map.

Errors live in `rsskit.errors`. `RssError` is the base class, and
`XmlSyntaxError`, `InvalidStartTagError` and `EofError` derive from it.

## Reading

`rsskit.extension.util.parse_document` parses XML text or bytes. Prefixed
names such as `itunes:author` are kept as they are written. It raises
`EofError` when the input ends before the document is complete. It raises
`XmlSyntaxError` when the input is not well-formed.

The other helpers in `rsskit.extension.util` are:

- `element_text` returns an element's own text, trimmed, or `None` if there
  is none.
- `extension_name` splits `prefix:name` into a pair. It returns `None` when
  there is no prefix.
- `parse_extension` files an element into an extension map. The map is
  keyed by prefix, then by local name, and holds a list of `Extension`
  objects.

Each typed extension is built from the inner map for its prefix with
`from_map`:

```python
from rsskit.extension.dublincore import DublinCoreExtension
from rsskit.extension.util import extension_name, parse_document, parse_extension

root = parse_document(
    "<item><dc:creator>Jane Doe</dc:creator><dc:subject>Tech</dc:subject></item>"
)
extensions = {}
for child in root:
    ns, name = extension_name(child.tag)
    parse_extension(child, ns, name, extensions)

dc = DublinCoreExtension.from_map(extensions["dc"])
print(dc.creators)   # ['Jane Doe']
print(dc.subjects)   # ['Tech']
```

`Category.from_xml`, `Cloud.from_xml` and `Enclosure.from_xml` build their
objects from a single parsed element.

Syndication values fall back to their defaults when a value is missing or
cannot be read. The defaults are a period of daily, a frequency of 1 and a
base of `1970-01-01T00:00+00:00`. `UpdatePeriod.parse("weekly")` returns
`UpdatePeriod.WEEKLY`, and an unknown name raises `ValueError`.

## Writing

These methods return a single element:

- `Category.to_xml`
- `Cloud.to_xml`
- `Enclosure.to_xml`
- `Extension.to_xml`
- `ITunesCategory.to_xml`
- `ITunesOwner.to_xml`

These methods return a list of elements:

- `DublinCoreExtension.to_xml`
- `AtomExtension.to_xml`
- `ITunesChannelExtension.to_xml`
- `ITunesItemExtension.to_xml`
- `SyndicationExtension.to_xml(namespaces)`, which writes its elements once
  for each prefix in `namespaces` that is bound to the syndication namespace

`DublinCoreExtension`, `AtomExtension` and `ITunesItemExtension` also have
`used_namespaces`. It maps the prefix the extension writes to its namespace
URI.

```python
import xml.etree.ElementTree as ET
from rsskit.category import Category

element = Category(name="Technology", domain="http://example.com").to_xml()
print(ET.tostring(element, encoding="unicode"))
# <category domain="http://example.com">Technology</category>
```

## What it does not do

The package has no channel or item model. It does not read a whole feed
document into objects, and it does not write a complete `<rss>` document
with its namespace declarations. It provides the parts and leaves putting
them together to the caller. It has no command-line interface.