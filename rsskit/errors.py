"""Exceptions raised while reading RSS documents."""


class RssError(Exception):
    """Base class for every error raised while reading a feed."""


class XmlSyntaxError(RssError):
    """The input is not well-formed XML or is not valid text."""


class InvalidStartTagError(RssError):
    """The input did not begin with an ``<rss>`` or ``<rdf:RDF>`` tag."""

    def __init__(self, message: str = "the input did not begin with an rss tag") -> None:
        super().__init__(message)


class EofError(RssError):
    """The input ended before a complete channel element was found."""

    def __init__(
        self,
        message: str = "reached end of input without finding a complete channel",
    ) -> None:
        super().__init__(message)