"""Extraction of icon, canonical and manifest links from HTML documents"""

import logging
from typing import Iterator, Optional

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from faviconurl.constants import ICON_REL_VALUES, IMAGE_META_NAMES, LINK_ELEMENTS, PARSER
from faviconurl.discovery.normalizer import parse_url
from faviconurl.exceptions import DecodeError, InvalidURLError, LinkParseError
from faviconurl.models import Diagnostic, Link, LinkExtraction, LinkKind

logger = logging.getLogger(__name__)


def parse_document(markup: bytes | str) -> BeautifulSoup:
    """Parse an HTML page.

    `rel` is kept as the raw attribute string instead of a list of tokens.

    Raises:
        DecodeError: If the parser rejects the markup.
    """
    try:
        return BeautifulSoup(markup, PARSER, multi_valued_attributes=None)
    except ParserRejectedMarkup as e:
        raise DecodeError(f"failed to parse: {e}") from e


def iter_link_elements(root: Tag) -> Iterator[Tag]:
    """Yield every <link> and <meta> element below `root` in document order."""
    stack: list[Tag] = [root]
    while stack:
        node = stack.pop()
        if node.name in LINK_ELEMENTS and node is not root:
            yield node
            continue

        # Reversed, so the first child is visited next.
        stack.extend(child for child in reversed(node.contents) if isinstance(child, Tag))


def classify_rel(rel: str) -> Optional[LinkKind]:
    """Map a `rel` attribute value to a link kind."""
    match rel:
        case "canonical":
            return LinkKind.CANONICAL
        case "icon":
            return LinkKind.ICON
        case "manifest":
            return LinkKind.MANIFEST

    if any(value in ICON_REL_VALUES for value in rel.split(" ")):
        return LinkKind.ICON

    return None


def parse_target(value: str, attribute: str) -> str:
    """Check that an attribute value is a URL and return it.

    Raises:
        LinkParseError: If `value` is not a valid URL.
    """
    try:
        parse_url(value)
    except InvalidURLError as e:
        raise LinkParseError(f"error parsing link {attribute} {value!r}: {e}") from e
    return value


class LinkExtractor:
    """Find icon, canonical and manifest references in an HTML document."""

    def extract(self, document: Tag) -> LinkExtraction:
        """Classify the <link> and <meta> elements of `document`.

        Elements that are not recognized are dropped. Unparseable URLs are
        dropped and reported in the returned warnings.
        """
        extraction = LinkExtraction()
        for element in iter_link_elements(document):
            try:
                link = self.classify(element)
            except LinkParseError as e:
                logger.debug(str(e))
                extraction.warnings.append(Diagnostic.from_error(e))
                continue

            if link is not None:
                extraction.links.append(link)

        return extraction

    def classify(self, element: Tag) -> Optional[Link]:
        """Build a Link from a <link> or <meta> element, if it is one we use.

        Raises:
            LinkParseError: If the element is recognized but its URL is invalid.
        """
        if element.name == "link":
            return self._classify_link(element)
        return self._classify_meta(element)

    def _classify_link(self, element: Tag) -> Optional[Link]:
        rel = element.get("rel")
        href = element.get("href")
        if rel is None or href is None:
            return None

        kind = classify_rel(str(rel))
        if kind is None:
            return None

        return Link(kind=kind, target=parse_target(str(href), "href"))

    def _classify_meta(self, element: Tag) -> Optional[Link]:
        name = element.get("name")
        content = element.get("content")
        if name not in IMAGE_META_NAMES or content is None:
            return None

        return Link(kind=LinkKind.ICON, target=parse_target(str(content), "content"))
