# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the extractor.py module."""

import pytest

from faviconurl.discovery.extractor import (
    LinkExtractor,
    classify_rel,
    iter_link_elements,
    parse_document,
)
from faviconurl.models import Link, LinkKind


def extract(html: str):
    """Extract links from an HTML string."""
    return LinkExtractor().extract(parse_document(html))


class TestClassifyRel:
    """Tests for classify_rel."""

    @pytest.mark.parametrize(
        ["rel", "expected"],
        [
            ("canonical", LinkKind.CANONICAL),
            ("icon", LinkKind.ICON),
            ("manifest", LinkKind.MANIFEST),
            ("shortcut icon", LinkKind.ICON),
            ("apple-touch-icon", LinkKind.ICON),
            ("apple-touch-icon-precomposed", LinkKind.ICON),
            ("stylesheet", None),
            ("mask-icon", None),
            ("Icon", None),
            ("canonical icon", LinkKind.ICON),
            ("alternate manifest", None),
        ],
    )
    def test_classify_rel(self, rel, expected):
        """Test the mapping from rel values to link kinds."""
        assert classify_rel(rel) is expected


class TestIterLinkElements:
    """Tests for iter_link_elements."""

    def test_document_order(self):
        """Test that link and meta elements are yielded in document order."""
        document = parse_document(
            """
            <html>
              <head><meta name="a"><link rel="b"></head>
              <body><div><p><link rel="c"></p></div><meta name="d"></body>
            </html>
            """
        )

        names = [
            element.get("name") or element.get("rel") for element in iter_link_elements(document)
        ]

        assert names == ["a", "b", "c", "d"]

    def test_other_elements_are_skipped(self):
        """Test that only link and meta elements are yielded."""
        document = parse_document("<html><head><title>t</title><script></script></head></html>")

        assert list(iter_link_elements(document)) == []


class TestLinkExtractor:
    """Tests for LinkExtractor.extract."""

    def test_link_tags(self):
        """Test that icon, canonical and manifest links are classified."""
        extraction = extract(
            """
            <html><head>
              <link rel="canonical" href="https://example.com/">
              <link rel="icon" href="/favicon.png">
              <link rel="apple-touch-icon" href="apple.png">
              <link rel="manifest" href="/site.webmanifest">
              <link rel="stylesheet" href="/style.css">
            </head></html>
            """
        )

        assert extraction.links == [
            Link(kind=LinkKind.CANONICAL, target="https://example.com/"),
            Link(kind=LinkKind.ICON, target="/favicon.png"),
            Link(kind=LinkKind.ICON, target="apple.png"),
            Link(kind=LinkKind.MANIFEST, target="/site.webmanifest"),
        ]
        assert extraction.warnings == []

    def test_attribute_order_is_irrelevant(self):
        """Test that href may come before rel."""
        extraction = extract('<link href="/f.png" rel="shortcut icon">')

        assert extraction.links == [Link(kind=LinkKind.ICON, target="/f.png")]

    def test_meta_image_tags(self):
        """Test that og:image and twitter:image meta tags become icons."""
        extraction = extract(
            """
            <head>
              <meta name="og:image" content="https://cdn.example.com/og.png">
              <meta name="twitter:image" content="/tw.png">
              <meta property="og:image" content="/property.png">
              <meta name="description" content="A site">
              <meta name="twitter:image">
            </head>
            """
        )

        assert extraction.links == [
            Link(kind=LinkKind.ICON, target="https://cdn.example.com/og.png"),
            Link(kind=LinkKind.ICON, target="/tw.png"),
        ]

    def test_link_without_href_is_dropped(self):
        """Test that a link without href yields no record."""
        extraction = extract('<link rel="icon">')

        assert extraction.links == []
        assert extraction.warnings == []

    def test_malformed_href_is_reported(self):
        """Test that an unparseable href is skipped with a warning."""
        extraction = extract(
            '<link rel="icon" href="/bad%zz.png"><link rel="icon" href="/good.png">'
        )

        assert extraction.links == [Link(kind=LinkKind.ICON, target="/good.png")]
        assert len(extraction.warnings) == 1
        assert extraction.warnings[0].kind == "link-parse-failure"
        assert "/bad%zz.png" in extraction.warnings[0].message

    def test_malformed_meta_content_is_reported(self):
        """Test that an unparseable meta content is skipped with a warning."""
        extraction = extract('<meta name="og:image" content=":nope">')

        assert extraction.links == []
        assert [warning.kind for warning in extraction.warnings] == ["link-parse-failure"]

    def test_unrecognized_element_with_bad_href_is_silent(self):
        """Test that unrecognized links are dropped without a warning."""
        extraction = extract('<link rel="stylesheet" href="/bad%zz.css">')

        assert extraction.links == []
        assert extraction.warnings == []

    def test_empty_document(self):
        """Test that a page without links yields nothing."""
        extraction = extract("<html><head></head><body></body></html>")

        assert extraction.links == []
        assert extraction.warnings == []
