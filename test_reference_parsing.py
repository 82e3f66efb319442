#!/usr/bin/env python3
"""
Tests for splitting link hrefs into scheme, id and fragment.
"""

import pytest

from richtext.converter import Scheme, parse_reference


@pytest.mark.parametrize("href, scheme, identifier, fragment", [
    ("ezcontent://57", Scheme.CONTENT, 57, ""),
    ("ezcontent://57#intro", Scheme.CONTENT, 57, "#intro"),
    ("ezlocation://42", Scheme.LOCATION, 42, ""),
    ("ezlocation://42#sec-1.2", Scheme.LOCATION, 42, "#sec-1.2"),
    ("ezlocation://42#a#b", Scheme.LOCATION, 42, "#a#b"),
    ("ezlocation://#top", Scheme.LOCATION, 0, "#top"),
    ("ezcontent://abc", Scheme.CONTENT, 0, ""),
    ("ezcontent://12abc", Scheme.CONTENT, 12, ""),
    ("ezlocation://42  ", Scheme.LOCATION, 42, ""),
])
def test_internal_references(href, scheme, identifier, fragment):
    reference = parse_reference(href)

    assert reference.scheme is scheme
    assert reference.id == identifier
    assert reference.fragment == fragment
    assert reference.href == href


@pytest.mark.parametrize("href", [
    "",
    "#anchor",
    "https://ibexa.co/page#top",
    "mailto:someone@example.com",
    "ezobject://12",
    "/relative/path",
])
def test_other_references_are_not_resolved(href):
    reference = parse_reference(href)

    assert reference.scheme is Scheme.NONE
    assert reference.id is None
    assert reference.href == href


def test_fragment_of_external_link_is_reported():
    assert parse_reference("https://ibexa.co/page#top").fragment == "#top"


def test_raw_id_is_kept():
    reference = parse_reference("ezcontent://12abc#top")

    assert reference.id == 12
    assert reference.raw_id == "12abc"


if __name__ == "__main__":
    import sys
    sys.exit(pytest.main([__file__, "-v"]))
