"""Unit tests for core/convert/escape.py"""

import pytest

from mdblockkit.core.convert.escape import escape


@pytest.mark.parametrize("text,expected", [
    ("plain",          "plain"),
    ("a & b",          "a &amp; b"),
    ("<tag>",          "&lt;tag&gt;"),
    ("&&<<>>",         "&amp;&amp;&lt;&lt;&gt;&gt;"),
    ("",               ""),
    ("café > tea", "café &gt; tea"),
])
def test_escape(text, expected):
    """Reserved characters become entities; everything else is unchanged."""
    assert escape(text) == expected


def test_escape_does_not_double_escape_existing_entities():
    """An existing entity is treated as literal text and its & escaped again."""
    assert escape("&amp;") == "&amp;amp;"
