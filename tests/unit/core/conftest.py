"""Shared fixtures for core unit tests"""

from pathlib import Path

import pytest
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdblockkit.core.convert.walker import convert


DATA_DIR = Path(__file__).parent.parent.parent / "data"


@pytest.fixture(name="parser")
def parser_fixture():
    return MarkdownIt("gfm-like", options_update={"linkify": False})


@pytest.fixture(name="blocks_of")
def blocks_of_fixture(parser):
    """Return a helper that converts markdown text into a list of Blocks."""
    def _blocks_of(md: str):
        return convert(SyntaxTreeNode(parser.parse(md))).blocks
    return _blocks_of


@pytest.fixture(name="read_data")
def read_data_fixture():
    def _read(name: str) -> str:
        return (DATA_DIR / name).read_text(encoding="utf-8")
    return _read
