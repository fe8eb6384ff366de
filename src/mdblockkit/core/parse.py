"""Markdown source reading and markdown-it syntax tree construction"""

from pathlib import Path

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    try:
        return MarkdownIt(preset, options_update={"linkify": False})
    except KeyError as e:
        raise ValueError(f"Unknown parser preset '{preset}'") from e


def parse_text(text: str, parser_config: str = 'gfm-like') -> SyntaxTreeNode:
    """Parse markdown text into a syntax tree rooted at a 'root' node."""
    return SyntaxTreeNode(_make_parser(parser_config).parse(text))


def decode_source(data: bytes) -> str:
    """Decode raw input as UTF-8; undecodable bytes become U+FFFD."""
    return data.decode('utf-8', errors='replace')


def read_source(path: Path) -> str:
    """Read a markdown file as UTF-8 text."""
    return decode_source(path.read_bytes())
