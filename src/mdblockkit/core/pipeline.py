"""Parse-then-convert entry points"""

from pathlib import Path

from mdblockkit.core.convert.walker import Converter
from mdblockkit.core.models import Layout
from mdblockkit.core.parse import parse_text, read_source


def convert_markdown(text: str, parser_config: str = 'gfm-like', trace: bool = False) -> Layout:
    """Parse markdown text and convert it into a Block Kit layout."""
    return Converter(trace=trace).convert(parse_text(text, parser_config))


def convert_file(path: Path, parser_config: str = 'gfm-like', trace: bool = False) -> Layout:
    """Read a markdown file and convert it into a Block Kit layout."""
    return convert_markdown(read_source(path), parser_config, trace)
