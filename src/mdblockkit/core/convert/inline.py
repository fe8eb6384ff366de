"""Inline mrkdwn markers for emphasis, code, and links"""

from typing import Optional

from mdblockkit.core.convert.escape import escape


TAG_ITALIC = '_'
TAG_STRONG = '*'
TAG_STRIKE = '~'
TAG_CODE = '`'
TAG_CODE_BLOCK = '```'
TAG_LINK_OPEN = '<'
TAG_LINK_CLOSE = '>'
LINK_SEPARATOR = '|'

# Symmetric markers: the same string opens and closes the span.
SPAN_MARKERS: dict[str, str] = {
    'em':     TAG_ITALIC,
    'strong': TAG_STRONG,
    's':      TAG_STRIKE,
}


def code_span(literal: str) -> str:
    """Wrap an inline code literal in single backticks."""
    return f"{TAG_CODE}{escape(literal)}{TAG_CODE}"


def code_fence(literal: str) -> str:
    """Wrap a code block literal in a triple-backtick fence followed by a blank line."""
    return f"{TAG_CODE_BLOCK}\n{escape(literal)}{TAG_CODE_BLOCK}\n\n"


def link_open(destination: Optional[str]) -> str:
    """Opening of a link: `<dest|`, or a bare `<` when there is no destination."""
    if destination:
        return f"{TAG_LINK_OPEN}{destination}{LINK_SEPARATOR}"
    return TAG_LINK_OPEN


def link_close() -> str:
    return TAG_LINK_CLOSE
