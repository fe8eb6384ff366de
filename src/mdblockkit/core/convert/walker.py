"""Depth-first conversion of a markdown-it syntax tree into a Block Kit layout"""

import logging
from dataclasses import dataclass, field
from typing import Callable

from markdown_it.tree import SyntaxTreeNode

from mdblockkit.core.convert.blocks import append_divider, append_heading, append_text
from mdblockkit.core.convert.escape import escape
from mdblockkit.core.convert.inline import SPAN_MARKERS, code_fence, code_span, link_close, link_open
from mdblockkit.core.convert.lists import ListNesting
from mdblockkit.core.models import Block, Layout


logger = logging.getLogger(__name__)

TAG_QUOTE = '> '
LIST_TYPES = {'bullet_list', 'ordered_list'}

# Walked through without emitting anything.
PASS_THROUGH = {'root', 'inline'}
# Known but unsupported: no output, children are not visited.
DROPPED = {
    'table', 'thead', 'tbody', 'tr', 'th', 'td',
    'image',
    'html_block', 'html_inline',
}


class UnsupportedNodeError(RuntimeError):
    """Raised when the tree contains a node type the converter does not know."""

    def __init__(self, node_type: str):
        super().__init__(f"unknown node type {node_type}")
        self.node_type = node_type


@dataclass
class _Context:
    """Traversal-local state for a single conversion."""
    buf: str = ''
    lists: ListNesting = field(default_factory=ListNesting)
    blocks: list[Block] = field(default_factory=list)

    def commit(self) -> None:
        """Flush the buffer into the trailing section."""
        append_text(self.blocks, self.buf)
        self.buf = ''


def _parent_is(node: SyntaxTreeNode, node_type: str) -> bool:
    return node.parent is not None and node.parent.type == node_type


def _sibling_is(sibling: SyntaxTreeNode | None, types: set[str]) -> bool:
    return sibling is not None and sibling.type in types


# --- leaves ---

def _text(node, ctx: _Context) -> None:
    ctx.buf += escape(node.content)


def _line_break(node, ctx: _Context) -> None:
    ctx.buf += '\n'


def _code_inline(node, ctx: _Context) -> None:
    ctx.buf += code_span(node.content)


def _code_block(node, ctx: _Context) -> None:
    ctx.buf += code_fence(node.content)
    ctx.commit()


def _hr(node, ctx: _Context) -> None:
    append_divider(ctx.blocks)


# --- containers ---

def _noop(node, ctx: _Context) -> None:
    pass


def _span(node, ctx: _Context) -> None:
    ctx.buf += SPAN_MARKERS[node.type]


def _link_enter(node, ctx: _Context) -> None:
    ctx.buf += link_open(node.attrs.get('href'))


def _link_exit(node, ctx: _Context) -> None:
    ctx.buf += link_close()


def _heading_exit(node, ctx: _Context) -> None:
    append_heading(ctx.blocks, ctx.buf)
    ctx.buf = ''


def _paragraph_enter(node, ctx: _Context) -> None:
    if _parent_is(node, 'blockquote'):
        ctx.buf += TAG_QUOTE
    if _sibling_is(node.previous_sibling, LIST_TYPES):
        ctx.buf += '\n'


def _paragraph_exit(node, ctx: _Context) -> None:
    quoted = _parent_is(node, 'blockquote')
    if quoted:
        ctx.buf = ctx.buf.replace('\n', '\n' + TAG_QUOTE)
    if not _parent_is(node, 'list_item'):
        ctx.buf += '\n'
    if quoted and _sibling_is(node.next_sibling, {'paragraph'}):
        ctx.buf += TAG_QUOTE
    ctx.buf += '\n'
    ctx.commit()


def _list_enter(node, ctx: _Context) -> None:
    ctx.lists.enter_list(ordered=node.type == 'ordered_list')


def _list_exit(node, ctx: _Context) -> None:
    ctx.lists.exit_list()


def _item_enter(node, ctx: _Context) -> None:
    ordered = _parent_is(node, 'ordered_list')
    ctx.buf += ctx.lists.item_prefix(ordered, node.markup if ordered else None)


def _item_exit(node, ctx: _Context) -> None:
    # An item without a paragraph (e.g. an empty `-`) still owns its prefix.
    if ctx.buf:
        ctx.buf += '\n'
        ctx.commit()


Hook = Callable[[SyntaxTreeNode, _Context], None]

LEAVES: dict[str, Hook] = {
    'text':        _text,
    'softbreak':   _line_break,
    'hardbreak':   _line_break,
    'code_inline': _code_inline,
    'fence':       _code_block,
    'code_block':  _code_block,
    'hr':          _hr,
}

# node type -> (pre-order hook, post-order hook)
CONTAINERS: dict[str, tuple[Hook, Hook]] = {
    'heading':      (_noop, _heading_exit),
    'paragraph':    (_paragraph_enter, _paragraph_exit),
    'em':           (_span, _span),
    'strong':       (_span, _span),
    's':            (_span, _span),
    'link':         (_link_enter, _link_exit),
    'bullet_list':  (_list_enter, _list_exit),
    'ordered_list': (_list_enter, _list_exit),
    'list_item':    (_item_enter, _item_exit),
    'blockquote':   (_noop, _noop),
}


class Converter:
    """Converts markdown-it syntax trees into Block Kit layouts.

    The converter keeps no per-document state between calls: each
    convert() builds a fresh context, so one instance can be reused.
    """

    def __init__(self, trace: bool = False):
        self.trace = trace

    def debug(self) -> "Converter":
        """Toggle traversal tracing."""
        self.trace = not self.trace
        return self

    def convert(self, tree: SyntaxTreeNode) -> Layout:
        ctx = _Context()
        self._visit(tree, ctx)
        layout = Layout(blocks=ctx.blocks)
        if self.trace:
            logger.debug("layout:\n%s", layout.to_json(indent=2))
        return layout

    def _log(self, node: SyntaxTreeNode, entering: bool) -> None:
        if self.trace:
            literal = '' if node.is_root else node.content
            logger.debug("%s entering=%s %r", node.type, entering, literal)

    def _visit(self, node: SyntaxTreeNode, ctx: _Context) -> None:
        kind = node.type
        if kind in PASS_THROUGH:
            self._log(node, True)
            for child in node.children:
                self._visit(child, ctx)
            self._log(node, False)
        elif kind in DROPPED:
            self._log(node, True)
        elif kind in LEAVES:
            self._log(node, True)
            LEAVES[kind](node, ctx)
        elif kind in CONTAINERS:
            enter, leave = CONTAINERS[kind]
            self._log(node, True)
            enter(node, ctx)
            for child in node.children:
                self._visit(child, ctx)
            self._log(node, False)
            leave(node, ctx)
        else:
            raise UnsupportedNodeError(kind)


def convert(tree: SyntaxTreeNode, trace: bool = False) -> Layout:
    """Convert a syntax tree into a Layout with a fresh Converter."""
    return Converter(trace=trace).convert(tree)
