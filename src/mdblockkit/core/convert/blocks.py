"""Block accumulation: headers, dividers, and coalesced sections"""

from mdblockkit.core.models import Block, BlockType


def append_text(blocks: list[Block], text: str) -> list[Block]:
    """Extend the trailing section with text, or start a new section."""
    last = blocks[-1] if blocks else None
    if last is not None and last.type == BlockType.section:
        last.text.text += text
        return blocks
    blocks.append(Block.section(text))
    return blocks


def append_heading(blocks: list[Block], text: str) -> list[Block]:
    """Append a header followed by its divider; headings never merge."""
    blocks.append(Block.header(text))
    blocks.append(Block.divider())
    return blocks


def append_divider(blocks: list[Block]) -> list[Block]:
    blocks.append(Block.divider())
    return blocks
