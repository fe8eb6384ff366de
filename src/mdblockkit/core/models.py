"""Block Kit layout models produced by the converter"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class BlockType(str, Enum):
    """Block kinds the converter emits"""
    header = "header"
    divider = "divider"
    section = "section"


class TextType(str, Enum):
    """Text object formats: plain for headers, mrkdwn for sections"""
    plain_text = "plain_text"
    mrkdwn = "mrkdwn"


class Text(BaseModel):
    type: TextType
    text: str


class Block(BaseModel):
    """A single layout block; dividers carry no text."""
    type: BlockType
    text: Optional[Text] = None

    @classmethod
    def header(cls, text: str) -> "Block":
        return cls(type=BlockType.header, text=Text(type=TextType.plain_text, text=text))

    @classmethod
    def divider(cls) -> "Block":
        return cls(type=BlockType.divider)

    @classmethod
    def section(cls, text: str) -> "Block":
        return cls(type=BlockType.section, text=Text(type=TextType.mrkdwn, text=text))


class Layout(BaseModel):
    """Ordered block sequence, usable as a chat API payload."""
    blocks: list[Block] = []

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready dict with text omitted on dividers."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(exclude_none=True, indent=indent)
