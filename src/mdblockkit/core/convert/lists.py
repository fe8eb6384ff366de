"""Nested list depth and per-depth ordinal tracking"""

from typing import Optional


BULLET = '-'
INDENT = '   '


class ListNesting:
    """Current list depth plus the next ordinal for each ordered list in scope.

    Ordinals are keyed by depth and dropped when their list closes, so a
    sibling list at the same depth starts again at 1:

        1.            # depth 1 -> 1
        2.            # depth 1 -> 2
           1.         # depth 2 -> 1
           2.         # depth 2 -> 2
        3.            # depth 1 -> 3
    """

    def __init__(self) -> None:
        self.depth = 0
        self.ordinals: dict[int, int] = {}

    def enter_list(self, ordered: bool) -> None:
        self.depth += 1
        if ordered:
            self.ordinals[self.depth] = 1

    def exit_list(self) -> None:
        self.ordinals.pop(self.depth, None)
        self.depth -= 1

    def item_prefix(self, ordered: bool, delimiter: Optional[str] = None) -> str:
        """Return indent + marker + space for an item at the current depth."""
        indent = INDENT * max(self.depth - 1, 0)
        if ordered:
            ordinal = self.ordinals.get(self.depth, 1)
            self.ordinals[self.depth] = ordinal + 1
            marker = f"{ordinal}{delimiter or '.'}"
        else:
            marker = BULLET
        return f"{indent}{marker} "
