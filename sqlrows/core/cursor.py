"""Cursor over a fixed sequence of rows."""

from typing import TYPE_CHECKING, Optional

from mypy_extensions import mypyc_attr

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlrows.core.row import Row

__all__ = ("RowCursor",)


@mypyc_attr(allow_interpreted_subclasses=True)
class RowCursor:
    """Integer position into a row sequence.

    The cursor never checks bounds when it moves. Whether it points at a row
    is answered by ``is_valid`` and ``peek`` against the sequence in use.
    """

    __slots__ = ("position",)

    def __init__(self, position: int = 0) -> None:
        self.position = position

    def is_valid(self, rows: "Sequence[Row]") -> bool:
        return 0 <= self.position < len(rows)

    def peek(self, rows: "Sequence[Row]") -> "Optional[Row]":
        """Return the row at the current position without moving.

        Returns:
            The row, or None if the position holds no row.
        """
        if self.is_valid(rows):
            return rows[self.position]
        return None

    def take(self, rows: "Sequence[Row]") -> "Optional[Row]":
        """Return the row at the current position, then advance by one.

        The cursor advances even when no row was found.
        """
        row = self.peek(rows)
        self.advance()
        return row

    def advance(self) -> None:
        self.position += 1

    def move_to(self, position: int) -> None:
        self.position = position

    def reset(self) -> None:
        self.position = 0

    def __repr__(self) -> str:
        return f"RowCursor(position={self.position})"
