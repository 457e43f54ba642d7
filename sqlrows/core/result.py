"""Read-only result set over materialized query rows.

A driver executes a query, materializes every record and hands them, together
with the total row count, to ``ResultSet``. Application code then reads the
rows without knowing which driver produced them.

Access patterns:
- Sized: ``count()``, ``is_loaded()``, ``len()``
- Cursor iteration: ``current()``, ``key()``, ``next()``, ``rewind()``, ``valid()``
- Seeking: ``seek()``
- Read-only indexing: ``offset_exists()``, ``offset_get()``, ``rs[i]``

All of them share one cursor. Reads by index never fail on a missing row and
return None instead. Reads and moves relative to the cursor fail loudly when
the cursor does not point at a row.
"""

import logging
from typing import TYPE_CHECKING, Any, NoReturn, Optional, Union, cast

from mypy_extensions import mypyc_attr

from sqlrows._typing import Empty, EmptyType
from sqlrows.core.cursor import RowCursor
from sqlrows.core.row import RowKind, as_row
from sqlrows.exceptions import OutOfBoundsError, RowIndexError, UnsupportedOperationError
from sqlrows.utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from sqlrows.core.row import Row
    from sqlrows.typing import RawRecord

__all__ = ("ResultSet", "create_result_set")

logger = get_logger("core.result")


@mypyc_attr(allow_interpreted_subclasses=True)
class ResultSet:
    """Materialized, read-only rows of a query result with a cursor.

    The declared ``size`` is stored as given and is never recomputed from the
    rows. Producers must keep it consistent with the number of rows handed
    over; ``count()`` and ``len()`` report ``size`` while cursor validity is
    judged against the rows actually held.

    Args:
        rows: The fully materialized records, in result order. Mappings,
            objects and opaque values are accepted; each is tagged once as a
            row.
        size: The total number of records in the result.
    """

    __slots__ = ("_cursor", "_rows", "_size")

    def __init__(self, rows: "Iterable[RawRecord]", size: int) -> None:
        self._rows: tuple[Row, ...] = tuple(as_row(record) for record in rows)
        self._size = size
        self._cursor = RowCursor()
        if size != len(self._rows):
            log_with_context(
                logger, logging.DEBUG, "Declared result size differs from materialized rows", size=size, rows=len(self._rows)
            )

    # -- Sized --

    def count(self) -> int:
        """Get the total number of rows in the result.

        Returns:
            The declared row count.
        """
        return self._size

    def is_loaded(self) -> bool:
        """Check whether any rows were loaded.

        Returns:
            True if the declared row count is positive.
        """
        return self._size > 0

    def __len__(self) -> int:
        return self._size

    # -- Cursor iteration --

    def current(self) -> "Row":
        """Get the row at the cursor without moving it.

        Raises:
            RowIndexError: If the cursor does not point at a row.

        Returns:
            The current row.
        """
        row = self._cursor.peek(self._rows)
        if row is None:
            raise RowIndexError(self._cursor.position)
        return row

    def key(self) -> int:
        """Get the cursor position."""
        return self._cursor.position

    def position(self) -> int:
        """Get the cursor position."""
        return self._cursor.position

    def next(self) -> None:
        """Move the cursor forward by one row.

        No bounds check happens here; use ``valid()`` afterwards.
        """
        self._cursor.advance()

    def rewind(self) -> None:
        """Move the cursor back to the first row."""
        self._cursor.reset()

    def valid(self) -> bool:
        """Check whether the cursor points at a row.

        Returns:
            True if a row exists at the cursor position.
        """
        return self._cursor.is_valid(self._rows)

    def __iter__(self) -> "Iterator[Row]":
        """Iterate from the first row, moving the shared cursor.

        Iteration starts with a rewind and leaves the cursor one past the last
        row.

        Yields:
            Each row in result order.
        """
        self.rewind()
        while self.valid():
            yield cast("Row", self._cursor.take(self._rows))

    # -- Seeking --

    def seek(self, position: int) -> None:
        """Move the cursor to an absolute position.

        The cursor stays at ``position`` even when the seek fails.

        Args:
            position: The position to move to.

        Raises:
            OutOfBoundsError: If no row exists at ``position``.
        """
        self._cursor.move_to(position)
        if not self.valid():
            log_with_context(logger, logging.DEBUG, "Seek out of bounds", requested=position, total=self._size)
            raise OutOfBoundsError(requested=position, total=self._size)

    # -- Reading rows --

    def fetch(self, index: "Union[int, EmptyType]" = Empty) -> "Optional[Row]":
        """Read a row by index, or read at the cursor and advance.

        Called without an index, the row at the cursor is returned and the
        cursor moves forward by one, whether or not a row was found. This
        allows ``while (row := results.fetch()) is not None`` loops.

        Args:
            index: Absolute row index. The cursor is left untouched when given.

        Returns:
            The row, or None if no row exists at the resolved index.
        """
        if index is Empty:
            return self._cursor.take(self._rows)
        return self._row_at(index)

    def fetch_all(self) -> "Sequence[Row]":
        """Get every row in result order.

        Returns:
            An immutable view of the rows.
        """
        return self._rows

    def get(self, name: str, default: Any = None) -> Any:
        """Get a named column value from the current row.

        Examples:
            Read the id of the current row::

                row_id = results.get("id")

        Args:
            name: Column or attribute name.
            default: Returned when the cursor is not on a row, the row has no
                such field, the field cannot be read, or its value is None.

        Returns:
            The column value or ``default``.
        """
        row = self._cursor.peek(self._rows)
        if row is None:
            return default
        if row.kind is RowKind.KEYED or row.kind is RowKind.STRUCTURED:
            value = row.read(name).value_or(None)
            return default if value is None else value
        return default

    def free(self) -> None:
        """Release all rows and reset the cursor and size."""
        log_with_context(logger, logging.DEBUG, "Freeing result set", size=self._size)
        self._rows = ()
        self._size = 0
        self._cursor.reset()

    # -- Read-only indexing --

    def offset_exists(self, index: Any) -> bool:
        """Check whether a row exists at ``index``."""
        return self._row_at(index) is not None

    def offset_get(self, index: Any) -> "Optional[Row]":
        """Get the row at ``index``, or None if there is none."""
        return self._row_at(index)

    def offset_set(self, index: Any, value: Any) -> NoReturn:  # noqa: ARG002
        """Reject assignment; result sets are immutable.

        Raises:
            UnsupportedOperationError: Always.
        """
        raise UnsupportedOperationError

    def offset_unset(self, index: Any) -> NoReturn:  # noqa: ARG002
        """Reject deletion; result sets are immutable.

        Raises:
            UnsupportedOperationError: Always.
        """
        raise UnsupportedOperationError

    def __getitem__(self, index: Any) -> "Optional[Row]":
        return self.offset_get(index)

    def __setitem__(self, index: Any, value: Any) -> NoReturn:
        self.offset_set(index, value)

    def __delitem__(self, index: Any) -> NoReturn:
        self.offset_unset(index)

    def _row_at(self, index: Any) -> "Optional[Row]":
        if not isinstance(index, int) or isinstance(index, bool):
            return None
        return RowCursor(index).peek(self._rows)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, position={self._cursor.position})"


def create_result_set(rows: "Sequence[RawRecord]", size: Optional[int] = None) -> ResultSet:
    """Create a ResultSet from rows a driver has fully materialized.

    Args:
        rows: The records, in result order.
        size: Total number of records. Defaults to ``len(rows)``.

    Returns:
        ResultSet instance.
    """
    return ResultSet(rows, len(rows) if size is None else size)
