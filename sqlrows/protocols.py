"""Runtime-checkable protocols for result set capabilities.

Consumers can depend on a single capability instead of the concrete
``ResultSet`` type, and check for it with ``isinstance()``.
"""

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlrows.core.row import Row

__all__ = ("CursorIterable", "ReadOnlyIndexable", "SeekableResult", "SizedResult")


@runtime_checkable
class SizedResult(Protocol):
    """Protocol for results that report their row count."""

    def count(self) -> int:
        """Get the total number of rows."""
        ...

    def is_loaded(self) -> bool:
        """Check whether any rows were loaded."""
        ...

    def __len__(self) -> int:
        """Get the total number of rows."""
        ...


@runtime_checkable
class CursorIterable(Protocol):
    """Protocol for results iterated through a stateful cursor."""

    def current(self) -> "Row":
        """Get the row at the cursor."""
        ...

    def key(self) -> int:
        """Get the cursor position."""
        ...

    def position(self) -> int:
        """Get the cursor position."""
        ...

    def next(self) -> None:
        """Advance the cursor."""
        ...

    def rewind(self) -> None:
        """Reset the cursor to the first row."""
        ...

    def valid(self) -> bool:
        """Check whether the cursor points at a row."""
        ...

    def __iter__(self) -> "Iterator[Row]":
        """Iterate over the rows."""
        ...


@runtime_checkable
class SeekableResult(Protocol):
    """Protocol for results whose cursor can jump to a position."""

    def seek(self, position: int) -> None:
        """Move the cursor to an absolute position."""
        ...


@runtime_checkable
class ReadOnlyIndexable(Protocol):
    """Protocol for results readable by index but never writable."""

    def offset_exists(self, index: Any) -> bool:
        """Check whether a row exists at the index."""
        ...

    def offset_get(self, index: Any) -> "Optional[Row]":
        """Get the row at the index."""
        ...

    def offset_set(self, index: Any, value: Any) -> None:
        """Reject assignment."""
        ...

    def offset_unset(self, index: Any) -> None:
        """Reject deletion."""
        ...

    def __getitem__(self, index: Any) -> "Optional[Row]":
        """Get the row at the index."""
        ...
