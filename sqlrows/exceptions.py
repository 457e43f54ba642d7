from typing import Any, Optional

__all__ = (
    "MissingDependencyError",
    "OutOfBoundsError",
    "RowIndexError",
    "RowShapeError",
    "SQLRowsError",
    "UnsupportedOperationError",
)


class SQLRowsError(Exception):
    """Base exception class from which all sqlrows exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLRowsError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class MissingDependencyError(SQLRowsError, ImportError):
    """Missing optional dependency.

    This exception is raised only when a module depends on a dependency that has not been installed.
    """

    def __init__(self, package: str, install_package: Optional[str] = None) -> None:
        super().__init__(
            f"Package {package!r} is not installed but required. You can install it by running "
            f"'pip install sqlrows[{install_package or package}]' to install sqlrows with the required extra "
            f"or 'pip install {install_package or package}' to install the package separately",
        )


class UnsupportedOperationError(SQLRowsError, TypeError):
    """Raised on any attempt to modify a result set through index access."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Result set cannot be modified."
        super().__init__(message)


class OutOfBoundsError(SQLRowsError, IndexError):
    """Raised when seeking to a position that does not hold a row."""

    requested: int
    total: int

    def __init__(self, requested: int, total: int) -> None:
        """Initialize with the seeked position and the result size."""
        super().__init__(detail=f"Position {requested} is out of bounds for a result of {total} rows.")
        self.requested = requested
        self.total = total


class RowIndexError(SQLRowsError, IndexError):
    """Raised when the cursor does not point at a row."""

    position: int

    def __init__(self, position: int) -> None:
        super().__init__(detail=f"No row at cursor position {position}.")
        self.position = position


class RowShapeError(SQLRowsError, TypeError):
    """Raised when a row's shape does not support the requested access."""
