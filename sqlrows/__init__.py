"""sqlrows: driver-agnostic, read-only access to materialized SQL query results."""

from sqlrows import core, exceptions, protocols, typing, utils
from sqlrows.__metadata__ import __version__
from sqlrows._typing import Empty
from sqlrows.core.cursor import RowCursor
from sqlrows.core.result import ResultSet, create_result_set
from sqlrows.core.row import FieldRead, KeyedRow, OpaqueRow, Row, RowKind, StructuredRow, as_row
from sqlrows.exceptions import (
    MissingDependencyError,
    OutOfBoundsError,
    RowIndexError,
    RowShapeError,
    SQLRowsError,
    UnsupportedOperationError,
)
from sqlrows.protocols import CursorIterable, ReadOnlyIndexable, SeekableResult, SizedResult

__all__ = (
    "CursorIterable",
    "Empty",
    "FieldRead",
    "KeyedRow",
    "MissingDependencyError",
    "OpaqueRow",
    "OutOfBoundsError",
    "ReadOnlyIndexable",
    "ResultSet",
    "Row",
    "RowCursor",
    "RowIndexError",
    "RowKind",
    "RowShapeError",
    "SQLRowsError",
    "SeekableResult",
    "SizedResult",
    "StructuredRow",
    "UnsupportedOperationError",
    "__version__",
    "as_row",
    "core",
    "create_result_set",
    "exceptions",
    "protocols",
    "typing",
    "utils",
)
