"""Core result set components."""

from sqlrows.core.cursor import RowCursor
from sqlrows.core.result import ResultSet, create_result_set
from sqlrows.core.row import FieldRead, KeyedRow, OpaqueRow, Row, RowKind, StructuredRow, as_row

__all__ = (
    "FieldRead",
    "KeyedRow",
    "OpaqueRow",
    "ResultSet",
    "Row",
    "RowCursor",
    "RowKind",
    "StructuredRow",
    "as_row",
    "create_result_set",
)
