"""Row representations for materialized query results.

A driver hands over records in whatever shape it produces. Each record is
tagged exactly once, when the result set is built:

- ``KeyedRow``: a mapping, read by key.
- ``StructuredRow``: an object, read by attribute name.
- ``OpaqueRow``: anything without named fields (tuples, scalars, ``None``).

Named field access goes through ``read()``, which reports success or failure
as a ``FieldRead`` value instead of raising.
"""

import dataclasses
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Union

import msgspec
from mypy_extensions import mypyc_attr

from sqlrows.exceptions import RowShapeError
from sqlrows.utils.type_guards import (
    has_dict_attribute,
    has_model_dump,
    is_attrs_instance,
    is_dataclass_instance,
    is_keyed_record,
    is_mapping_row,
    is_msgspec_struct,
    is_opaque_value,
    is_row,
)

if TYPE_CHECKING:
    from typing_extensions import TypeAlias

    from sqlrows.typing import RawRecord

__all__ = ("FieldRead", "KeyedRow", "OpaqueRow", "Row", "RowKind", "StructuredRow", "as_row")


class RowKind(str, Enum):
    """Shape tag of a row."""

    KEYED = "keyed"
    STRUCTURED = "structured"
    OPAQUE = "opaque"

    def __str__(self) -> str:
        return self.value


class FieldRead:
    """Outcome of reading a named field from a row."""

    __slots__ = ("ok", "value")

    def __init__(self, ok: bool, value: Any = None) -> None:
        self.ok = ok
        self.value = value

    @classmethod
    def found(cls, value: Any) -> "FieldRead":
        return cls(True, value)

    @classmethod
    def missing(cls) -> "FieldRead":
        return _MISSING

    def value_or(self, default: Any) -> Any:
        """Return the value that was read, or ``default`` if the read failed."""
        return self.value if self.ok else default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldRead):
            return NotImplemented
        return self.ok == other.ok and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.ok:
            return f"FieldRead.found({self.value!r})"
        return "FieldRead.missing()"


_MISSING = FieldRead(False)


@mypyc_attr(allow_interpreted_subclasses=True)
class KeyedRow(Mapping[str, Any]):
    """A row backed by a mapping of column name to value.

    Behaves as a read-only mapping, so it compares equal to a ``dict`` holding
    the same items.
    """

    __slots__ = ("_data",)

    kind: ClassVar[RowKind] = RowKind.KEYED

    def __init__(self, data: "Mapping[str, Any]") -> None:
        self._data = data

    @property
    def data(self) -> "Mapping[str, Any]":
        """The wrapped mapping."""
        return self._data

    def read(self, name: str) -> FieldRead:
        if name in self._data:
            return FieldRead.found(self._data[name])
        return FieldRead.missing()

    def to_dict(self) -> "dict[str, Any]":
        return dict(self._data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> "Iterator[str]":
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"KeyedRow({self._data!r})"


@mypyc_attr(allow_interpreted_subclasses=True)
class StructuredRow:
    """A row backed by an object whose columns are attributes.

    Works with dataclasses, msgspec structs, pydantic models, attrs classes
    and plain objects alike.
    """

    __slots__ = ("_data",)

    kind: ClassVar[RowKind] = RowKind.STRUCTURED

    def __init__(self, data: Any) -> None:
        self._data = data

    @property
    def data(self) -> Any:
        """The wrapped object."""
        return self._data

    def read(self, name: str) -> FieldRead:
        """Read attribute ``name`` from the wrapped object.

        Any error raised by the attribute lookup, including errors raised by
        properties, is reported as a missing field.
        """
        try:
            value = getattr(self._data, name)
        except Exception:  # noqa: BLE001
            return FieldRead.missing()
        return FieldRead.found(value)

    def to_dict(self) -> "dict[str, Any]":
        """Convert the wrapped object to a dictionary of its fields.

        Raises:
            RowShapeError: If the object does not expose its fields.

        Returns:
            A new dictionary.
        """
        data = self._data
        if is_msgspec_struct(data):
            return msgspec.structs.asdict(data)
        if is_dataclass_instance(data):
            return dataclasses.asdict(data)
        if is_attrs_instance(data):
            return {field.name: getattr(data, field.name) for field in type(data).__attrs_attrs__}
        if has_model_dump(data):
            return dict(data.model_dump())
        if has_dict_attribute(data):
            return {key: value for key, value in vars(data).items() if not key.startswith("_")}
        msg = f"Cannot convert {type(data).__name__} row to a dictionary"
        raise RowShapeError(msg)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StructuredRow):
            return bool(self._data == other._data)
        return bool(self._data == other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StructuredRow({self._data!r})"


@mypyc_attr(allow_interpreted_subclasses=True)
class OpaqueRow:
    """A row without named fields, such as a positional tuple or a scalar."""

    __slots__ = ("_data",)

    kind: ClassVar[RowKind] = RowKind.OPAQUE

    def __init__(self, data: Any) -> None:
        self._data = data

    @property
    def data(self) -> Any:
        """The wrapped value."""
        return self._data

    def read(self, name: str) -> FieldRead:  # noqa: ARG002
        return FieldRead.missing()

    def to_dict(self) -> "dict[str, Any]":
        msg = f"{type(self._data).__name__} rows have no named fields"
        raise RowShapeError(msg)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OpaqueRow):
            return bool(self._data == other._data)
        return bool(self._data == other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"OpaqueRow({self._data!r})"


Row: "TypeAlias" = Union[KeyedRow, StructuredRow, OpaqueRow]


def as_row(record: "RawRecord") -> Row:
    """Tag a raw driver record with its row shape.

    Already tagged rows are returned unchanged. Driver rows that are looked up
    by column name but are not mappings, such as ``sqlite3.Row``, are copied
    into a dictionary.

    Args:
        record: The record to tag.

    Returns:
        The tagged row.
    """
    if is_row(record):
        return record
    if is_mapping_row(record):
        return KeyedRow(record)
    if is_keyed_record(record):
        return KeyedRow({key: record[key] for key in record.keys()})
    if is_opaque_value(record):
        return OpaqueRow(record)
    return StructuredRow(record)
