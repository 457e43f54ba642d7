"""Type guards used to classify raw driver records.

These run once per record when a result set is built. Everything downstream
dispatches on the row's tag instead of inspecting types again.
"""

import dataclasses
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from msgspec import Struct

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

    from sqlrows.core.row import Row

__all__ = (
    "has_dict_attribute",
    "has_model_dump",
    "is_attrs_instance",
    "is_dataclass_instance",
    "is_keyed_record",
    "is_mapping_row",
    "is_msgspec_struct",
    "is_opaque_value",
    "is_row",
)

_OPAQUE_TYPES = (str, bytes, bytearray, memoryview, int, float, complex, bool, tuple, list)


def is_row(obj: Any) -> "TypeGuard[Row]":
    """Check if a value is already a tagged row.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    # Import here to avoid circular imports
    from sqlrows.core.row import KeyedRow, OpaqueRow, StructuredRow

    return isinstance(obj, (KeyedRow, StructuredRow, OpaqueRow))


def is_mapping_row(obj: Any) -> "TypeGuard[Mapping[str, Any]]":
    """Check if a record supports lookup by key.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, Mapping)


def is_keyed_record(obj: Any) -> bool:
    """Check if a record is read by column name without being a Mapping.

    Driver row types such as ``sqlite3.Row`` and ``asyncpg.Record`` expose
    ``keys()`` and name lookup through ``__getitem__`` but are not registered
    as :class:`collections.abc.Mapping`.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return callable(getattr(obj, "keys", None)) and hasattr(type(obj), "__getitem__")


def is_opaque_value(obj: Any) -> bool:
    """Check if a record has no readable named fields.

    Scalars, strings and positional sequences fall in this group, as does ``None``.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return obj is None or isinstance(obj, _OPAQUE_TYPES)


def is_msgspec_struct(obj: Any) -> "TypeGuard[Struct]":
    """Check if a value is a msgspec Struct instance.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, Struct)


def is_dataclass_instance(obj: Any) -> bool:
    """Check if a value is a dataclass instance (not a dataclass type).

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


def is_attrs_instance(obj: Any) -> bool:
    """Check if a value is an instance of an attrs class."""
    return hasattr(type(obj), "__attrs_attrs__")


def has_model_dump(obj: Any) -> bool:
    """Check if a value exposes a pydantic style ``model_dump`` method."""
    return callable(getattr(type(obj), "model_dump", None))


def has_dict_attribute(obj: Any) -> bool:
    """Check if a value stores its attributes in ``__dict__``."""
    return hasattr(obj, "__dict__")
