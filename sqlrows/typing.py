"""Type aliases for records handed over by database drivers."""

from collections.abc import Mapping
from typing import Any, Union

from typing_extensions import TypeAlias

from sqlrows._typing import Empty, EmptyType

__all__ = ("Empty", "EmptyType", "RawRecord")


RawRecord: TypeAlias = Union[Mapping[str, Any], Any]
"""A record as produced by a driver, before it is tagged as a row."""
