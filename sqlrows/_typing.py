"""Sentinel values shared across the package."""

from enum import Enum
from typing import Final, Literal

from typing_extensions import TypeAlias

__all__ = ("Empty", "EmptyEnum", "EmptyType")


class EmptyEnum(Enum):
    """A sentinel enum used as placeholder."""

    EMPTY = 0


EmptyType: TypeAlias = Literal[EmptyEnum.EMPTY]
Empty: Final = EmptyEnum.EMPTY
