"""Conversions between enumeration members and their names."""

from __future__ import annotations

import enum
from typing import TypeVar

__all__ = ["to_string", "to_enum"]

E = TypeVar("E", bound=enum.Enum)


def to_string(value: enum.Enum) -> str:
    """Return the name of an enumeration member."""
    if not isinstance(value, enum.Enum):
        raise ValueError("unknown enum value")
    for name, member in type(value).__members__.items():
        if member is value:
            return name
    raise ValueError("unknown enum value")


def to_enum(enum_type: type[E], name: str) -> E:
    """Return the member of ``enum_type`` called ``name``."""
    for member_name, member in enum_type.__members__.items():
        if member_name == name:
            return member
    raise ValueError("unknown enum name")