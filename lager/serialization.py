"""Saving and loading sequences, sets and tagged variants as JSON-ready data."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Iterable, Sequence

__all__ = [
    "Monostate",
    "save_array",
    "load_array",
    "save_set",
    "load_set",
    "save_variant",
    "load_variant",
    "to_json",
    "from_json",
]


@dataclasses.dataclass(frozen=True)
class Monostate:
    """The empty alternative of a variant; all instances are equal."""


def save_array(items: Iterable[Any]) -> list[Any]:
    """Save a sequence as a list."""
    return list(items)


def load_array(data: Iterable[Any]) -> tuple[Any, ...]:
    """Load a sequence saved with ``save_array`` as an immutable tuple."""
    return tuple(data)


def save_set(items: Iterable[Any]) -> list[Any]:
    """Save the members of a set as a list."""
    return list(items)


def load_set(data: Sequence[Any]) -> frozenset[Any]:
    """Load a set, failing if the saved members hold duplicates."""
    items = list(data)
    result = frozenset(items)
    if len(result) != len(items):
        raise ValueError("duplicate items?")
    return result


def _type_name(typ: type) -> str:
    return typ.__qualname__


def save_variant(value: Any) -> dict[str, Any]:
    """Save a value tagged with the name of its type."""
    if isinstance(value, Monostate):
        data: Any = {}
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        data = dataclasses.asdict(value)
    else:
        data = value
    return {"type": _type_name(type(value)), "data": data}


def _build(typ: type, data: Any) -> Any:
    if typ is Monostate:
        return Monostate()
    if isinstance(data, typ):
        return data
    if dataclasses.is_dataclass(typ) and isinstance(data, dict):
        return typ(**data)
    return typ(data)


def load_variant(data: Any, types: Iterable[type]) -> Any:
    """Load a tagged value, choosing among ``types`` by the saved type name."""
    try:
        target = data["type"]
    except (KeyError, TypeError) as error:
        raise ValueError("variant has no type name") from error
    for typ in types:
        if _type_name(typ) == target:
            if "data" not in data:
                raise ValueError("variant has no data")
            return _build(typ, data["data"])
    raise ValueError("Invalid variant type name")


def to_json(data: Any) -> str:
    """Encode saved data as JSON text."""
    return json.dumps(data)


def from_json(text: str) -> Any:
    """Decode JSON text into saved data."""
    return json.loads(text)