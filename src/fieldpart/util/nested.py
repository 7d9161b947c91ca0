"""Dot-path lookups over nested mappings and structs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fieldpart.errors import DataError, FieldNotFoundError
from fieldpart.record import Struct


def split_field_path(field_name: str) -> list[str]:
    """Split a dotted field name, dropping trailing empty parts (``a.`` -> ``['a']``)."""

    parts = field_name.split(".")
    while len(parts) > 1 and not parts[-1]:
        parts.pop()
    return parts


def get_nested_field_value(struct_or_map: Any, field_name: str) -> Any:
    """Return the value at dotted ``field_name`` inside ``struct_or_map``.

    Each ``.``-separated segment descends one level. A missing key, a ``None``
    value or a non-traversable intermediate value raises ``FieldNotFoundError``.
    """

    _validate(struct_or_map, field_name)
    try:
        innermost = struct_or_map
        for name in split_field_path(field_name):
            innermost = get_field(innermost, name)
        return innermost
    except DataError as exc:
        raise FieldNotFoundError(f"The field '{field_name}' does not exist.") from exc


def get_field(struct_or_map: Any, field_name: str) -> Any:
    """Return a single, non-nested field of a struct or mapping."""

    _validate(struct_or_map, field_name)
    if isinstance(struct_or_map, Struct):
        value = struct_or_map.get(field_name)
    elif isinstance(struct_or_map, Mapping):
        value = struct_or_map.get(field_name)
    else:
        raise DataError(f"Argument not a Struct or Map: {struct_or_map!r}")
    if value is None:
        raise FieldNotFoundError(f"Unable to find nested field '{field_name}'")
    return value


def _validate(struct_or_map: Any, field_name: str) -> None:
    if struct_or_map is None:
        raise FieldNotFoundError("Argument is null")
    if not field_name:
        raise FieldNotFoundError("Field name is empty")


__all__ = ["get_field", "get_nested_field_value", "split_field_path"]
