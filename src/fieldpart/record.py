"""Record data model: schemas, structs and sink records.

Records reach the partitioner in one of two shapes. A typed record is a
``Struct`` bound to a struct ``Schema``; an untyped record is any mapping,
possibly nested. ``RecordShape`` and ``ValueKind`` classify both so that the
partitioner dispatches over closed enumerations.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Optional

from fieldpart.errors import DataError


class Type(str, Enum):
    """Declared schema types."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOLEAN = "boolean"
    STRING = "string"
    BYTES = "bytes"
    ARRAY = "array"
    MAP = "map"
    STRUCT = "struct"


_INT_BITS = {Type.INT8: 8, Type.INT16: 16, Type.INT32: 32, Type.INT64: 64}


@dataclass(frozen=True)
class Field:
    """A named, indexed field of a struct schema."""

    name: str
    index: int
    schema: "Schema"


@dataclass(frozen=True)
class Schema:
    """Declared type of a value; struct schemas carry their fields."""

    type: Type
    optional: bool = False
    name: Optional[str] = None
    fields: tuple[Field, ...] = ()

    @classmethod
    def struct(
        cls,
        fields: Iterable[tuple[str, "Schema"]],
        *,
        name: Optional[str] = None,
        optional: bool = False,
    ) -> "Schema":
        """Build a struct schema from ``(name, schema)`` pairs."""

        built: list[Field] = []
        seen: set[str] = set()
        for index, (field_name, field_schema) in enumerate(fields):
            if field_name in seen:
                raise DataError(f"Cannot create field because of field name duplication {field_name}")
            seen.add(field_name)
            built.append(Field(field_name, index, field_schema))
        return cls(Type.STRUCT, optional=optional, name=name, fields=tuple(built))

    def field(self, name: str) -> Field | None:
        """Return the field called ``name`` or ``None``."""

        if self.type is not Type.STRUCT:
            raise DataError("Cannot look up fields on non-struct type")
        for candidate in self.fields:
            if candidate.name == name:
                return candidate
        return None

    def validate_value(self, value: Any) -> None:
        """Raise ``DataError`` if ``value`` does not conform to this schema."""

        if value is None:
            if self.optional:
                return
            raise DataError("Invalid value: null used for required field")

        if self.type in _INT_BITS:
            if isinstance(value, bool) or not isinstance(value, int):
                raise DataError(f"Invalid Python object for schema type {self.type.name}: {type(value)!r}")
            bits = _INT_BITS[self.type]
            if not -(2 ** (bits - 1)) <= value < 2 ** (bits - 1):
                raise DataError(f"Value {value} out of range for schema type {self.type.name}")
            return

        accepted: tuple[type, ...]
        if self.type in (Type.FLOAT32, Type.FLOAT64):
            accepted = (float, int)
        elif self.type is Type.BOOLEAN:
            accepted = (bool,)
        elif self.type is Type.STRING:
            accepted = (str,)
        elif self.type is Type.BYTES:
            accepted = (bytes, bytearray)
        elif self.type is Type.ARRAY:
            accepted = (list, tuple)
        elif self.type is Type.MAP:
            accepted = (Mapping,)
        else:
            accepted = (Struct,)

        if not isinstance(value, accepted) or (isinstance(value, bool) and self.type in (Type.FLOAT32, Type.FLOAT64)):
            raise DataError(f"Invalid Python object for schema type {self.type.name}: {type(value)!r}")
        if isinstance(value, Struct) and value.schema != self:
            raise DataError("Struct schemas do not match.")


INT8_SCHEMA = Schema(Type.INT8)
INT16_SCHEMA = Schema(Type.INT16)
INT32_SCHEMA = Schema(Type.INT32)
INT64_SCHEMA = Schema(Type.INT64)
FLOAT32_SCHEMA = Schema(Type.FLOAT32)
FLOAT64_SCHEMA = Schema(Type.FLOAT64)
BOOLEAN_SCHEMA = Schema(Type.BOOLEAN)
STRING_SCHEMA = Schema(Type.STRING)
BYTES_SCHEMA = Schema(Type.BYTES)
OPTIONAL_STRING_SCHEMA = Schema(Type.STRING, optional=True)


class Struct:
    """A typed record whose values are validated against a struct schema."""

    def __init__(self, schema: Schema, values: Mapping[str, Any] | None = None) -> None:
        if schema.type is not Type.STRUCT:
            raise DataError("Not a struct schema: " + schema.type.value)
        self.schema = schema
        self._values: dict[str, Any] = {}
        for name, value in (values or {}).items():
            self.put(name, value)

    def _lookup(self, name: str) -> Field:
        found = self.schema.field(name)
        if found is None:
            raise DataError(f"{name} is not a valid field name")
        return found

    def put(self, name: str, value: Any) -> "Struct":
        field_def = self._lookup(name)
        field_def.schema.validate_value(value)
        self._values[name] = value
        return self

    def get(self, name: str) -> Any:
        self._lookup(name)
        return self._values.get(name)

    def validate(self) -> None:
        """Check that every field, including unset ones, is valid."""

        for field_def in self.schema.fields:
            field_def.schema.validate_value(self._values.get(field_def.name))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Struct):
            return NotImplemented
        return self.schema == other.schema and self._values == other._values

    def __repr__(self) -> str:
        body = ",".join(f"{f.name}={self._values.get(f.name)!r}" for f in self.schema.fields)
        return f"Struct{{{body}}}"


@dataclass(frozen=True)
class SinkRecord:
    """A record delivered to the sink, as handed to partitioners."""

    topic: str
    kafka_partition: int
    value: Any
    value_schema: Optional[Schema] = None
    key: Any = None
    offset: int = 0
    headers: dict[str, Any] = field(default_factory=dict)


class RecordShape(Enum):
    """Supported shapes of a record value."""

    TYPED = "typed"
    NESTED_MAPPING = "nested_mapping"

    @classmethod
    def of(cls, value: Any) -> "RecordShape | None":
        if isinstance(value, Struct):
            return cls.TYPED
        if isinstance(value, Mapping):
            return cls.NESTED_MAPPING
        return None


class ValueKind(Enum):
    """Kinds of partition values, by declared type or runtime type."""

    NUMERIC = "numeric"
    TEXT = "text"
    BOOLEAN = "boolean"
    UNSUPPORTED = "unsupported"

    @classmethod
    def of_type(cls, declared: Type) -> "ValueKind":
        if declared in _INT_BITS:
            return cls.NUMERIC
        if declared is Type.STRING:
            return cls.TEXT
        if declared is Type.BOOLEAN:
            return cls.BOOLEAN
        return cls.UNSUPPORTED

    @classmethod
    def of_value(cls, value: Any) -> "ValueKind":
        # bool is a subclass of int
        if isinstance(value, bool):
            return cls.BOOLEAN
        # only types whose str() is a decimal literal
        if isinstance(value, (int, float, Decimal)):
            return cls.NUMERIC
        if isinstance(value, str):
            return cls.TEXT
        return cls.UNSUPPORTED


__all__ = [
    "BOOLEAN_SCHEMA",
    "BYTES_SCHEMA",
    "FLOAT32_SCHEMA",
    "FLOAT64_SCHEMA",
    "Field",
    "INT16_SCHEMA",
    "INT32_SCHEMA",
    "INT64_SCHEMA",
    "INT8_SCHEMA",
    "OPTIONAL_STRING_SCHEMA",
    "RecordShape",
    "Schema",
    "SinkRecord",
    "Struct",
    "Type",
    "ValueKind",
]
