"""Encode sink records into field-based partition paths."""

from fieldpart.errors import (
    DataError,
    FieldNotFoundError,
    PartitionEncodingError,
    PartitionError,
    PartitionerConfigError,
    RecordShapeError,
    UnsupportedFieldTypeError,
)
from fieldpart.partitioner import DefaultPartitioner, FieldPartitioner
from fieldpart.record import Field, Schema, SinkRecord, Struct, Type
from fieldpart.schema_generator import DefaultSchemaGenerator

__version__ = "0.1.0"

__all__ = [
    "DataError",
    "DefaultPartitioner",
    "DefaultSchemaGenerator",
    "Field",
    "FieldNotFoundError",
    "FieldPartitioner",
    "PartitionEncodingError",
    "PartitionError",
    "PartitionerConfigError",
    "RecordShapeError",
    "Schema",
    "SinkRecord",
    "Struct",
    "Type",
    "UnsupportedFieldTypeError",
]
