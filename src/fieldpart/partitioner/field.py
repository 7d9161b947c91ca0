"""Partition records by the values of configured fields."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Optional

from fieldpart.config.models import DEFAULT_MISSING_PLACEHOLDER, PartitionerConfig
from fieldpart.errors import (
    DataError,
    FieldNotFoundError,
    PartitionEncodingError,
    PartitionerConfigError,
    RecordShapeError,
    UnsupportedFieldTypeError,
)
from fieldpart.partitioner.base import PartitionFieldCache, generate_partitioned_path, group_by_partition
from fieldpart.record import Field, RecordShape, SinkRecord, Struct, Type, ValueKind
from fieldpart.schema_generator import DefaultSchemaGenerator
from fieldpart.util.nested import get_nested_field_value, split_field_path
from fieldpart.util.typing import SchemaGenerator

LOGGER = logging.getLogger(__name__)

_RENDERERS: dict[ValueKind, Callable[[Any], str]] = {
    ValueKind.NUMERIC: str,
    ValueKind.TEXT: str,
    ValueKind.BOOLEAN: lambda value: "true" if value else "false",
}


class FieldPartitioner:
    """Encode a record as ``name=value`` segments for the configured fields.

    Struct values are rendered by each field's declared schema type and labelled
    with the full field name. Mapping values are resolved by dotted path,
    rendered by runtime type and labelled with the last path component.
    Only numeric, string and boolean values can become partition values;
    struct fields must additionally be declared as integers.
    """

    def __init__(self, schema_generator: SchemaGenerator | None = None) -> None:
        self._field_names: tuple[str, ...] = ()
        self._delimiter: Optional[str] = None
        self._missing_placeholder: Optional[str] = DEFAULT_MISSING_PLACEHOLDER
        self._field_cache = PartitionFieldCache(schema_generator or DefaultSchemaGenerator())

    @classmethod
    def from_config(
        cls,
        config: PartitionerConfig,
        *,
        schema_generator: SchemaGenerator | None = None,
    ) -> "FieldPartitioner":
        partitioner = cls(schema_generator)
        partitioner.configure(
            config.partition_field_name,
            config.directory_delim,
            missing_placeholder=config.missing_placeholder,
        )
        return partitioner

    def configure(
        self,
        field_names: Iterable[str],
        delimiter: str,
        *,
        missing_placeholder: Optional[str] = DEFAULT_MISSING_PLACEHOLDER,
    ) -> None:
        """Store the field specification and delimiter used by every encode."""

        names = tuple(field_names)
        if not names:
            raise PartitionerConfigError("At least one partition field name is required.")
        if delimiter is None:
            raise PartitionerConfigError("A directory delimiter is required.")

        self._field_names = names
        self._delimiter = delimiter
        self._missing_placeholder = missing_placeholder
        self._field_cache.bind(",".join(names))

    @property
    def field_names(self) -> tuple[str, ...]:
        return self._field_names

    @property
    def delimiter(self) -> str:
        if self._delimiter is None:
            raise PartitionerConfigError("Partitioner has not been configured.")
        return self._delimiter

    def encode_partition(self, record: SinkRecord) -> str:
        """Return the partition path for ``record``.

        Raises ``PartitionEncodingError`` (``RecordShapeError`` or
        ``UnsupportedFieldTypeError``) without producing a partial path.
        """

        delimiter = self.delimiter
        value = record.value
        shape = RecordShape.of(value)

        if shape is RecordShape.TYPED:
            segments = self._struct_segments(value, record)
        elif shape is RecordShape.NESTED_MAPPING:
            segments = self._mapping_segments(value)
        else:
            LOGGER.error("Value is not Struct or Map type.")
            raise RecordShapeError("Error encoding partition.")

        return delimiter.join(segments)

    def encode_partitions(self, records: Iterable[SinkRecord]) -> dict[str, list[SinkRecord]]:
        """Group a batch of records by their encoded partition."""

        return group_by_partition(self.encode_partition, records)

    def generate_partitioned_path(self, topic: str, encoded_partition: str) -> str:
        return generate_partitioned_path(topic, encoded_partition, delimiter=self.delimiter)

    def partition_fields(self) -> list[Field]:
        """Return the partition field descriptors, computed once per configuration."""

        return self._field_cache.get()

    def _struct_segments(self, struct: Struct, record: SinkRecord) -> list[str]:
        schema = record.value_schema
        if schema is None or schema.type is not Type.STRUCT:
            schema = struct.schema

        segments: list[str] = []
        for field_name in self._field_names:
            field_def = schema.field(field_name)
            if field_def is None:
                LOGGER.error("Field %s is not part of the record schema.", field_name)
                raise PartitionEncodingError("Error encoding partition.", field_name=field_name)

            declared = field_def.schema.type
            kind = ValueKind.of_type(declared)
            if kind is ValueKind.UNSUPPORTED:
                LOGGER.error("Type %s is not supported as a partition key.", declared.value)
                raise UnsupportedFieldTypeError("Error encoding partition.", field_name=field_name)

            try:
                raw = struct.get(field_name)
            except DataError as exc:
                LOGGER.error("Field %s is not part of the struct value.", field_name)
                raise PartitionEncodingError("Error encoding partition.", field_name=field_name) from exc
            if raw is None:
                rendered = self._render_missing(field_name)
            else:
                rendered = _RENDERERS[kind](raw)
            segments.append(f"{field_name}={rendered}")
        return segments

    def _mapping_segments(self, mapping: Mapping[str, Any]) -> list[str]:
        segments: list[str] = []
        for field_name in self._field_names:
            try:
                raw: Any = get_nested_field_value(mapping, field_name)
            except FieldNotFoundError:
                LOGGER.warning(
                    "%s is unable to parse field - %s from record - %s",
                    type(self).__name__,
                    field_name,
                    mapping,
                )
                raw = self._missing_placeholder

            label = split_field_path(field_name)[-1]
            renderer = _RENDERERS.get(ValueKind.of_value(raw))
            if renderer is None:
                LOGGER.error("Unsupported type '%s' for partition field '%s'.", type(raw).__name__, field_name)
                raise UnsupportedFieldTypeError(
                    f"Error extracting partition value from record field: {field_name}",
                    field_name=field_name,
                )
            segments.append(f"{label}={renderer(raw)}")
        return segments

    def _render_missing(self, field_name: str) -> str:
        placeholder = self._missing_placeholder
        if placeholder is None:
            LOGGER.error("Field %s is null and no placeholder is configured.", field_name)
            raise UnsupportedFieldTypeError("Error encoding partition.", field_name=field_name)
        return placeholder


__all__ = ["FieldPartitioner"]
