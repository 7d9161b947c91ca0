"""Schema-field generation for partition columns."""

from __future__ import annotations

from fieldpart.record import OPTIONAL_STRING_SCHEMA, Field


class DefaultSchemaGenerator:
    """Describe every partition field as an optional string column.

    Partition values are path text once encoded, so downstream table schemas
    treat them as strings regardless of the source type.
    """

    def new_partition_fields(self, partition_fields: str) -> list[Field]:
        names = [name.strip() for name in partition_fields.split(",") if name.strip()]
        return [Field(name, index, OPTIONAL_STRING_SCHEMA) for index, name in enumerate(names)]


__all__ = ["DefaultSchemaGenerator"]
