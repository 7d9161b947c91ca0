"""Partition records by their source partition number."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from fieldpart.errors import PartitionerConfigError
from fieldpart.partitioner.base import PartitionFieldCache, generate_partitioned_path, group_by_partition
from fieldpart.record import Field, SinkRecord
from fieldpart.schema_generator import DefaultSchemaGenerator
from fieldpart.util.typing import SchemaGenerator

PARTITION_FIELD = "partition"


class DefaultPartitioner:
    """Encode every record as ``partition=<kafka partition>``."""

    def __init__(self, schema_generator: SchemaGenerator | None = None) -> None:
        self._delimiter: Optional[str] = None
        self._field_cache = PartitionFieldCache(schema_generator or DefaultSchemaGenerator())

    def configure(self, delimiter: str) -> None:
        if delimiter is None:
            raise PartitionerConfigError("A directory delimiter is required.")
        self._delimiter = delimiter
        self._field_cache.bind(PARTITION_FIELD)

    @property
    def delimiter(self) -> str:
        if self._delimiter is None:
            raise PartitionerConfigError("Partitioner has not been configured.")
        return self._delimiter

    def encode_partition(self, record: SinkRecord) -> str:
        return f"{PARTITION_FIELD}={record.kafka_partition}"

    def encode_partitions(self, records: Iterable[SinkRecord]) -> dict[str, list[SinkRecord]]:
        return group_by_partition(self.encode_partition, records)

    def generate_partitioned_path(self, topic: str, encoded_partition: str) -> str:
        return generate_partitioned_path(topic, encoded_partition, delimiter=self.delimiter)

    def partition_fields(self) -> list[Field]:
        return self._field_cache.get()


__all__ = ["DefaultPartitioner", "PARTITION_FIELD"]
