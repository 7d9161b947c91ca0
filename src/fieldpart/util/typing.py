"""Protocols shared by partitioners and their collaborators."""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from fieldpart.record import Field, SinkRecord


@runtime_checkable
class SchemaGenerator(Protocol):
    """Turns a comma-joined partition key into partition field descriptors."""

    def new_partition_fields(self, partition_fields: str) -> list[Field]:
        """Return one descriptor per partition field, in order."""
        ...


@runtime_checkable
class Partitioner(Protocol):
    """What the sink pipeline needs from a partitioner."""

    def encode_partition(self, record: SinkRecord) -> str:
        """Return the partition path for ``record``."""
        ...

    def generate_partitioned_path(self, topic: str, encoded_partition: str) -> str:
        """Prefix an encoded partition with its topic directory."""
        ...

    def partition_fields(self) -> Sequence[Any]:
        """Return the partition field descriptors."""
        ...


__all__ = ["Partitioner", "SchemaGenerator"]
