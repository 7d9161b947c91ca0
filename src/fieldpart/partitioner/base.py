"""Capabilities shared by partitioners."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from fieldpart.errors import PartitionerConfigError
from fieldpart.record import Field, SinkRecord
from fieldpart.util.lazy import Lazy
from fieldpart.util.typing import SchemaGenerator


class PartitionFieldCache:
    """Memoized partition field descriptors for a comma-joined partition key."""

    def __init__(self, generator: SchemaGenerator) -> None:
        self._generator = generator
        self._cell: Lazy[list[Field]] | None = None

    def bind(self, partition_key: str) -> None:
        """(Re)bind the cache to ``partition_key``, discarding any stored fields."""

        generator = self._generator
        self._cell = Lazy(lambda: list(generator.new_partition_fields(partition_key)))

    def get(self) -> list[Field]:
        cell = self._cell
        if cell is None:
            raise PartitionerConfigError("Partitioner has not been configured.")
        return cell.get()


def generate_partitioned_path(topic: str, encoded_partition: str, *, delimiter: str) -> str:
    """Return ``topic`` + ``delimiter`` + ``encoded_partition``."""

    return f"{topic}{delimiter}{encoded_partition}"


def group_by_partition(
    encode: Callable[[SinkRecord], str],
    records: Iterable[SinkRecord],
) -> dict[str, list[SinkRecord]]:
    """Group ``records`` by encoded partition, keeping first-seen order.

    The first encoding failure propagates and nothing is returned.
    """

    grouped: dict[str, list[SinkRecord]] = {}
    for record in records:
        grouped.setdefault(encode(record), []).append(record)
    return grouped


__all__ = ["PartitionFieldCache", "generate_partitioned_path", "group_by_partition"]
