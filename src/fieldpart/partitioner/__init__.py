"""Partitioners turning sink records into storage partition paths."""

from .base import PartitionFieldCache, generate_partitioned_path, group_by_partition
from .default import DefaultPartitioner
from .field import FieldPartitioner

__all__ = [
    "DefaultPartitioner",
    "FieldPartitioner",
    "PartitionFieldCache",
    "generate_partitioned_path",
    "group_by_partition",
]
