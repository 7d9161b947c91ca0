"""Error taxonomy for partition encoding."""

from __future__ import annotations


class PartitionError(RuntimeError):
    """Base class for partitioner failures."""


class PartitionerConfigError(PartitionError):
    """Raised when a partitioner is used without a usable configuration."""


class PartitionEncodingError(PartitionError):
    """Raised when a record cannot be encoded into a partition path.

    No partial path is ever returned alongside this error.
    """

    def __init__(self, message: str, *, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name


class RecordShapeError(PartitionEncodingError):
    """The record value is neither a Struct nor a mapping."""


class UnsupportedFieldTypeError(PartitionEncodingError):
    """A partition field is not integral, string or boolean."""


class DataError(ValueError):
    """Raised when data does not conform to its schema."""


class FieldNotFoundError(DataError, LookupError):
    """Raised when a (possibly nested) field cannot be resolved."""


__all__ = [
    "DataError",
    "FieldNotFoundError",
    "PartitionEncodingError",
    "PartitionError",
    "PartitionerConfigError",
    "RecordShapeError",
    "UnsupportedFieldTypeError",
]
