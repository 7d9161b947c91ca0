from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from fieldpart.record import (
    BOOLEAN_SCHEMA,
    FLOAT64_SCHEMA,
    INT32_SCHEMA,
    INT64_SCHEMA,
    Schema,
    SinkRecord,
    STRING_SCHEMA,
    Struct,
    Type,
)

TOPIC = "orders"

ORDER_SCHEMA = Schema.struct(
    [
        ("year", INT32_SCHEMA),
        ("month", STRING_SCHEMA),
        ("active", BOOLEAN_SCHEMA),
        ("amount", FLOAT64_SCHEMA),
        ("customer_id", INT64_SCHEMA),
        ("region", Schema(Type.STRING, optional=True)),
        ("tags", Schema(Type.ARRAY, optional=True)),
    ],
    name="Order",
)


def make_order(**values: Any) -> Struct:
    """Build an Order struct with sensible defaults for required fields."""

    payload: dict[str, Any] = {
        "year": 2020,
        "month": "01",
        "active": True,
        "amount": 12.5,
        "customer_id": 9001,
    }
    payload.update(values)
    return Struct(ORDER_SCHEMA, payload)


def struct_record(value: Struct, *, schema: Schema | None = None, partition: int = 0) -> SinkRecord:
    return SinkRecord(topic=TOPIC, kafka_partition=partition, value=value, value_schema=schema or value.schema)


def map_record(value: Any, *, partition: int = 0) -> SinkRecord:
    return SinkRecord(topic=TOPIC, kafka_partition=partition, value=value)


def write_jsonl(path: Path, rows: Iterable[Mapping[str, Any] | str]) -> Path:
    """Write rows as JSON lines; strings are written verbatim."""

    lines = [row if isinstance(row, str) else json.dumps(row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
