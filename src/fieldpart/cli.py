"""Command-line entry points for encoding partition paths."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer

from fieldpart.config import ConfigError, FieldpartConfig, dump_example_config, load_config
from fieldpart.errors import PartitionEncodingError
from fieldpart.partitioner import FieldPartitioner
from fieldpart.record import SinkRecord
from fieldpart.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Field partitioner CLI")


def _load(config_path: Optional[Path], fields: Optional[List[str]], delim: Optional[str]) -> FieldpartConfig:
    overrides: dict[str, Any] = {}
    if fields:
        overrides["partitioner.partition_field_name"] = list(fields)
    if delim is not None:
        overrides["partitioner.directory_delim"] = delim
    try:
        return load_config(config_path, overrides=overrides)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc


def _topic_directory(cfg: FieldpartConfig, topic: Optional[str]) -> Optional[str]:
    """Return ``topics_dir`` + delimiter + ``topic``, or ``None`` without a topic."""

    if not topic:
        return None
    topics_dir = cfg.partitioner.topics_dir
    if not topics_dir:
        return topic
    return f"{topics_dir}{cfg.partitioner.directory_delim}{topic}"


@app.command()
def encode(
    input_path: Path = typer.Argument(..., help="JSON-lines file, one mapping record per line"),
    field: Optional[List[str]] = typer.Option(None, "--field", "-f", help="Partition field (repeatable, dotted paths allowed)"),
    delim: Optional[str] = typer.Option(None, help="Directory delimiter"),
    topic: Optional[str] = typer.Option(None, help="Prefix each path with <topics_dir>/<topic>"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML/TOML/JSON config file"),
    skip_errors: bool = typer.Option(False, help="Report and skip records that cannot be encoded"),
) -> None:
    """Print the partition path of every record in INPUT_PATH."""

    cfg = _load(config, field, delim)
    logger = configure_logging(level=cfg.runtime.log_level, log_path=cfg.runtime.log_path, stream=sys.stderr)
    partitioner = FieldPartitioner.from_config(cfg.partitioner)
    topic_dir = _topic_directory(cfg, topic)

    with input_path.open("r", encoding="utf-8") as handle:
        for line_no, line in enumerate(handle, start=1):
            if not line.strip():
                continue
            try:
                value = json.loads(line)
                record = SinkRecord(topic=topic or "", kafka_partition=0, value=value, offset=line_no - 1)
                encoded = partitioner.encode_partition(record)
            except (json.JSONDecodeError, PartitionEncodingError) as exc:
                if skip_errors:
                    logger.warning("Skipping line %s: %s", line_no, exc)
                    continue
                typer.echo(f"Line {line_no}: {exc}", err=True)
                raise typer.Exit(code=1) from exc
            typer.echo(partitioner.generate_partitioned_path(topic_dir, encoded) if topic_dir else encoded)


@app.command()
def fields(
    config: Optional[Path] = typer.Option(None, "--config", help="YAML/TOML/JSON config file"),
) -> None:
    """List the configured partition fields."""

    cfg = _load(config, None, None)
    partitioner = FieldPartitioner.from_config(cfg.partitioner)
    for descriptor in partitioner.partition_fields():
        typer.echo(f"{descriptor.name}\t{descriptor.schema.type.value}")


@app.command()
def dump_config(dest: Path = typer.Argument(..., help="Destination .yaml/.json file")) -> None:
    """Write the default configuration to DEST."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
