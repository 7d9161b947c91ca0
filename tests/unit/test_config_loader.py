from __future__ import annotations

import json
import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import yaml

from fieldpart.config import ConfigError, dump_example_config, load_config
from fieldpart.partitioner import FieldPartitioner

from tests.helpers import map_record


class ConfigLoaderTests(unittest.TestCase):
    def test_partition_fields_are_required(self) -> None:
        with patch.dict(os.environ, {"FIELDPART_PARTITION_FIELDS": ""}, clear=False):
            with self.assertRaises(ConfigError):
                load_config()

    def test_defaults_with_overrides(self) -> None:
        with patch.dict(os.environ, {"FIELDPART_PARTITION_FIELDS": ""}, clear=False):
            config = load_config(overrides={"partitioner.partition_field_name": ["year", "month"]})

        self.assertEqual(config.partitioner.partition_field_name, ["year", "month"])
        self.assertEqual(config.partitioner.directory_delim, "/")
        self.assertEqual(config.partitioner.missing_placeholder, "null")
        self.assertEqual(config.partitioner.topics_dir, "topics")
        self.assertEqual(config.runtime.log_level, "INFO")
        self.assertIsNone(config.runtime.log_path)

    def test_file_then_overrides(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "fieldpart.yaml"
            path.write_text(
                "partitioner:\n  partition_field_name: [user.id]\n  directory_delim: '-'\n  missing_placeholder: null\n",
                encoding="utf-8",
            )

            with patch.dict(os.environ, {"FIELDPART_PARTITION_FIELDS": ""}, clear=False):
                config = load_config(path, overrides={"partitioner": {"directory_delim": "|"}})

        self.assertEqual(config.partitioner.partition_field_name, ["user.id"])
        self.assertEqual(config.partitioner.directory_delim, "|")
        self.assertIsNone(config.partitioner.missing_placeholder)

    def test_toml_and_json_files(self) -> None:
        with TemporaryDirectory() as tmpdir:
            toml_path = Path(tmpdir) / "fieldpart.toml"
            toml_path.write_text('[partitioner]\npartition_field_name = ["a"]\n', encoding="utf-8")
            json_path = Path(tmpdir) / "fieldpart.json"
            json_path.write_text(json.dumps({"partitioner": {"partition_field_name": ["b"]}}), encoding="utf-8")

            with patch.dict(os.environ, {"FIELDPART_PARTITION_FIELDS": ""}, clear=False):
                self.assertEqual(load_config(toml_path).partitioner.partition_field_name, ["a"])
                self.assertEqual(load_config(json_path).partitioner.partition_field_name, ["b"])

    def test_env_fields_override(self) -> None:
        with patch.dict(os.environ, {"FIELDPART_PARTITION_FIELDS": "year, user.id"}, clear=False):
            config = load_config(overrides={"partitioner.partition_field_name": ["ignored"]})

        self.assertEqual(config.partitioner.partition_field_name, ["year", "user.id"])

    def test_rejects_duplicate_blank_and_malformed_fields(self) -> None:
        for fields in (["a", "a"], ["a", " "], ["a."], ["a..b"], [".a"]):
            with self.subTest(fields=fields):
                with patch.dict(os.environ, {"FIELDPART_PARTITION_FIELDS": ""}, clear=False):
                    with self.assertRaises(ConfigError):
                        load_config(overrides={"partitioner.partition_field_name": fields})

    def test_missing_and_unsupported_files(self) -> None:
        with TemporaryDirectory() as tmpdir:
            with self.assertRaises(ConfigError):
                load_config(Path(tmpdir) / "absent.yaml")
            ini = Path(tmpdir) / "fieldpart.ini"
            ini.write_text("[partitioner]\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(ini)

    def test_partitioner_from_config(self) -> None:
        with patch.dict(os.environ, {"FIELDPART_PARTITION_FIELDS": ""}, clear=False):
            config = load_config(
                overrides={"partitioner.partition_field_name": ["user.id"], "partitioner.directory_delim": "-"}
            )

        partitioner = FieldPartitioner.from_config(config.partitioner)

        self.assertEqual(partitioner.delimiter, "-")
        self.assertEqual(partitioner.encode_partition(map_record({"user": {"id": 42}})), "id=42")

    def test_dump_example_config_yaml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "example.yaml"
            dump_example_config(dest)
            data = yaml.safe_load(dest.read_text(encoding="utf-8"))

        self.assertIn("partitioner", data)
        self.assertIn("runtime", data)

    def test_dump_example_config_rejects_toml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "config.toml"
            with self.assertRaises(ConfigError):
                dump_example_config(dest)


if __name__ == "__main__":
    unittest.main()
