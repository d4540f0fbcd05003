"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from doxapi.deep_merge import deep_merge
from doxapi.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced."""
    merged = deep_merge({"arr": [1, 2]}, {"arr": [3]})
    assert merged == {"arr": [3]}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["ingest"]["index_file"] == "index.xml"
    assert "private" in config["ingest"]["hidden_protections"]
    assert config["interfaces"]["id_prefix"] == "interface_"


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config overrides defaults without touching them."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "ingest": {"hidden_protections": ["private"]},
        "interfaces": {"name_pattern": "^Can[A-Z]"},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))

    assert loaded["ingest"]["hidden_protections"] == ["private"]
    assert loaded["ingest"]["index_file"] == "index.xml"
    assert loaded["interfaces"]["name_pattern"] == "^Can[A-Z]"
    assert loaded["interfaces"]["id_prefix"] == "interface_"
    assert DEFAULT_CONFIG["ingest"]["hidden_protections"] == ["private", "package"]
