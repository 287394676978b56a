"""
Tests for serialization and deserialization of containers.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `statictypes.serialization`, and that
malformed configuration documents fail with ConfigError.
"""

import pytest

from statictypes.containers import HeterogeneousList, KeyValueMap, OrderedList, TextList
from statictypes.errors import ConfigError
from statictypes.serialization import (
    container_from_dict,
    container_from_json,
    container_from_yaml,
    container_to_dict,
    container_to_json,
    container_to_yaml,
    load_container,
)


def build_sample_map() -> KeyValueMap:
    return KeyValueMap([
        ("chicken", TextList(("foo", "bar"))),
        ("beef", TextList(("baz", "bat"))),
        ("coefs", OrderedList((0.5, 0.25), value_type=float)),
        ("threshold", 3),
    ])


def test_json_roundtrip():
    kvmap = build_sample_map()
    restored = container_from_json(container_to_json(kvmap))
    assert container_to_dict(restored) == container_to_dict(kvmap)
    assert restored == kvmap


def test_yaml_roundtrip():
    kvmap = build_sample_map()
    restored = container_from_yaml(container_to_yaml(kvmap))
    assert restored == kvmap
    assert restored.get("beef", 0) == "baz"
    assert restored.get("threshold") == 3


def test_list_dict_form():
    d = container_to_dict(OrderedList((1, 2), value_type=int))
    assert d == {"type": "list", "value_type": "int", "values": [1, 2]}


def test_yaml_document_with_duplicate_keys_warns_and_keeps_first():
    doc = """
type: map
entries:
  - key: k
    value: first
  - key: k
    value: second
"""
    with pytest.warns(UserWarning, match="Duplicate map keys"):
        kvmap = container_from_yaml(doc)
    assert kvmap.size() == 2
    assert kvmap.get("k") == "first"


def test_duplicate_keys_survive_roundtrip():
    kvmap = KeyValueMap([("k", 1), ("k", 2)])
    with pytest.warns(UserWarning):
        restored = container_from_json(container_to_json(kvmap))
    assert restored.keys() == ("k", "k")
    assert restored.get("k") == 1


def test_unknown_type_tag():
    with pytest.raises(ConfigError):
        container_from_dict({"type": "set", "values": [1]})


def test_unknown_value_type():
    with pytest.raises(ConfigError):
        container_from_dict({"type": "list", "value_type": "complex", "values": [1]})


def test_missing_values_field():
    with pytest.raises(ConfigError):
        container_from_dict({"type": "text_list"})


def test_invalid_values_in_document():
    with pytest.raises(ConfigError):
        container_from_dict({"type": "text_list", "values": ["ok", 3]})


def test_entry_without_value():
    with pytest.raises(ConfigError):
        container_from_dict({"type": "map", "entries": [{"key": "a"}]})


def test_document_must_be_mapping():
    with pytest.raises(ConfigError):
        container_from_yaml("- 1\n- 2\n")


def test_heterogeneous_list_not_serializable():
    with pytest.raises(TypeError):
        container_to_dict(HeterogeneousList((1, "a")))


def test_load_container(tmp_path):
    path = tmp_path / "groups.yaml"
    path.write_text(container_to_yaml(build_sample_map()), encoding="utf-8")
    kvmap = load_container(str(path))
    assert kvmap.size("chicken") == 2


def test_load_container_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_container(str(tmp_path / "missing.yaml"))


@pytest.mark.parametrize("doc", [
    {"type": "map"},
    {"type": "map", "entries": None},
    {"type": "map", "entries": {"key": "a", "value": 1}},
])
def test_map_entries_must_be_a_list(doc):
    with pytest.raises(ConfigError):
        container_from_dict(doc)


@pytest.mark.parametrize("entry", [1, "keyvalue", ["a", 1], None])
def test_map_entry_must_be_a_mapping(entry):
    with pytest.raises(ConfigError):
        container_from_dict({"type": "map", "entries": [entry]})


@pytest.mark.parametrize("values", ["abc", {"a": 1}, None, 3])
def test_values_must_be_a_list(values):
    with pytest.raises(ConfigError):
        container_from_dict({"type": "text_list", "values": values})
    with pytest.raises(ConfigError):
        container_from_dict({"type": "list", "values": values})


def test_dict_scalar_value_rejected_on_write():
    kvmap = KeyValueMap([("opts", {"depth": 2})])
    with pytest.raises(TypeError):
        container_to_json(kvmap)
    with pytest.raises(TypeError):
        container_to_yaml(kvmap)


def test_invalid_yaml_syntax():
    with pytest.raises(ConfigError):
        container_from_yaml("type: [unclosed")


def test_invalid_json_syntax():
    with pytest.raises(ConfigError):
        container_from_json('{"type": "map", ')


def test_invalid_file_contents(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("entries: [\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_container(str(path))
