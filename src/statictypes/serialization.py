"""
Serialization helpers for statictypes containers (OrderedList, TextList, KeyValueMap).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.

Map entries are stored as a list of {key, value} items, not as a mapping,
so declaration order and duplicate keys survive a round-trip. Scalar map
values that are dicts are rejected, since they would read back as containers.
"""
from __future__ import annotations

import json
import warnings
from typing import Any, Dict, List

import yaml

from statictypes.containers import (
    Entry,
    HeterogeneousList,
    KeyValueMap,
    OrderedList,
    TextList,
)
from statictypes.errors import ConfigError


VALUE_TYPES = {
    "int": int,
    "float": float,
    "str": str,
    "bool": bool,
}
VALUE_TYPE_NAMES = {t: name for name, t in VALUE_TYPES.items()}


def ordered_list_to_dict(lst: OrderedList) -> Dict[str, Any]:
    if lst.value_type is not None and lst.value_type not in VALUE_TYPE_NAMES:
        raise TypeError(f"Unsupported OrderedList value type: {lst.value_type}")
    return {
        "type": "list",
        "value_type": VALUE_TYPE_NAMES.get(lst.value_type),
        "values": list(lst.values),
    }


def _require_list(d: Dict[str, Any], name: str, what: str) -> List[Any]:
    if name not in d:
        raise ConfigError(f"{what} is missing field: '{name}'")
    items = d[name]
    if not isinstance(items, list):
        raise ConfigError(f"{what} field '{name}' must be a list, got {type(items).__name__}")
    return items


def ordered_list_from_dict(d: Dict[str, Any]) -> OrderedList:
    type_name = d.get("value_type")
    if type_name is not None and type_name not in VALUE_TYPES:
        raise ConfigError(f"Unknown list value_type: {type_name}")
    values = _require_list(d, "values", "List")
    try:
        return OrderedList(tuple(values), value_type=VALUE_TYPES.get(type_name))
    except TypeError as e:
        raise ConfigError(f"Invalid list values: {e}") from e


def text_list_to_dict(lst: TextList) -> Dict[str, Any]:
    return {"type": "text_list", "values": list(lst.values)}


def text_list_from_dict(d: Dict[str, Any]) -> TextList:
    values = _require_list(d, "values", "Text list")
    try:
        return TextList(tuple(values))
    except TypeError as e:
        raise ConfigError(f"Invalid text list values: {e}") from e


def value_to_dict(value: Any) -> Any:
    if isinstance(value, OrderedList):
        return ordered_list_to_dict(value)
    if isinstance(value, TextList):
        return text_list_to_dict(value)
    # bare dicts would read back as tagged containers
    if isinstance(value, (KeyValueMap, HeterogeneousList, dict)):
        raise TypeError(f"Unsupported map value type: {type(value)}")
    return value


def value_from_dict(d: Any) -> Any:
    if isinstance(d, dict):
        t = d.get("type")
        if t == "list":
            return ordered_list_from_dict(d)
        if t == "text_list":
            return text_list_from_dict(d)
        raise ConfigError(f"Unsupported map value dict type: {t}")
    return d


def entry_to_dict(e: Entry) -> Dict[str, Any]:
    return {"key": e.key, "value": value_to_dict(e.value)}


def entry_from_dict(d: Any) -> Entry:
    if not isinstance(d, dict):
        raise ConfigError(f"Map entry must be a mapping, got {type(d).__name__}: {d!r}")
    if "key" not in d or "value" not in d:
        raise ConfigError(f"Map entry needs 'key' and 'value': {d}")
    return Entry(key=d["key"], value=value_from_dict(d["value"]))


def _duplicate_keys(entries: List[Entry]) -> List[Any]:
    seen: List[Any] = []
    duplicates: List[Any] = []
    for entry in entries:
        if entry.key in seen:
            if entry.key not in duplicates:
                duplicates.append(entry.key)
        else:
            seen.append(entry.key)
    return duplicates


def map_to_dict(m: KeyValueMap) -> Dict[str, Any]:
    return {"type": "map", "entries": [entry_to_dict(e) for e in m.entries]}


def map_from_dict(d: Dict[str, Any]) -> KeyValueMap:
    entries = [entry_from_dict(e) for e in _require_list(d, "entries", "Map")]
    duplicates = _duplicate_keys(entries)
    if duplicates:
        warnings.warn(
            f"Duplicate map keys, later entries are shadowed: {duplicates}", UserWarning
        )
    return KeyValueMap(tuple(entries))


def container_to_dict(c: Any) -> Dict[str, Any]:
    if isinstance(c, OrderedList):
        return ordered_list_to_dict(c)
    if isinstance(c, TextList):
        return text_list_to_dict(c)
    if isinstance(c, KeyValueMap):
        return map_to_dict(c)
    raise TypeError(f"Unsupported container type: {type(c)}")


def container_from_dict(d: Any) -> Any:
    if not isinstance(d, dict):
        raise ConfigError(f"Container document must be a mapping, got {type(d).__name__}")
    t = d.get("type")
    if t == "list":
        return ordered_list_from_dict(d)
    if t == "text_list":
        return text_list_from_dict(d)
    if t == "map":
        return map_from_dict(d)
    raise ConfigError(f"Unsupported container dict type: {t}")


def container_to_json(c: Any) -> str:
    return json.dumps(container_to_dict(c), sort_keys=True)


def container_from_json(s: str) -> Any:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON container document: {e}") from e
    return container_from_dict(d)


def container_to_yaml(c: Any) -> str:
    return yaml.safe_dump(container_to_dict(c))


def container_from_yaml(s: str) -> Any:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML container document: {e}") from e
    return container_from_dict(d)


def load_container(filepath: str) -> Any:
    """
    Read a container from a YAML (or JSON, which YAML accepts) file.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the document does not describe a container
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Container file not found: {filepath}")
    return container_from_yaml(content)
