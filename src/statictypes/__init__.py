"""
statictypes: fixed-content containers for configuration data

Immutable containers whose contents are entirely known before first use:
    - OrderedList: homogeneous, indexable
    - TextList: indexable text values
    - HeterogeneousList: differently-typed elements, reached by visiting
    - KeyValueMap: keys bound to scalars or to lists, first match wins

ARCHITECTURAL GUARANTEE:
------------------------
Containers are populated at construction and never mutated afterwards.
Every failed query raises (see statictypes.errors); nothing falls back
to a default value.
"""

from .containers import Entry, HeterogeneousList, KeyValueMap, OrderedList, TextList
from .errors import (
    ConfigError,
    ContainerError,
    KeyNotFoundError,
    OutOfRangeError,
    ValueShapeError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ContainerError",
    "Entry",
    "HeterogeneousList",
    "KeyNotFoundError",
    "KeyValueMap",
    "OrderedList",
    "OutOfRangeError",
    "TextList",
    "ValueShapeError",
]
