"""
Container Analyzer: early diagnostics and inventory of configuration containers.

This module provides lightweight analysis of containers:
    - Entry and key inventory for KeyValueMap
    - Shadowed (unreachable) entries caused by duplicate keys
    - Value shape consistency (scalar vs list values)
    - Value inventory for OrderedList / TextList

IMPORTANT: Analysis does NOT modify the container.
It only produces read-only reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from statictypes.containers import KeyValueMap, OrderedList, TextList


@dataclass
class MapReport:
    """Analysis report for a KeyValueMap."""

    total_entries: int = 0
    unique_keys: int = 0

    # Duplicate handling (first declared entry wins)
    duplicate_keys: List[Any] = field(default_factory=list)
    shadowed_entries: List[int] = field(default_factory=list)

    # Value shapes
    list_valued_keys: List[Any] = field(default_factory=list)
    scalar_valued_keys: List[Any] = field(default_factory=list)
    mixed_value_shapes: bool = False
    max_list_size: int = 0
    empty_lists: List[Any] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


@dataclass
class ListReport:
    """Analysis report for an OrderedList or TextList."""

    size: int = 0
    value_type: Optional[str] = None
    distinct_values: int = 0
    duplicate_values: List[Any] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_map(kvmap: KeyValueMap) -> MapReport:
    """
    Inventory a KeyValueMap.

    Keys are compared with == (not hashed), matching how the map resolves
    lookups, so unhashable keys are supported.

    Returns a MapReport with metrics and warnings.
    """
    report = MapReport(total_entries=len(kvmap.entries))

    # =========================================================================
    # 1. KEY INVENTORY
    # =========================================================================

    resolved: List[Any] = []
    for position, entry in enumerate(kvmap.entries):
        if entry.key in resolved:
            report.shadowed_entries.append(position)
            if entry.key not in report.duplicate_keys:
                report.duplicate_keys.append(entry.key)
            continue
        resolved.append(entry.key)

        if entry.is_list:
            report.list_valued_keys.append(entry.key)
            size = entry.value.size()
            report.max_list_size = max(report.max_list_size, size)
            if size == 0:
                report.empty_lists.append(entry.key)
        else:
            report.scalar_valued_keys.append(entry.key)

    report.unique_keys = len(resolved)
    report.mixed_value_shapes = bool(report.list_valued_keys and report.scalar_valued_keys)

    # =========================================================================
    # 2. WARNING FLAGS
    # =========================================================================

    if report.duplicate_keys:
        report.add_warning(
            f"Duplicate keys (later entries shadowed): {', '.join(map(repr, report.duplicate_keys))}"
        )

    if report.mixed_value_shapes:
        report.add_warning(
            f"Mixed value shapes: {len(report.list_valued_keys)} list-valued, "
            f"{len(report.scalar_valued_keys)} scalar-valued keys"
        )

    if report.empty_lists:
        report.add_warning(
            f"Empty lists under keys: {', '.join(map(repr, report.empty_lists))}"
        )

    return report


def analyze_list(lst: Union[OrderedList, TextList]) -> ListReport:
    """Inventory the values of an OrderedList or TextList."""
    report = ListReport(size=lst.size())

    if isinstance(lst, TextList):
        report.value_type = "str"
    elif lst.value_type is not None:
        report.value_type = lst.value_type.__name__

    seen: List[Any] = []
    for value in lst.values:
        if value in seen:
            if value not in report.duplicate_values:
                report.duplicate_values.append(value)
        else:
            seen.append(value)
    report.distinct_values = len(seen)

    if report.size == 0:
        report.add_warning("Empty list")

    if report.duplicate_values:
        report.add_warning(
            f"Repeated values: {', '.join(map(repr, report.duplicate_values))}"
        )

    return report
