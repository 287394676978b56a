"""
Fixed-Content Containers

Defines the container family used to hold configuration data whose
contents are entirely known before first use:
    - OrderedList (homogeneous, indexable)
    - TextList (indexable text values)
    - HeterogeneousList (differently-typed elements, reached by visiting)
    - KeyValueMap (keys bound to scalars or to lists)

ARCHITECTURAL RULE:
    These objects:
        - Are populated once, at construction
        - Are immutable afterwards (frozen dataclasses over tuples)
        - Never call back into client code, except through
          HeterogeneousList.visit
        - Fail loudly (see statictypes.errors), never with a default value
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping, Optional, Tuple, Union

from statictypes.errors import KeyNotFoundError, OutOfRangeError, ValueShapeError


_MISSING = object()


def _check_index(index: Any, size: int, where: str) -> int:
    """Validate an index against [0, size). Negative indices do not wrap."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"{where} indices must be integers, not {type(index).__name__}")
    if not 0 <= index < size:
        raise OutOfRangeError(index, size, where)
    return index


def _coerce_value(value: Any, value_type: type, position: int) -> Any:
    if value_type in (int, float) and isinstance(value, bool):
        raise TypeError(f"value at position {position} is a bool, expected {value_type.__name__}")
    if value_type is float and isinstance(value, int):
        return float(value)
    if not isinstance(value, value_type):
        raise TypeError(
            f"value at position {position} has type {type(value).__name__}, "
            f"expected {value_type.__name__}"
        )
    return value


@dataclass(frozen=True)
class OrderedList:
    """
    Immutable, fixed-length sequence of values sharing one type.

    Examples:
        OrderedList((0.5, 0.25))
        OrderedList((1, 2), value_type=float)   # ints promoted to 1.0, 2.0

    Properties:
        values:
            The stored values, in declaration order (always a tuple)

        value_type:
            The uniform value type. If omitted, it is taken from the
            first value and every other value must match it.
            An int is accepted (and promoted) where float is requested.

    IMPORTANT:
        Indices are checked against [0, size). Negative indices fail
        with OutOfRangeError instead of counting from the end.
    """

    values: Tuple[Any, ...] = ()
    value_type: Optional[type] = None

    def __post_init__(self):
        values = tuple(self.values)
        value_type = self.value_type
        if value_type is None and values:
            value_type = type(values[0])
        if value_type is not None:
            values = tuple(_coerce_value(v, value_type, i) for i, v in enumerate(values))
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "value_type", value_type)

    def size(self) -> int:
        return len(self.values)

    def at(self, index: int) -> Any:
        """
        Return the value at index.

        Raises:
            OutOfRangeError: If index is outside [0, size)
        """
        return self.values[_check_index(index, len(self.values), "OrderedList")]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Any:
        return self.at(index)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)


@dataclass(frozen=True)
class TextList:
    """
    Immutable, fixed-length sequence of text values.

    Same external contract as OrderedList (size / at), kept as its own
    type because each element is treated as an individual literal:
    lookup walks the elements with a running position rather than
    indexing a buffer.

    Properties:
        values: The text values, in declaration order (always a tuple of str)
    """

    values: Tuple[str, ...] = ()

    def __post_init__(self):
        values = tuple(self.values)
        for position, text in enumerate(values):
            if not isinstance(text, str):
                raise TypeError(
                    f"TextList element {position} must be str, not {type(text).__name__}"
                )
        object.__setattr__(self, "values", values)

    def size(self) -> int:
        return len(self.values)

    def at(self, index: int) -> str:
        """
        Return the text at index by scanning the elements in order.

        Raises:
            OutOfRangeError: If the scan ends without reaching index
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"TextList indices must be integers, not {type(index).__name__}")
        for position, text in enumerate(self.values):
            if position == index:
                return text
        raise OutOfRangeError(index, len(self.values), "TextList")

    def count(self, text: str) -> int:
        """Number of elements equal to text."""
        return sum(1 for value in self.values if value == text)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> str:
        return self.at(index)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)


@dataclass(frozen=True)
class HeterogeneousList:
    """
    Immutable, fixed-length sequence of elements of (possibly) different types.

    There is no by-value accessor: elements share no interface, so the
    only uniform way to touch them is to push one operation through each
    element in turn.

    Example:
        calcs = HeterogeneousList.of_types(CoefficientCalculator, PairedCalculator)
        total = []
        calcs.visit(lambda calc: total.append(calc.update()))

    Properties:
        items: The elements, in declaration order (always a tuple)

    IMPORTANT:
        The list does not aggregate results. Whatever the operation
        returns is discarded; accumulation is the operation's job.
    """

    items: Tuple[Any, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of_types(cls, *types: Callable[[], Any]) -> "HeterogeneousList":
        """Build a list holding one default-constructed instance per type."""
        return cls(tuple(t() for t in types))

    def size(self) -> int:
        return len(self.items)

    def visit(self, op: Callable[[Any], Any], index: Optional[int] = None) -> None:
        """
        Apply op to every element in ascending index order, or only to
        the element at index.

        The index is validated before op runs, so a failed call has no
        side effects.

        Raises:
            OutOfRangeError: If index is given and outside [0, size)
        """
        if index is None:
            for item in self.items:
                op(item)
            return
        op(self.items[_check_index(index, len(self.items), "HeterogeneousList")])

    def __len__(self) -> int:
        return len(self.items)


ListValue = Union[OrderedList, TextList]
LIST_TYPES = (OrderedList, TextList)


def as_value(value: Any) -> Any:
    """
    Normalize a map value.

    Plain lists and tuples become TextList when every element is str,
    otherwise OrderedList. Containers and scalars pass through unchanged.
    """
    if isinstance(value, (list, tuple)):
        if value and all(isinstance(v, str) for v in value):
            return TextList(tuple(value))
        return OrderedList(tuple(value))
    return value


@dataclass(frozen=True)
class Entry:
    """A single key/value binding inside a KeyValueMap."""

    key: Any
    value: Any

    @property
    def is_list(self) -> bool:
        return isinstance(self.value, LIST_TYPES)


@dataclass(frozen=True)
class KeyValueMap:
    """
    Immutable map from keys to scalars or to lists, resolved by linear scan.

    Map of lists example:
        groups = KeyValueMap({
            "chicken": TextList(("foo", "bar")),
            "beef": TextList(("baz", "bat")),
        })
        for key in groups.keys():
            for i in range(groups.size(key)):
                print(key, groups.get(key, i))

    Properties:
        entries:
            Entry objects in declaration order. The constructor also
            accepts a mapping or an iterable of (key, value) pairs.

    Addressing modes:
        get(key)         -> the value bound to key
        size(key)        -> length of the list bound to key
        get(key, i)      -> i-th element of the list bound to key

    INVARIANTS:
        - Keys are compared with ==, in declaration order
        - Duplicate keys are allowed; the first declared entry always wins
        - Index checks on nested lists belong to the nested list itself
    """

    entries: Tuple[Entry, ...] = ()

    def __post_init__(self):
        source = self.entries
        if isinstance(source, Mapping):
            source = source.items()
        entries = []
        for item in source:
            if isinstance(item, Entry):
                entries.append(Entry(item.key, as_value(item.value)))
            else:
                key, value = item
                entries.append(Entry(key, as_value(value)))
        object.__setattr__(self, "entries", tuple(entries))

    def _find(self, key: Any) -> Entry:
        for entry in self.entries:
            if entry.key == key:
                return entry
        raise KeyNotFoundError(key)

    def _list_at(self, key: Any) -> ListValue:
        entry = self._find(key)
        if not entry.is_list:
            raise ValueShapeError(key, entry.value)
        return entry.value

    def size(self, key: Any = _MISSING) -> int:
        """
        Number of entries, or with a key, the length of the list bound to it.

        Raises:
            KeyNotFoundError: If no entry matches key
            ValueShapeError: If the matched value is not a list
        """
        if key is _MISSING:
            return len(self.entries)
        return self._list_at(key).size()

    def get(self, key: Any, index: Optional[int] = None) -> Any:
        """
        Value bound to key, or with an index, the element of the list bound to key.

        Raises:
            KeyNotFoundError: If no entry matches key
            ValueShapeError: If index is given and the matched value is not a list
            OutOfRangeError: Propagated from the nested list
        """
        if index is None:
            return self._find(key).value
        return self._list_at(key).at(index)

    def keys(self) -> Tuple[Any, ...]:
        return tuple(entry.key for entry in self.entries)

    def items(self) -> Tuple[Tuple[Any, Any], ...]:
        return tuple((entry.key, entry.value) for entry in self.entries)

    def __contains__(self, key: Any) -> bool:
        return any(entry.key == key for entry in self.entries)

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())
