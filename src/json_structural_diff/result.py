"""Diff result types produced by the comparison engine.

Every node is an immutable dataclass and every union is closed:

- ``Difference``      = ScalarDifference | TypeDifference | ArrayDifference
                        | ObjectDifference
- ``ArrayDifference`` = PairsOnly | Shorter | Longer
- ``EntryDifference`` = Extra | Missing | Deep

A node is only ever built for a real disagreement; "no difference" is
represented by ``None`` at the call site, never by an empty node.

Each node renders itself with ``to_dict()`` into plain JSON-compatible
data tagged by variant name (``difference_of``, ``array_difference``,
``entry_difference``) so downstream tools can pattern-match on it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from json_structural_diff.value import JsonType

__all__ = [
    "ArrayDifference",
    "Deep",
    "Difference",
    "EntryDifference",
    "Extra",
    "Longer",
    "Missing",
    "ObjectDifference",
    "OrderedPairs",
    "PairsOnly",
    "ScalarDifference",
    "Shorter",
    "TypeDifference",
    "freeze_value",
]

K = TypeVar("K")
V = TypeVar("V")


def _plain(value: Any) -> Any:
    """Convert tuples and non-dict mappings inside a JSON value to list/dict."""
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# Ordered mapping
# ---------------------------------------------------------------------------


class OrderedPairs(Mapping[K, V]):
    """Immutable mapping that keeps its entries in discovery order.

    Built from a sequence of ``(key, value)`` pairs.  Keys must be unique.
    Two ``OrderedPairs`` are equal only when they hold the same pairs in the
    same order; comparison against a plain ``dict`` ignores order.
    Hashable whenever its keys and values are.

    Example::

        pairs = OrderedPairs([("b", 1), ("a", 2)])
        list(pairs)   # ["b", "a"]
        pairs["a"]    # 2
    """

    __slots__ = ("_index", "_pairs")

    def __init__(self, pairs: Iterable[tuple[K, V]] = ()) -> None:
        self._pairs: tuple[tuple[K, V], ...] = tuple(pairs)
        self._index: dict[K, V] = dict(self._pairs)
        if len(self._index) != len(self._pairs):
            msg = f"duplicate keys in {type(self).__name__}"
            raise ValueError(msg)

    def __getitem__(self, key: K) -> V:
        return self._index[key]

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedPairs):
            return type(self) is type(other) and self._pairs == other._pairs
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._pairs)!r})"

    @property
    def pairs(self) -> tuple[tuple[K, V], ...]:
        """The ``(key, value)`` pairs in discovery order."""
        return self._pairs


def freeze_value(value: Any) -> Any:
    """Return an immutable snapshot of a JSON value.

    Arrays become tuples and objects become ``OrderedPairs`` in their
    original key order, recursively.  Scalars are returned as-is.  The
    snapshot shares nothing mutable with ``value``, so a diff node holding
    it is unaffected by later changes to the compared inputs.
    """
    if isinstance(value, Mapping):
        return OrderedPairs((key, freeze_value(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(freeze_value(item) for item in value)
    return value


def _pairs_to_dict(
    pairs: OrderedPairs[int, Difference] | None,
) -> dict[str, Any] | None:
    if pairs is None:
        return None
    return {str(index): diff.to_dict() for index, diff in pairs.items()}


def _check_pairs(pairs: OrderedPairs[int, Difference] | None, owner: str) -> None:
    if pairs is not None and not pairs:
        msg = f"{owner}.different_pairs must be None or non-empty"
        raise ValueError(msg)


# ---------------------------------------------------------------------------
# Scalar and type mismatches
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ScalarDifference:
    """Two values of the same primitive kind (Bool, Number or String) differ.

    Attributes:
        source: The source value.
        target: The target value.
    """

    source: bool | int | float | str
    target: bool | int | float | str

    def to_dict(self) -> dict[str, Any]:
        return {"difference_of": "Scalar", "source": self.source, "target": self.target}


@dataclass(frozen=True, slots=True)
class TypeDifference:
    """The two values are of different JSON kinds.

    Attributes:
        source_type:  Kind of the source value.
        target_type:  Kind of the target value.
        target_value: The full target value, so a consumer can show what
                      replaced the expected kind.  Held as a frozen
                      snapshot (see ``freeze_value``).
    """

    source_type: JsonType
    target_type: JsonType
    target_value: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "difference_of": "Type",
            "source_type": self.source_type.value,
            "target_type": self.target_type.value,
            "target_value": _plain(self.target_value),
        }


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PairsOnly:
    """Arrays of equal length with at least one differing index."""

    different_pairs: OrderedPairs[int, Difference]

    def __post_init__(self) -> None:
        if not self.different_pairs:
            msg = "PairsOnly.different_pairs must be non-empty"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        return {
            "difference_of": "Array",
            "array_difference": "PairsOnly",
            "different_pairs": _pairs_to_dict(self.different_pairs),
        }


@dataclass(frozen=True, slots=True)
class Shorter:
    """The target array is shorter than the source.

    Attributes:
        different_pairs: Differences within the overlapping prefix, or None.
        extra_elements:  Source elements past the end of the target, by value.
                         Held as frozen snapshots.
    """

    different_pairs: OrderedPairs[int, Difference] | None
    extra_elements: tuple[Any, ...]

    def __post_init__(self) -> None:
        _check_pairs(self.different_pairs, "Shorter")
        if not self.extra_elements:
            msg = "Shorter.extra_elements must be non-empty"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        return {
            "difference_of": "Array",
            "array_difference": "Shorter",
            "different_pairs": _pairs_to_dict(self.different_pairs),
            "extra_elements": _plain(self.extra_elements),
        }


@dataclass(frozen=True, slots=True)
class Longer:
    """The target array is longer than the source.

    Only the number of trailing target elements is kept, not their values.

    Attributes:
        different_pairs:  Differences within the overlapping prefix, or None.
        missing_elements: Count of target elements past the end of the source.
    """

    different_pairs: OrderedPairs[int, Difference] | None
    missing_elements: int

    def __post_init__(self) -> None:
        _check_pairs(self.different_pairs, "Longer")
        if self.missing_elements < 1:
            msg = f"Longer.missing_elements must be >= 1, got {self.missing_elements}"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        return {
            "difference_of": "Array",
            "array_difference": "Longer",
            "different_pairs": _pairs_to_dict(self.different_pairs),
            "missing_elements": self.missing_elements,
        }


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Extra:
    """Key present only in the target; carries a frozen snapshot of its value."""

    value: Any

    def to_dict(self) -> dict[str, Any]:
        return {"entry_difference": "Extra", "value": _plain(self.value)}


@dataclass(frozen=True, slots=True)
class Missing:
    """Key present only in the source."""

    def to_dict(self) -> dict[str, Any]:
        return {"entry_difference": "Missing"}


@dataclass(frozen=True, slots=True)
class Deep:
    """Key present on both sides with differing values."""

    diff: Difference

    def to_dict(self) -> dict[str, Any]:
        return {"entry_difference": "Deep", "diff": self.diff.to_dict()}


class ObjectDifference(OrderedPairs[str, "EntryDifference"]):
    """Per-key differences between two objects, never empty.

    Keys are ordered as discovered: source keys in source order, then
    target-only keys in target order.  Renders as an object whose first
    member is the ``difference_of`` tag followed by one member per key.
    """

    __slots__ = ()

    def __init__(self, pairs: Iterable[tuple[str, EntryDifference]] = ()) -> None:
        super().__init__(pairs)
        if not self._pairs:
            msg = "ObjectDifference must hold at least one entry"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Render the tag followed by one member per key.

        The layout is flat, so an entry for a key literally named
        ``difference_of`` replaces the ``"Object"`` tag in the output.
        Consumers that may see such a key should use the entries of this
        mapping rather than the rendered dict.
        """
        rendered: dict[str, Any] = {"difference_of": "Object"}
        for key, entry in self.items():
            rendered[key] = entry.to_dict()
        return rendered


ArrayDifference = PairsOnly | Shorter | Longer
EntryDifference = Extra | Missing | Deep
Difference = ScalarDifference | TypeDifference | ArrayDifference | ObjectDifference
