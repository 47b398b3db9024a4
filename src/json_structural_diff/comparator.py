"""Recursive structural comparison of two JSON values.

Architecture:
- ``compare_values`` is the single dispatch point.  It classifies both
  values with ``json_type`` and routes same-kind primitives to a scalar
  check, two arrays to ``compare_arrays``, two objects to
  ``compare_objects``, and anything else to a ``TypeDifference``.
- ``compare_arrays`` aligns elements positionally from index 0.  Trailing
  source elements make the result ``Shorter`` (kept by value), trailing
  target elements make it ``Longer`` (kept as a count only).
- ``compare_objects`` walks the source keys first, then reports every
  target key that was never visited as ``Extra``.

The critical invariant: every function returns ``None`` when its inputs
are equal and a non-empty result node otherwise.  Equal subtrees are
pruned, so the presence of a node always means something downstream
differs.  Values carried into the result are frozen snapshots, so the result
shares nothing mutable with the inputs.  No function mutates its inputs
or keeps state between calls.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from json_structural_diff.result import (
    ArrayDifference,
    Deep,
    Difference,
    EntryDifference,
    Extra,
    Longer,
    Missing,
    ObjectDifference,
    OrderedPairs,
    PairsOnly,
    ScalarDifference,
    Shorter,
    TypeDifference,
    freeze_value,
)
from json_structural_diff.value import JsonType, json_type

__all__ = ["compare_arrays", "compare_objects", "compare_values"]


def _scalars_equal(source: Any, target: Any) -> bool:
    """Exact equality for two primitives of the same JSON kind.

    Integers and floats are distinct number forms: ``1`` and ``1.0`` are
    not equal, mirroring how a JSON number keeps its integer or float form.
    """
    if type(source) is not type(target):
        return False
    return bool(source == target)


def compare_values(source: Any, target: Any) -> Difference | None:
    """Compare two JSON values.

    Args:
        source: The "before" value (dict, list, str, int, float, bool, None).
        target: The "after" value.

    Returns:
        None when the values are equal, otherwise the ``Difference`` node
        describing how they disagree.

    Raises:
        TypeError: If either value, or anything nested in it, is not a
            valid JSON type.
    """
    source_type = json_type(source)
    target_type = json_type(target)

    if source_type != target_type:
        return TypeDifference(
            source_type=source_type,
            target_type=target_type,
            target_value=freeze_value(target),
        )

    if source_type == JsonType.NULL:
        return None
    if source_type == JsonType.ARRAY:
        return compare_arrays(source, target)
    if source_type == JsonType.OBJECT:
        return compare_objects(source, target)

    if _scalars_equal(source, target):
        return None
    return ScalarDifference(source=source, target=target)


def compare_arrays(
    source: Sequence[Any],
    target: Sequence[Any],
) -> ArrayDifference | None:
    """Compare two JSON arrays element by element.

    Args:
        source: The "before" array.
        target: The "after" array.

    Returns:
        None if both arrays hold equal elements in the same order; otherwise
        ``Shorter`` when the source has more elements, ``Longer`` when the
        target has more, or ``PairsOnly`` for equal lengths.
    """
    overlap = min(len(source), len(target))

    found: list[tuple[int, Difference]] = []
    for index in range(overlap):
        diff = compare_values(source[index], target[index])
        if diff is not None:
            found.append((index, diff))

    different_pairs = OrderedPairs(found) if found else None

    if len(source) > overlap:
        return Shorter(
            different_pairs=different_pairs,
            extra_elements=freeze_value(source[overlap:]),
        )
    if len(target) > overlap:
        return Longer(
            different_pairs=different_pairs,
            missing_elements=len(target) - overlap,
        )
    if different_pairs is None:
        return None
    return PairsOnly(different_pairs=different_pairs)


def compare_objects(
    source: Mapping[str, Any],
    target: Mapping[str, Any],
) -> ObjectDifference | None:
    """Compare two JSON objects key by key.

    Key order is not significant for equality but fixes the order of the
    result: source keys in source order, then target-only keys in target
    order.

    Args:
        source: The "before" object.
        target: The "after" object.

    Returns:
        None if both objects hold the same keys with equal values, otherwise
        an ``ObjectDifference`` with one entry per disagreeing key.
    """
    entries: list[tuple[str, EntryDifference]] = []
    seen: set[str] = set()

    for key, source_value in source.items():
        if key not in target:
            entries.append((key, Missing()))
            continue
        seen.add(key)
        diff = compare_values(source_value, target[key])
        if diff is not None:
            entries.append((key, Deep(diff=diff)))

    for key, target_value in target.items():
        if key not in seen:
            entries.append((key, Extra(value=freeze_value(target_value))))

    if not entries:
        return None
    return ObjectDifference(entries)
