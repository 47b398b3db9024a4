"""JSON structural diff - machine-readable differences between JSON documents."""

from __future__ import annotations

from json_structural_diff.api import diff_files, render, to_dict
from json_structural_diff.comparator import (
    compare_arrays,
    compare_objects,
    compare_values,
)
from json_structural_diff.config import RenderOptions
from json_structural_diff.errors import (
    DiffInputError,
    InputUnparseableError,
    InputUnreadableError,
)
from json_structural_diff.loader import load_json
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
from json_structural_diff.value import JsonType, JsonValue, json_type

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayDifference",
    "Deep",
    "DiffInputError",
    "Difference",
    "EntryDifference",
    "Extra",
    "InputUnparseableError",
    "InputUnreadableError",
    "JsonType",
    "JsonValue",
    "Longer",
    "Missing",
    "ObjectDifference",
    "OrderedPairs",
    "PairsOnly",
    "RenderOptions",
    "ScalarDifference",
    "Shorter",
    "TypeDifference",
    "compare_arrays",
    "compare_objects",
    "compare_values",
    "diff_files",
    "freeze_value",
    "json_type",
    "load_json",
    "render",
    "to_dict",
]
