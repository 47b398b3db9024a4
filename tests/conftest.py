"""Shared fixtures: a source/target pair exercising every kind of difference."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def kitchen_sink_source() -> dict[str, Any]:
    return {
        "matches": "a",
        "missing_key": "a",
        "value_difference": 1,
        "type_difference": 1,
        "length_difference": [],
        "different_elements": ["a", "a"],
    }


@pytest.fixture
def kitchen_sink_target() -> dict[str, Any]:
    return {
        "matches": "a",
        "extra_key": "b",
        "value_difference": 2,
        "type_difference": "1",
        "length_difference": [True],
        "different_elements": ["a", "ab"],
    }


@pytest.fixture
def kitchen_sink_wire() -> dict[str, Any]:
    """The rendered diff of kitchen_sink_source -> kitchen_sink_target."""
    return {
        "difference_of": "Object",
        "missing_key": {"entry_difference": "Missing"},
        "value_difference": {
            "entry_difference": "Deep",
            "diff": {"difference_of": "Scalar", "source": 1, "target": 2},
        },
        "type_difference": {
            "entry_difference": "Deep",
            "diff": {
                "difference_of": "Type",
                "source_type": "Number",
                "target_type": "String",
                "target_value": "1",
            },
        },
        "length_difference": {
            "entry_difference": "Deep",
            "diff": {
                "difference_of": "Array",
                "array_difference": "Longer",
                "different_pairs": None,
                "missing_elements": 1,
            },
        },
        "different_elements": {
            "entry_difference": "Deep",
            "diff": {
                "difference_of": "Array",
                "array_difference": "PairsOnly",
                "different_pairs": {
                    "1": {"difference_of": "Scalar", "source": "a", "target": "ab"},
                },
            },
        },
        "extra_key": {"entry_difference": "Extra", "value": "b"},
    }
