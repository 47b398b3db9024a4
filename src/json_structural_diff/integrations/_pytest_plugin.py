"""pytest plugin for json-structural-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_structural_diff import compare_values, render


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable asserting two JSON values are equal.

    Usage in tests::

        def test_config_stable(assert_json_unchanged):
            assert_json_unchanged(load_config(), {"retries": 3})

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` carrying the rendered diff, where ``expected`` is
        the source and ``actual`` the target of the comparison.
    """

    def _assert(actual: Any, expected: Any) -> None:
        diff = compare_values(expected, actual)
        if diff is not None:
            raise AssertionError(
                "JSON documents differ (expected -> actual):\n" + render(diff)
            )

    return _assert
