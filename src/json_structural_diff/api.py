"""Public convenience functions built on the comparison engine.

``to_dict`` and ``render`` turn a diff into its tagged wire form;
``diff_files`` loads two JSON files and compares them.  Each call is
independent: nothing is cached or shared between calls.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from json_structural_diff.comparator import compare_values
from json_structural_diff.config import RenderOptions
from json_structural_diff.loader import load_json
from json_structural_diff.result import Difference

__all__ = ["diff_files", "render", "to_dict"]


def to_dict(diff: Difference | None) -> dict[str, Any] | None:
    """Return the JSON-compatible, variant-tagged form of ``diff``.

    Args:
        diff: A result of ``compare_values``.

    Returns:
        None when there is no difference, otherwise plain dicts, lists and
        scalars ready for ``json.dumps``.
    """
    if diff is None:
        return None
    return diff.to_dict()


def render(diff: Difference, options: RenderOptions | None = None) -> str:
    """Render a diff as JSON text.

    Args:
        diff:    The difference to render.
        options: Presentation options.  Defaults to ``RenderOptions()``
                 (two-space indentation, UTF-8 characters kept as-is).

    Returns:
        The JSON text, without a trailing newline.
    """
    options = options if options is not None else RenderOptions()
    return json.dumps(
        diff.to_dict(),
        indent=options.indent,
        ensure_ascii=options.ensure_ascii,
    )


def diff_files(source_path: str | Path, target_path: str | Path) -> Difference | None:
    """Load two JSON files and compare their contents.

    Args:
        source_path: The "before" document.
        target_path: The "after" document.

    Returns:
        None if the documents are equal, otherwise their ``Difference``.

    Raises:
        InputUnreadableError: If either file cannot be read.
        InputUnparseableError: If either file is not valid JSON.
    """
    source = load_json(source_path)
    target = load_json(target_path)
    return compare_values(source, target)
