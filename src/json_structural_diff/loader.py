"""Read and parse JSON input files.

Parsing follows RFC 8259 strictly: the non-standard constants ``NaN``,
``Infinity`` and ``-Infinity`` that ``json.loads`` accepts by default are
rejected, since no JSON number can hold them.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from json_structural_diff.errors import InputUnparseableError, InputUnreadableError

__all__ = ["load_json", "parse_json"]

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name!r}")


def parse_json(text: str, path: Path) -> Any:
    """Parse ``text`` as a single JSON document.

    Args:
        text: The document text.
        path: Where the text came from, used in the error.

    Returns:
        The parsed JSON value.

    Raises:
        InputUnparseableError: If the text is not valid JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        # json.JSONDecodeError subclasses ValueError
        raise InputUnparseableError(path, exc) from exc


def load_json(path: str | Path) -> Any:
    """Read the file at ``path`` and parse it as JSON.

    Args:
        path: Path to a UTF-8 encoded JSON file.

    Returns:
        The parsed JSON value.

    Raises:
        InputUnreadableError: If the file cannot be read or decoded.
        InputUnparseableError: If the contents are not valid JSON.
    """
    path = Path(path)
    logger.debug("loading %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnreadableError(path, exc) from exc
    return parse_json(text, path)
