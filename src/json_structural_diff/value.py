"""JsonType StrEnum and value classification for Python JSON values.

The comparison engine works directly on the values produced by
``json.loads``: ``None``, ``bool``, ``int``, ``float``, ``str``, ``list``
and ``dict``.  Tuples are accepted as arrays and any ``Mapping`` with
string keys as an object, so callers can diff values that were built in
code rather than parsed.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

__all__ = ["JsonType", "JsonValue", "json_type"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class JsonType(StrEnum):
    """The six kinds of JSON value.

    Values are the capitalised kind names, which is also how they appear
    in a rendered ``TypeDifference``.
    """

    NULL = "Null"
    ARRAY = "Array"
    BOOL = "Bool"
    OBJECT = "Object"
    STRING = "String"
    NUMBER = "Number"


def json_type(value: Any) -> JsonType:
    """Return the JSON kind of ``value``.

    Args:
        value: Any valid JSON value.

    Returns:
        The matching ``JsonType`` member.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return JsonType.BOOL
    if value is None:
        return JsonType.NULL
    if isinstance(value, (int, float)):
        return JsonType.NUMBER
    if isinstance(value, str):
        return JsonType.STRING
    if isinstance(value, (list, tuple)):
        return JsonType.ARRAY
    if isinstance(value, Mapping):
        return JsonType.OBJECT

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")
