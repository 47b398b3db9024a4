"""RenderOptions: how a diff is turned into JSON text.

RenderOptions is a frozen (immutable) dataclass validated on
construction.  It only affects presentation; the comparison itself has
no tunable parameters.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["RenderOptions"]


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Immutable options for ``render``.

    Attributes:
        indent: Spaces per nesting level, or None for single-line output.
            Defaults to 2.
        ensure_ascii: When True, non-ASCII characters are escaped.
            Default False.
    """

    indent: int | None = 2
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if self.indent is not None and self.indent < 0:
            msg = f"indent must be >= 0 or None, got {self.indent}"
            raise ValueError(msg)
