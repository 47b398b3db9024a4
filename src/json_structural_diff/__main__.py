"""Allow ``python -m json_structural_diff``."""

from json_structural_diff.cli import run

run()
