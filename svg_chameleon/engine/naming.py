"""Custom property naming."""

from __future__ import annotations


def name_for(base_name: str, index: int) -> str:
    """``--color`` for the first value of a category, ``--color-2`` onwards after that."""
    if index == 1:
        return f"--{base_name}"
    return f"--{base_name}-{index}"
