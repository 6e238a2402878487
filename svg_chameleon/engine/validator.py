"""Eligibility check for literal attribute values."""

from __future__ import annotations

_VAR_CALL = "var("
# Gradient fills reference <defs> through url(); those are not themed
_URL_CALL = "url("
_NONE = "none"


def is_eligible(value: str) -> bool:
    """Return True if ``value`` is a plain literal that may be replaced by a variable."""
    return _VAR_CALL not in value and _URL_CALL not in value and value != _NONE
