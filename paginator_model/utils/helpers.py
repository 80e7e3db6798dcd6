"""Helper utilities for number checks and text normalization."""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Optional

import pandas as pd


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value).strip()


def is_number(value: object) -> bool:
    """Return True for real, finite numbers, excluding booleans."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, Integral):
        return True
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def to_whole_number(value: object) -> Optional[int]:
    """Return the value as an int when it is a whole number, else None."""
    if not is_number(value):
        return None
    if isinstance(value, Integral):
        return int(value)
    if float(value).is_integer():
        return int(value)
    return None


def parse_whole_number(value: object) -> Optional[int]:
    """Parse numbers or numeric text like " 12 " into an int, else None."""
    if is_number(value):
        return to_whole_number(value)

    raw_value = normalize_text(value)
    if not raw_value:
        return None
    try:
        return int(raw_value)
    except ValueError:
        pass
    try:
        return to_whole_number(float(raw_value))
    except ValueError:
        return None
