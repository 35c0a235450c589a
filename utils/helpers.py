# utils/helpers.py
from typing import Optional
import numpy as np
from .constants import (
    VALID_RULES, BASE_CONFIDENCE, CONFIDENCE_STEP,
    MIN_CONFIDENCE_LEVEL, MAX_CONFIDENCE_LEVEL,
)

def normalize_text(x) -> str:
    """Return a stripped string, converting NaN/None to ""."""
    if x is None:
        return ""
    if isinstance(x, float) and np.isnan(x):
        return ""
    return str(x).strip()

def optional_text(x) -> Optional[str]:
    """Like normalize_text, but blanks become None."""
    text = normalize_text(x)
    return text or None

def normalize_rule(rule) -> Optional[str]:
    """Upper-case and strip a rule value; return None unless it is AND/OR."""
    text = normalize_text(rule).upper()
    return text if text in VALID_RULES else None

def normalize_id(value) -> Optional[str]:
    """
    Normalize a relational id to text.
    pandas reads integer id columns holding blanks as floats, so 3.0 and "3" both map to "3".
    """
    if isinstance(value, (float, np.floating)):
        if np.isnan(value):
            return None
        if float(value).is_integer():
            return str(int(value))
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return str(int(value))
    return optional_text(value)

def is_valid_level(level) -> bool:
    """True for a real number inside the 0-5 confidence scale."""
    if isinstance(level, bool) or not isinstance(level, (int, float, np.integer, np.floating)):
        return False
    if np.isnan(level):
        return False
    return MIN_CONFIDENCE_LEVEL <= level <= MAX_CONFIDENCE_LEVEL

def level_to_confidence(level) -> float:
    """Map a 0-5 confidence level to a 0.5-1.0 score."""
    return BASE_CONFIDENCE + float(level) * CONFIDENCE_STEP

def confidence_to_level(confidence) -> Optional[float]:
    """Back-convert a 0.5-1.0 score to the 0-5 scale (rounded to one decimal)."""
    if confidence is None:
        return None
    return round((float(confidence) - BASE_CONFIDENCE) / CONFIDENCE_STEP, 1)
