"""
Ingredient tokenizer.

Splits one ingredient line into quantity, unit and item, left to right and
without backtracking:

  "1 1/2 tbsp sugar" -> quantity="1 1/2", unit="tbsp", item="sugar"
  "pinch of salt"    -> quantity="",      unit="pinch", item="salt"
"""

import re
from typing import Optional

from ..models.recipe import TokenizedIngredient
from .units import UNITS, UnitVocabulary

# Mixed fraction must come before the simple fraction and the plain number
QUANTITY_PATTERN = r"\d+\s+\d+/\d+|\d+/\d+|\d+(?:\.\d+)?"

_QUANTITY_RE = re.compile(rf"^(?:{QUANTITY_PATTERN})", re.ASCII)
_CONNECTOR_RE = re.compile(r"^of(?:\s+|$)", re.IGNORECASE)


def tokenize(text: Optional[str], units: UnitVocabulary = UNITS) -> Optional[TokenizedIngredient]:
    """
    Tokenize a single ingredient line.

    Args:
        text: Raw ingredient line
        units: Unit vocabulary to match against

    Returns:
        TokenizedIngredient, or None when no item text is left
    """
    if not text or not text.strip():
        return None

    remaining = text.strip()
    quantity = ""
    unit = ""

    qty_match = _QUANTITY_RE.match(remaining)
    if qty_match:
        quantity = qty_match.group(0).strip()
        remaining = remaining[qty_match.end():].lstrip()

    matched_unit = units.match_prefix(remaining)
    if matched_unit:
        unit = matched_unit
        remaining = remaining[len(matched_unit):].lstrip()

    connector = _CONNECTOR_RE.match(remaining)
    if connector:
        remaining = remaining[connector.end():]

    item = remaining.strip()
    if not item:
        return None

    return TokenizedIngredient(quantity=quantity, unit=unit, item=item)
