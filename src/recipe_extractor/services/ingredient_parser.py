"""
Ingredient parser service.

Turns the raw ingredient lines found by an extractor into ParsedIngredient
records. Every line yields exactly one record, in source order:

  - a leading range ("2-3", "2 to 3") fills quantity and quantity2
  - the tokenizer splits the rest into quantity, unit and item
  - lines the tokenizer cannot split keep their original text as item
"""

import logging
import re
from typing import Iterable, List, Optional

from ..models.recipe import ParsedIngredient
from .tokenizer import QUANTITY_PATTERN, tokenize
from .units import UNITS

logger = logging.getLogger(__name__)

_RANGE_RE = re.compile(
    rf"^(?P<low>{QUANTITY_PATTERN})\s*(?:-|–|—|\bto\b)\s*(?P<high>{QUANTITY_PATTERN})(?=\s|$)",
    re.ASCII | re.IGNORECASE,
)


def _none_if_empty(value: str) -> Optional[str]:
    return value or None


def parse_ingredient(original: str, order: int = 0) -> ParsedIngredient:
    """
    Parse a single ingredient line.

    Args:
        original: The untouched source line
        order: Zero-based position of the line in its list

    Returns:
        ParsedIngredient; unparseable lines keep their text as item
    """
    text = original.strip()
    low = None

    range_match = _RANGE_RE.match(text)
    if range_match:
        # Keep the upper bound in front so the tokenizer still sees a quantity
        low = range_match.group("low")
        text = text[range_match.start("high"):]

    tokens = tokenize(text)
    if tokens is None:
        logger.debug(f"No quantity/unit/item split for '{original}'")
        return ParsedIngredient(item=original, original=original, order=order)

    if low is not None:
        quantity, quantity2 = low, _none_if_empty(tokens.quantity)
    else:
        quantity, quantity2 = _none_if_empty(tokens.quantity), None

    return ParsedIngredient(
        quantity=quantity,
        quantity2=quantity2,
        unit=_none_if_empty(tokens.unit),
        unitId=UNITS.unit_id(tokens.unit),
        item=tokens.item,
        original=original,
        order=order,
    )


def parse_ingredients(lines: Iterable[str]) -> List[ParsedIngredient]:
    """Parse ingredient lines, one record per line, preserving order."""
    parsed = [parse_ingredient(line, order) for order, line in enumerate(lines)]

    logger.debug(
        f"Parsed {len(parsed)} ingredients "
        f"({sum(1 for p in parsed if p.quantity is not None)} with quantities)"
    )
    return parsed
