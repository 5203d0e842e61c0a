"""
Structured data extractor.

Reads the JSON-LD blocks (<script type="application/ld+json">) a page embeds
for search engines and normalizes the first Recipe object found. A block that
is not valid JSON is skipped without stopping the scan of later blocks.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..constants import LD_JSON_TYPE, RECIPE_TYPE
from ..models.recipe import ExtractedRecipe
from .base import RecipeExtractor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinkedDataBlock:
    """Outcome of reading one JSON-LD script: its payload or why it was skipped."""
    index: int
    payload: Any = None
    skip_reason: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None


def _is_ld_json(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower() == LD_JSON_TYPE


def read_block(index: int, script: Tag) -> LinkedDataBlock:
    """Parse the text of a JSON-LD script into a LinkedDataBlock."""
    raw = script.get_text()
    if not raw.strip():
        return LinkedDataBlock(index=index, skip_reason="empty block")
    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError) as e:
        return LinkedDataBlock(index=index, skip_reason=f"invalid JSON ({e})")
    return LinkedDataBlock(index=index, payload=payload)


def is_recipe(candidate: Any) -> bool:
    """True for an object whose @type is, or includes, Recipe."""
    if not isinstance(candidate, dict):
        return False
    declared = candidate.get("@type")
    if isinstance(declared, list):
        return RECIPE_TYPE in declared
    return declared == RECIPE_TYPE


def iter_candidates(payload: Any) -> Iterator[Any]:
    """Objects of a block: the payload itself, array items, then @graph items."""
    items = payload if isinstance(payload, list) else [payload]
    for item in items:
        yield item
        if isinstance(item, dict) and isinstance(item.get("@graph"), list):
            yield from item["@graph"]


def _as_text(value: Any) -> str:
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def normalize_ingredients(raw: Any) -> List[str]:
    """recipeIngredient as a list of strings."""
    if not raw:
        return []
    if isinstance(raw, list):
        # null entries become "" rather than the literal "None"
        return ["" if item is None else str(item) for item in raw]
    return [str(raw)]


def _instruction_texts(step: Any) -> List[str]:
    if isinstance(step, str):
        return [step]
    if not isinstance(step, dict):
        return []
    if step.get("text"):
        return [_as_text(step["text"])]
    # HowToSection groups its steps under itemListElement
    nested = step.get("itemListElement")
    if isinstance(nested, list):
        return [text for child in nested for text in _instruction_texts(child)]
    return []


def normalize_instructions(raw: Any) -> List[str]:
    """recipeInstructions as a list of non-empty strings."""
    if not raw:
        return []
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, list):
        return []
    return [text for step in raw for text in _instruction_texts(step) if text]


class StructuredDataExtractor(RecipeExtractor):
    """Extracts a recipe from embedded JSON-LD metadata."""

    name = "structured_data"

    def find_recipe(self, soup: BeautifulSoup) -> Optional[Dict[str, Any]]:
        """Return the first Recipe object across all JSON-LD blocks, in document order."""
        scripts = soup.find_all("script", attrs={"type": _is_ld_json})
        logger.debug(f"Found {len(scripts)} JSON-LD blocks")

        for index, script in enumerate(scripts):
            block = read_block(index, script)
            if block.skipped:
                logger.debug(f"Skipping JSON-LD block {block.index}: {block.skip_reason}")
                continue
            for candidate in iter_candidates(block.payload):
                if is_recipe(candidate):
                    logger.debug(f"Recipe found in JSON-LD block {block.index}")
                    return candidate
        return None

    def extract(self, soup: BeautifulSoup) -> Optional[ExtractedRecipe]:
        data = self.find_recipe(soup)
        if data is None:
            return None

        return self.build_recipe(
            name=_as_text(data.get("name")),
            description=_as_text(data.get("description")),
            ingredients=normalize_ingredients(data.get("recipeIngredient")),
            directions=normalize_instructions(data.get("recipeInstructions")),
        )
