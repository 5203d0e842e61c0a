"""
Heuristic extractor.

Fallback for pages without usable structured data: recovers the recipe from
the class names and tags common recipe-blog themes use. A page is accepted
only when a title is found together with ingredients or directions.
"""

import logging
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup

from ..constants import (
    DESCRIPTION_SELECTORS,
    DIRECTION_SELECTORS,
    INGREDIENT_SELECTORS,
    NAME_SELECTORS,
)
from ..models.recipe import ExtractedRecipe
from .base import RecipeExtractor

logger = logging.getLogger(__name__)


def first_text(soup: BeautifulSoup, selectors: Sequence[str]) -> str:
    """Trimmed text of the first element matched, trying selectors in priority order."""
    for selector in selectors:
        element = soup.select_one(selector)
        if element is not None:
            # An empty match still wins; lower-priority selectors are not consulted
            return element.get_text().strip()
    return ""


def all_texts(soup: BeautifulSoup, selectors: Sequence[str]) -> List[str]:
    """Trimmed non-empty texts of every element matched by any selector, in document order."""
    # A single selector group returns each element once even if several selectors match it
    elements = soup.select(", ".join(selectors))
    texts = (element.get_text().strip() for element in elements)
    return [text for text in texts if text]


class HeuristicExtractor(RecipeExtractor):
    """Extracts a recipe from conventional recipe markup."""

    name = "heuristics"

    def __init__(
        self,
        name_selectors: Sequence[str] = NAME_SELECTORS,
        description_selectors: Sequence[str] = DESCRIPTION_SELECTORS,
        ingredient_selectors: Sequence[str] = INGREDIENT_SELECTORS,
        direction_selectors: Sequence[str] = DIRECTION_SELECTORS,
    ):
        self.name_selectors = tuple(name_selectors)
        self.description_selectors = tuple(description_selectors)
        self.ingredient_selectors = tuple(ingredient_selectors)
        self.direction_selectors = tuple(direction_selectors)

    def extract(self, soup: BeautifulSoup) -> Optional[ExtractedRecipe]:
        name = first_text(soup, self.name_selectors)
        ingredients = all_texts(soup, self.ingredient_selectors)
        directions = all_texts(soup, self.direction_selectors)

        # A title alone, or lists alone, is not enough to call it a recipe page
        if not name or (not ingredients and not directions):
            logger.debug(
                f"Heuristics rejected page: name={name!r}, "
                f"{len(ingredients)} ingredients, {len(directions)} directions"
            )
            return None

        return self.build_recipe(
            name=name,
            description=first_text(soup, self.description_selectors),
            ingredients=ingredients,
            directions=directions,
        )
