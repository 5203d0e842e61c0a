"""
Extraction pipeline: structured data first, heuristics as a fallback.

The page is parsed once and handed to each strategy in turn; the first
strategy that returns a recipe wins and the remaining ones are not run.
"""

import logging
from typing import Optional, Sequence

from bs4 import BeautifulSoup, ParserRejectedMarkup

from .models.recipe import ExtractedRecipe
from .services.base import RecipeExtractor
from .services.heuristics import HeuristicExtractor
from .services.structured_data import StructuredDataExtractor

logger = logging.getLogger(__name__)


class ExtractionPipeline:
    """Runs extraction strategies in order and keeps the first result."""

    def __init__(self, strategies: Optional[Sequence[RecipeExtractor]] = None):
        if strategies is None:
            strategies = (StructuredDataExtractor(), HeuristicExtractor())
        self.strategies = tuple(strategies)

    def extract_recipe(self, html: str) -> Optional[ExtractedRecipe]:
        """
        Extract a recipe from an HTML document.

        Args:
            html: Complete document body

        Returns:
            The first strategy's recipe, or None when no strategy finds one
        """
        try:
            soup = BeautifulSoup(html or "", "html.parser")
        except ParserRejectedMarkup as e:
            logger.warning(f"Could not parse document: {e}")
            return None

        for strategy in self.strategies:
            recipe = strategy.extract(soup)
            if recipe is not None:
                logger.info(
                    f"Recipe '{recipe.name}' extracted with {strategy.name} "
                    f"({len(recipe.ingredients)} ingredients, {len(recipe.directions)} directions)"
                )
                return recipe
            logger.debug(f"No recipe from {strategy.name}")

        logger.info("No recipe data found in document")
        return None


_default_pipeline = ExtractionPipeline()


def extract_recipe(html: str) -> Optional[ExtractedRecipe]:
    """Extract a recipe with the default strategies."""
    return _default_pipeline.extract_recipe(html)
