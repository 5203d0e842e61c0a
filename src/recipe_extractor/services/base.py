"""Base class shared by the extraction strategies."""

from abc import ABC, abstractmethod
from typing import List, Optional

from bs4 import BeautifulSoup

from ..models.recipe import ExtractedRecipe
from .ingredient_parser import parse_ingredients


class RecipeExtractor(ABC):
    """One way of recovering a recipe from a parsed page."""

    name: str = "base"

    @abstractmethod
    def extract(self, soup: BeautifulSoup) -> Optional[ExtractedRecipe]:
        """Return the recipe found in ``soup``, or None."""

    @staticmethod
    def build_recipe(
        name: str,
        description: str,
        ingredients: List[str],
        directions: List[str],
    ) -> ExtractedRecipe:
        """Assemble an ExtractedRecipe, parsing each ingredient line."""
        return ExtractedRecipe(
            name=name,
            description=description,
            ingredients=ingredients,
            directions=directions,
            parsedIngredients=parse_ingredients(ingredients),
        )
