from .recipe import ExtractedRecipe, ParsedIngredient, TokenizedIngredient
from .responses import ParseIngredientsRequest, ScrapeRequest, ScrapeResponse

__all__ = [
    "ExtractedRecipe",
    "ParsedIngredient",
    "TokenizedIngredient",
    "ParseIngredientsRequest",
    "ScrapeRequest",
    "ScrapeResponse",
]
