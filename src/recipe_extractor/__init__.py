"""Recipe extractor package for turning recipe web pages into structured data."""

from .exceptions import FetchError, RecipeExtractorError
from .fetcher import RecipeFetcher
from .models import ExtractedRecipe, ParsedIngredient, TokenizedIngredient
from .pipeline import ExtractionPipeline, extract_recipe
from .services.heuristics import HeuristicExtractor
from .services.ingredient_parser import parse_ingredient, parse_ingredients
from .services.structured_data import StructuredDataExtractor
from .services.tokenizer import tokenize
from .services.units import UNITS, UnitVocabulary

__all__ = [
    "ExtractionPipeline",
    "extract_recipe",
    "StructuredDataExtractor",
    "HeuristicExtractor",
    "tokenize",
    "parse_ingredient",
    "parse_ingredients",
    "UNITS",
    "UnitVocabulary",
    "ExtractedRecipe",
    "ParsedIngredient",
    "TokenizedIngredient",
    "RecipeFetcher",
    "FetchError",
    "RecipeExtractorError",
]
