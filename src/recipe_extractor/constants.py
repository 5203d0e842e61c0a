"""Constants for recipe extractor package."""

from types import MappingProxyType
from typing import Mapping, Tuple

# ═══════════════════════════════════════════════════════════════════
# UNIT VOCABULARY
# ═══════════════════════════════════════════════════════════════════

# Canonical unit id -> every spelling accepted for it
UNIT_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    # Volumes
    "tbsp": ("tablespoons", "tablespoon", "tbsps", "tbsp"),
    "tsp": ("teaspoons", "teaspoon", "tsps", "tsp"),
    "cup": ("cups", "cup"),
    "fl_oz": ("fluid ounces", "fluid ounce", "fl oz"),
    "ml": ("milliliters", "milliliter", "millilitres", "millilitre", "ml"),
    "l": ("liters", "liter", "litres", "litre", "l"),
    "pint": ("pints", "pint"),
    "quart": ("quarts", "quart", "qt"),
    "gallon": ("gallons", "gallon", "gal"),
    # Weights
    "oz": ("ounces", "ounce", "oz"),
    "lb": ("pounds", "pound", "lbs", "lb"),
    "kg": ("kilograms", "kilogram", "kg"),
    "g": ("grams", "gram", "g"),
    # Descriptive
    "pinch": ("pinches", "pinch"),
    "dash": ("dashes", "dash"),
    "handful": ("handfuls", "handful"),
    "can": ("cans", "can"),
    "bunch": ("bunches", "bunch"),
    "clove": ("cloves", "clove"),
    "sprig": ("sprigs", "sprig"),
    "slice": ("slices", "slice"),
    "piece": ("pieces", "piece"),
    "stalk": ("stalks", "stalk"),
    "head": ("heads", "head"),
    "stick": ("sticks", "stick"),
    "package": ("packages", "package", "pkg"),
})

# ═══════════════════════════════════════════════════════════════════
# HEURISTIC SELECTORS (most specific first)
# ═══════════════════════════════════════════════════════════════════

NAME_SELECTORS = (
    ".recipe-title",
    ".recipe-name",
    "h1.entry-title",
    "h1.post-title",
    "h1",
)

DESCRIPTION_SELECTORS = (
    ".recipe-description",
    ".recipe-summary",
    ".wprm-recipe-summary",
)

INGREDIENT_SELECTORS = (
    ".ingredients li",
    ".recipe-ingredients li",
    ".wprm-recipe-ingredient",
)

DIRECTION_SELECTORS = (
    ".instructions p",
    ".directions p",
    ".recipe-instructions p",
    ".wprm-recipe-instruction-text",
    ".step",
)

# ═══════════════════════════════════════════════════════════════════
# STRUCTURED DATA
# ═══════════════════════════════════════════════════════════════════

LD_JSON_TYPE = "application/ld+json"
RECIPE_TYPE = "Recipe"

# ═══════════════════════════════════════════════════════════════════
# FAILURE REASONS (reported by the scrape endpoint and CLI)
# ═══════════════════════════════════════════════════════════════════

NO_RECIPE_FOUND = "No recipe data found"
FETCH_TIMEOUT = "Timeout"
