import json

import pytest

RECIPE_JSON_LD = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Classic Pancakes",
    "description": "Fluffy weekend pancakes.",
    "recipeIngredient": [
        "1 1/2 cups all-purpose flour",
        "2 tbsp sugar",
        "1/2 tsp salt",
        "pinch of nutmeg",
        "2 eggs",
    ],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "Whisk the dry ingredients."},
        {"@type": "HowToStep", "text": "Beat in the eggs."},
        "Cook on a hot griddle.",
    ],
}


def ld_json_script(payload) -> str:
    """Wrap a payload (dict/list, or raw text) in a JSON-LD script tag."""
    body = payload if isinstance(payload, str) else json.dumps(payload)
    return f'<script type="application/ld+json">{body}</script>'


# Page using common recipe-blog classes, without structured data
HEURISTIC_RECIPE_HTML = """
<html>
    <head><title>Tomato Soup | My Blog</title></head>
    <body>
        <h1 class="entry-title">Tomato Soup</h1>
        <div class="recipe-summary">A quick weeknight soup.</div>
        <div class="recipe-ingredients">
            <ul>
                <li>2 cups crushed tomatoes</li>
                <li>  1 clove garlic  </li>
                <li></li>
                <li>Salt to taste</li>
            </ul>
        </div>
        <div class="recipe-instructions">
            <p>Simmer the tomatoes with the garlic.</p>
            <p>Season and blend.</p>
        </div>
    </body>
</html>
"""

# Page with a heading but nothing that looks like a recipe
NOT_A_RECIPE_HTML = """
<html>
    <body>
        <h1>About us</h1>
        <p>We write about food.</p>
        <ul><li>Contact</li><li>Archive</li></ul>
    </body>
</html>
"""


def page(*parts: str) -> str:
    return "<html><head>" + "".join(parts) + "</head><body></body></html>"


@pytest.fixture
def structured_html() -> str:
    return page(ld_json_script(RECIPE_JSON_LD))


@pytest.fixture
def heuristic_html() -> str:
    return HEURISTIC_RECIPE_HTML


@pytest.fixture
def combined_html() -> str:
    """Both structured data and heuristic markup, describing different recipes."""
    return HEURISTIC_RECIPE_HTML.replace(
        "<head>", "<head>" + ld_json_script(RECIPE_JSON_LD)
    )
