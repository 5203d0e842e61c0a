import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from ...fetcher import RecipeFetcher
from ...models.recipe import ParsedIngredient
from ...models.responses import ParseIngredientsRequest, ScrapeRequest
from ...services.ingredient_parser import parse_ingredients
from ..dependencies import get_recipe_fetcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["scrape"])


@router.post("/scrape")
async def scrape(
    request: Optional[ScrapeRequest] = Body(default=None),
    fetcher: RecipeFetcher = Depends(get_recipe_fetcher),
):
    """Fetch a URL and return the recipe found on the page."""
    if request is None or not request.url:
        return JSONResponse(status_code=400, content={"error": "url is required"})

    result = await fetcher.scrape_recipe(request.url)
    if not result.success:
        logger.info(f"Scrape of {request.url} failed: {result.failureReason}")
    return result.to_payload()


@router.post("/ingredients/parse", response_model=List[ParsedIngredient])
async def parse_ingredient_lines(request: ParseIngredientsRequest):
    """Split raw ingredient lines into quantity, unit and item."""
    return parse_ingredients(request.lines)
