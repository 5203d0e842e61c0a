"""Shared FastAPI dependencies — per-request services."""

from typing import AsyncIterator

from ..fetcher import RecipeFetcher


async def get_recipe_fetcher() -> AsyncIterator[RecipeFetcher]:
    """Provide a RecipeFetcher whose HTTP client is closed after the request."""
    async with RecipeFetcher() as fetcher:
        yield fetcher
