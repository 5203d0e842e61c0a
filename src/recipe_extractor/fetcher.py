from typing import Optional
import asyncio
import logging

import httpx

from .config import get_settings
from .constants import FETCH_TIMEOUT, NO_RECIPE_FOUND
from .exceptions import FetchError
from .models.responses import ScrapeResponse
from .pipeline import ExtractionPipeline

logger = logging.getLogger(__name__)


class RecipeFetcher:
    """Service for fetching recipe pages and running them through the pipeline."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        pipeline: Optional[ExtractionPipeline] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds, defaults to FETCH_TIMEOUT setting
            user_agent: User-Agent header, defaults to SCRAPER_USER_AGENT setting
            pipeline: Extraction pipeline, defaults to structured data then heuristics
            transport: Optional httpx transport (used by tests)
        """
        settings = get_settings()
        self.headers = {
            "User-Agent": user_agent or settings.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        }
        self.client = httpx.AsyncClient(
            headers=self.headers,
            follow_redirects=True,
            timeout=timeout if timeout is not None else settings.fetch_timeout,
            transport=transport,
        )
        self.pipeline = pipeline or ExtractionPipeline()

    async def fetch_html(self, url: str) -> str:
        """
        Fetch the body of a page.

        Args:
            url: The URL to fetch

        Returns:
            The response text

        Raises:
            FetchError: If the request times out, fails, or returns a non-2xx status
        """
        try:
            response = await self.client.get(url)
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout fetching {url}: {e}")
            raise FetchError(url, FETCH_TIMEOUT) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Failed to fetch {url}: {e}")
            raise FetchError(url, NO_RECIPE_FOUND) from e

        if not response.is_success:
            reason = f"{response.status_code} {response.reason_phrase}".strip()
            logger.warning(f"Fetching {url} returned {reason}")
            raise FetchError(url, reason)

        logger.debug(f"Fetched {url} ({len(response.text)} characters)")
        return response.text

    async def scrape_recipe(self, url: str) -> ScrapeResponse:
        """
        Fetch a page and extract its recipe.

        Args:
            url: The URL of the recipe page

        Returns:
            ScrapeResponse with the recipe or the reason it could not be produced
        """
        logger.info(f"Scraping recipe from URL: {url}")
        try:
            html = await self.fetch_html(url)
        except FetchError as e:
            return ScrapeResponse.failed(e.reason)

        # Parsing is CPU-bound; keep it off the event loop
        recipe = await asyncio.to_thread(self.pipeline.extract_recipe, html)
        if recipe is None:
            return ScrapeResponse.failed(NO_RECIPE_FOUND)
        return ScrapeResponse.ok(recipe)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self):
        """Support for async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Clean up resources."""
        await self.aclose()
