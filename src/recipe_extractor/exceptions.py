"""Exceptions for recipe extractor package."""


class RecipeExtractorError(Exception):
    """Base class for errors raised around the extraction core."""
    pass


class FetchError(RecipeExtractorError):
    """Raised when a recipe page cannot be retrieved."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason
