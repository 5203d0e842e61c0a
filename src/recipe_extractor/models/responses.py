from typing import Any, Dict, List, Optional
from pydantic import BaseModel

from .recipe import ExtractedRecipe


class ScrapeRequest(BaseModel):
    url: Optional[str] = None


class ParseIngredientsRequest(BaseModel):
    lines: List[str] = []


class ScrapeResponse(BaseModel):
    success: bool
    recipe: Optional[ExtractedRecipe] = None
    failureReason: Optional[str] = None

    @classmethod
    def ok(cls, recipe: ExtractedRecipe) -> "ScrapeResponse":
        return cls(success=True, recipe=recipe)

    @classmethod
    def failed(cls, reason: str) -> "ScrapeResponse":
        return cls(success=False, failureReason=reason)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize without the key that does not apply to the outcome."""
        if self.success:
            return {"success": True, "recipe": self.recipe.model_dump()}
        return {"success": False, "failureReason": self.failureReason}
