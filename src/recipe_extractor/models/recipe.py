from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class TokenizedIngredient(BaseModel):
    """Quantity, unit and item segments of a single ingredient line"""
    model_config = ConfigDict(frozen=True)

    quantity: str = ""
    unit: str = ""
    item: str = ""


class ParsedIngredient(BaseModel):
    """Represents a single ingredient line of an extracted recipe"""
    model_config = ConfigDict(frozen=True)

    quantity: Optional[str] = None
    quantity2: Optional[str] = Field(
        default=None,
        description="Upper bound of a ranged quantity such as '2-3'"
    )
    unit: Optional[str] = Field(
        default=None,
        description="Unit as written in the source line"
    )
    unitId: Optional[str] = Field(
        default=None,
        description="Canonical identifier of the unit"
    )
    item: str
    original: str
    order: int = Field(ge=0)


class ExtractedRecipe(BaseModel):
    """Recipe data recovered from a web page"""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    ingredients: List[str] = []
    directions: List[str] = []
    parsedIngredients: List[ParsedIngredient] = []

    @model_validator(mode='after')
    def check_parsed_ingredients(self) -> "ExtractedRecipe":
        """Every ingredient line must have exactly one parsed counterpart"""
        if len(self.parsedIngredients) != len(self.ingredients):
            raise ValueError(
                f"parsedIngredients has {len(self.parsedIngredients)} entries "
                f"for {len(self.ingredients)} ingredients"
            )
        return self
