"""
Pydantic schemas for ingredient parsing.
Defines the parsed-ingredient record shared by every parser strategy,
plus request/response models for the parsing, categorization and
parser comparison endpoints.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class ParserKind(str, Enum):
    """Available ingredient parser strategies."""
    RULES = "rules"
    OPENAI = "openai"
    GEMINI = "gemini"


# =============================================================================
# Core Records
# =============================================================================

class ParsedIngredient(BaseModel):
    """A single structured ingredient produced by any parser."""
    quantity: float = Field(default=0, description="Numeric quantity, 0 when unspecified (e.g. 'salt to taste')")
    unit: str = Field(default="", description="Unit of measurement, empty string when absent")
    item: str = Field(default="", description="Ingredient name")
    notes: Optional[str] = Field(default=None, description="Free-text annotation (e.g. 'minced', 'to taste')")
    category: Optional[str] = Field(default=None, description="Shopping category; callers default to 'Other'")

    class Config:
        json_schema_extra = {
            "example": {
                "quantity": 1,
                "unit": "(14 ounce) can",
                "item": "diced tomatoes",
                "notes": None,
                "category": "Produce"
            }
        }


class RecipeIngredient(BaseModel):
    """Ingredient row as stored on a saved recipe."""
    name: str
    amount: float
    unit: str
    category: str
    notes: Optional[str] = None


# =============================================================================
# Request Models
# =============================================================================

class ParseTextRequest(BaseModel):
    """Request body for parsing a pasted ingredients list."""
    text: str = Field(..., description="Raw ingredients text, one ingredient per line")
    parser: Optional[ParserKind] = Field(default=None, description="Parser strategy; server default when omitted")

    class Config:
        json_schema_extra = {
            "example": {
                "text": "2 cups flour\n1 (14 ounce) can diced tomatoes\nsalt and pepper to taste",
                "parser": "rules"
            }
        }


class CategorizeRequest(BaseModel):
    """Request body for classifying ingredient names."""
    names: List[str] = Field(..., description="Ingredient names to classify")


class ToRecipeRequest(BaseModel):
    """Request body for converting parsed ingredients into recipe rows."""
    ingredients: List[ParsedIngredient]


class CompareParsersRequest(BaseModel):
    """Request body for the parser comparison tool."""
    input: Optional[str] = Field(default=None, description="Custom ingredients text; built-in cases when omitted")
    parser: ParserKind = Field(default=ParserKind.GEMINI, description="Prompt-driven parser to compare against")


# =============================================================================
# Response Models
# =============================================================================

class ParseResponse(BaseModel):
    """Parsed ingredients plus the strategy that produced them."""
    parser: ParserKind
    ingredients: List[ParsedIngredient]


class CategorizedName(BaseModel):
    name: str
    category: str
