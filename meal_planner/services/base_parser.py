"""
Base Ingredient Parser.

Defines the interface shared by every ingredient parsing strategy and the
errors a call-level parse failure surfaces as.
"""

from abc import ABC, abstractmethod
from typing import List

from ..schemas.ingredient_schemas import ParsedIngredient

TEXT_FAILURE_MESSAGE = "Failed to parse ingredients. Please try again."
IMAGE_FAILURE_MESSAGE = "Failed to parse ingredients from image. Please try again."


class IngredientParseError(Exception):
    """A whole parse call failed; the message is safe to show to users."""

    def __init__(self, message: str = TEXT_FAILURE_MESSAGE):
        super().__init__(message)
        self.message = message


class ParserAuthenticationError(IngredientParseError):
    """The backend API key is missing or was rejected."""


class ImageReadError(IngredientParseError):
    """The uploaded image could not be read."""

    def __init__(self, message: str = IMAGE_FAILURE_MESSAGE):
        super().__init__(message)


class IngredientTextParser(ABC):
    """Abstract base class for ingredient parsers.

    All parsers turn raw ingredients text into a list of ParsedIngredient
    records with the same shape, so callers can switch strategies freely.
    """

    name: str = "base"

    @abstractmethod
    async def parse(self, text: str) -> List[ParsedIngredient]:
        """Parse a block of ingredients text.

        Args:
            text: Raw ingredients text, one ingredient per line

        Returns:
            Parsed ingredients in input order
        """
        pass

    async def parse_image(self, image: bytes, content_type: str = "image/jpeg") -> List[ParsedIngredient]:
        """Parse ingredients from a photo of an ingredients list."""
        raise IngredientParseError(f"The {self.name} parser cannot read images.")
