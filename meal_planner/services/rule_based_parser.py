"""
Rule-Based Ingredient Parser

Deterministic, network-free parsing of ingredient lines into quantity,
unit, item and notes. Never raises: malformed lines degrade to best-effort
records (quantity 0, empty unit, whatever text remains as the item).

Note: the notes extraction steps run in a fixed order and a later step
replaces what an earlier one set. "(Optional)" is appended to a note taken
from after a comma, but "to taste" overwrites any earlier note.
"""

import logging
import math
import re
from typing import List

from ..schemas.ingredient_schemas import ParsedIngredient
from .base_parser import IngredientTextParser
from .category_classifier import guess_ingredient_category

logger = logging.getLogger(__name__)

SALT_AND_PEPPER = "salt and pepper to taste"

COMMON_UNITS = {
    "cup", "cups",
    "tablespoon", "tablespoons",
    "teaspoon", "teaspoons",
    "pound", "pounds",
    "ounce", "ounces",
    "gram", "grams",
    "kg", "ml", "pinch",
    "can", "cans",
}

# e.g. "1 (14 ounce) can diced tomatoes"
CAN_PATTERN = re.compile(r"^(\d+)?\s*\((\d+(?:\.\d+)?)\s*(\w+)\)\s*(?:cans?\b)?\s*(.+)$")
OPTIONAL_PATTERN = re.compile(r"\(?optional\)?", re.IGNORECASE)
TO_TASTE_PATTERN = re.compile(r"to taste", re.IGNORECASE)
QUANTITY_TOKEN = re.compile(r"^\d|½|/")
FRACTION_TOKEN = re.compile(r"^\d|/")
RANGE_SPLIT = re.compile(r"-| to ")


def _to_number(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        return 0
    return value if math.isfinite(value) else 0


def convert_fraction_to_decimal(fraction: str) -> float:
    """Convert '1/2' to 0.5 and '3' to 3.0; anything unreadable is 0."""
    fraction = fraction.strip()
    if not fraction:
        return 0
    if "/" in fraction:
        numerator, _, denominator = fraction.partition("/")
        divisor = _to_number(denominator)
        if not divisor:
            return 0
        return _to_number(numerator) / divisor
    return _to_number(fraction)


def _parse_mixed_number(quantity_str: str) -> float:
    parts = quantity_str.strip().split()
    if len(parts) > 1:
        return sum(convert_fraction_to_decimal(part) for part in parts)
    return convert_fraction_to_decimal(quantity_str)


def parse_quantity(quantity_str: str) -> float:
    """
    Parse a quantity string into a number.

    Ranges ("2-3", "2 to 3") resolve to the larger bound, mixed numbers
    ("1 1/2") to the sum of their parts, and empty or non-numeric text to 0.

    Examples:
        >>> parse_quantity("1 1/2")
        1.5
        >>> parse_quantity("2 to 3")
        3.0
    """
    if not quantity_str:
        return 0

    if "-" in quantity_str or " to " in quantity_str:
        bounds = RANGE_SPLIT.split(quantity_str)
        return max(_parse_mixed_number(bound) for bound in bounds)

    return _parse_mixed_number(quantity_str)


def _salt_and_pepper() -> List[ParsedIngredient]:
    return [
        ParsedIngredient(quantity=0, unit="", item=item, notes="to taste", category="Herbs & Spices")
        for item in ("salt", "pepper")
    ]


def parse_ingredient_line(line: str) -> List[ParsedIngredient]:
    """
    Parse one ingredient line.

    Args:
        line: A single line of ingredients text

    Returns:
        An empty list for blank lines, two records for "salt and pepper to
        taste", otherwise exactly one record
    """
    if not line.strip():
        return []

    if SALT_AND_PEPPER in line.lower():
        return _salt_and_pepper()

    cleaned = line.strip()
    notes = ""

    # Everything after the first comma is a note
    head, comma, tail = cleaned.partition(",")
    if comma:
        notes = tail.strip()
        cleaned = head.strip()

    if "optional" in cleaned.lower():
        notes = (notes + " " if notes else "") + "(Optional)"
        cleaned = OPTIONAL_PATTERN.sub("", cleaned, count=1).strip()

    if "to taste" in cleaned.lower():
        notes = "to taste"
        cleaned = TO_TASTE_PATTERN.sub("", cleaned, count=1).strip()

    can_match = CAN_PATTERN.match(cleaned)
    if can_match:
        qty, size, size_unit, item = can_match.groups()
        item = item.strip()
        return [
            ParsedIngredient(
                quantity=parse_quantity(qty or "1"),
                unit=f"({size} {size_unit}) can",
                item=item,
                notes=notes or None,
                category=guess_ingredient_category(item),
            )
        ]

    parts = cleaned.split()
    quantity = "0"
    unit = ""

    if parts and QUANTITY_TOKEN.search(parts[0]):
        token = parts.pop(0)
        quantity = re.sub(r"(\d)½", r"\1 1/2", token).replace("½", "1/2")

        # "1 1/2" arrives as two tokens
        if parts and FRACTION_TOKEN.search(parts[0]):
            quantity += " " + parts.pop(0)

    if parts and parts[0].lower() in COMMON_UNITS:
        unit = parts.pop(0).lower()

    item = " ".join(parts).strip()

    return [
        ParsedIngredient(
            quantity=parse_quantity(quantity),
            unit=unit,
            item=item,
            notes=notes or None,
            category=guess_ingredient_category(item),
        )
    ]


def parse_ingredients_with_rules(text: str) -> List[ParsedIngredient]:
    """Parse every line of ``text``, keeping input order."""
    results: List[ParsedIngredient] = []
    for line in (text or "").split("\n"):
        results.extend(parse_ingredient_line(line))

    logger.debug("Rule-based parser produced %d ingredients", len(results))
    return results


class RuleBasedIngredientParser(IngredientTextParser):
    """The always-available, offline parsing strategy."""

    name = "rules"

    async def parse(self, text: str) -> List[ParsedIngredient]:
        return parse_ingredients_with_rules(text)
