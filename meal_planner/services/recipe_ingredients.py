"""
Conversion of parsed ingredients into saved-recipe ingredient rows.
"""

from typing import Iterable, List

from ..data.ingredient_categories import DEFAULT_CATEGORY
from ..schemas.ingredient_schemas import ParsedIngredient, RecipeIngredient


def to_recipe_ingredients(parsed: Iterable[ParsedIngredient]) -> List[RecipeIngredient]:
    """
    Build recipe ingredient rows from parser output.

    Records with an empty item are dropped and a missing category
    becomes "Other".
    """
    rows = []
    for ingredient in parsed:
        name = ingredient.item.strip()
        if not name:
            continue
        rows.append(
            RecipeIngredient(
                name=name,
                amount=ingredient.quantity,
                unit=ingredient.unit,
                category=ingredient.category or DEFAULT_CATEGORY,
                notes=ingredient.notes,
            )
        )
    return rows
