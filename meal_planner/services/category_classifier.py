"""
Ingredient Category Classifier

Maps a free-text ingredient name to one of the fixed shopping categories
using the ordered keyword table in ``data.ingredient_categories``.
"""

from ..data.ingredient_categories import (
    CATEGORY_KEYWORDS,
    DEFAULT_CATEGORY,
    get_exact_category,
)


def guess_ingredient_category(ingredient_name: str) -> str:
    """
    Guess the shopping category for an ingredient name.

    Exact matches on the lowercased name win; otherwise the first keyword
    contained in the name decides. Unknown names fall back to "Other".

    Args:
        ingredient_name: Ingredient name in any case (may be empty)

    Returns:
        A member of the category enumeration
    """
    name_lower = (ingredient_name or "").lower()

    exact = get_exact_category(name_lower)
    if exact:
        return exact

    for keyword, category in CATEGORY_KEYWORDS:
        if keyword in name_lower:
            return category

    return DEFAULT_CATEGORY
