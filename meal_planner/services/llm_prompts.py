"""
Prompt shared by the prompt-driven ingredient parsers.

Both backends send the same instructions and expect the same pipe-delimited
answer, one ingredient per line:

    quantity | unit | item | notes | category
"""

from ..data.ingredient_categories import INGREDIENT_CATEGORIES

INGREDIENT_PROMPT = (
    """
Analyze this recipe and format ONLY the ingredients as follows:
decimal_quantity | unit | item | prep_notes | category

Rules:
1. DO NOT add any bullet points, dashes, or additional formatting
2. Convert ALL fractions to decimals (½ → 0.5, ¾ → 0.75, ⅓ → 0.33, etc.)
3. For items without units, leave the unit field empty but keep the pipe
4. If no prep notes, leave that field empty but keep the pipe
5. Each line should have exactly 4 pipes (|)
6. If a unit seems odd (like c.) use your best judgement to assign an appropriate unit (cup)
7. For ingredients without specified quantities (like garnishes or "to taste" items), use 0.0 as the quantity
8. When ranges of quantities are provided (like 5-6), use the largest quantity
9. When encountering quantities with letters (like 100g orange juice), this typically indicates a quantity and a unit
10. When multiple units are provided, use grams
11. The category must be exactly one of: """
    + ", ".join(INGREDIENT_CATEGORIES)
    + """

Example output format:
0.5 | cup | onion | minced | Produce
1.0 | pound | ground beef | | Meat & Seafood
2.0 | | eggs | beaten | Dairy & Eggs
1.0 | (14 ounce) can | diced tomatoes | | Canned Goods
0.0 | | fresh parsley | for garnish | Herbs & Spices
0.0 | | salt | to taste | Herbs & Spices
100 | g | orange juice | | Beverages
"""
)

TEXT_SUFFIX = "\n\nIngredients text to parse:\n"


def build_text_prompt(text: str) -> str:
    return INGREDIENT_PROMPT + TEXT_SUFFIX + text
