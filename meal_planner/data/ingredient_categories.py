"""
Shopping category lookup data for ingredient classification.

The keyword table is an ordered sequence of (pattern, category) pairs.
Lookups check for an exact match on the lowercased ingredient name first and
otherwise return the category of the first pattern contained in the name, so
the order of the table is part of its contract: longer or more specific
phrases must sit before the shorter words they contain when they belong to a
different category (e.g. "bell pepper" before "pepper").

Note: "soy sauce" and "chocolate chip" historically appeared twice in the
table. They are kept once, at the position of their first appearance, mapped
to the category of their last appearance.
"""

from typing import Dict, List, Tuple

# Type alias for a single keyword entry
CategoryKeyword = Tuple[str, str]

DEFAULT_CATEGORY = "Other"

# Display order for shopping lists
INGREDIENT_CATEGORIES: List[str] = [
    "Produce",
    "Meat & Seafood",
    "Dairy & Eggs",
    "Bakery",
    "Pantry",
    "Canned Goods",
    "Frozen Foods",
    "Condiments & Sauces",
    "Herbs & Spices",
    "Oils & Vinegars",
    "Snacks",
    "Beverages",
    "Baking",
    "Pasta & Rice",
    "Nuts & Seeds",
    "International",
    DEFAULT_CATEGORY,
]

CATEGORY_KEYWORDS: Tuple[CategoryKeyword, ...] = (
    # Produce
    ("apple", "Produce"),
    ("banana", "Produce"),
    ("orange", "Produce"),
    ("lemon", "Produce"),
    ("lime", "Produce"),
    ("lettuce", "Produce"),
    ("spinach", "Produce"),
    ("kale", "Produce"),
    ("carrot", "Produce"),
    ("potato", "Produce"),
    ("onion", "Produce"),
    ("garlic", "Produce"),
    ("tomato", "Produce"),
    ("cucumber", "Produce"),
    ("bell pepper", "Produce"),
    ("broccoli", "Produce"),
    ("cauliflower", "Produce"),
    ("zucchini", "Produce"),
    ("squash", "Produce"),
    ("mushroom", "Produce"),
    ("avocado", "Produce"),
    ("corn", "Produce"),
    ("green bean", "Produce"),
    ("pea", "Produce"),
    ("celery", "Produce"),
    ("ginger", "Produce"),

    # Meat & Seafood
    ("chicken", "Meat & Seafood"),
    ("beef", "Meat & Seafood"),
    ("pork", "Meat & Seafood"),
    ("lamb", "Meat & Seafood"),
    ("turkey", "Meat & Seafood"),
    ("ground beef", "Meat & Seafood"),
    ("ground turkey", "Meat & Seafood"),
    ("sausage", "Meat & Seafood"),
    ("bacon", "Meat & Seafood"),
    ("ham", "Meat & Seafood"),
    ("steak", "Meat & Seafood"),
    ("fish", "Meat & Seafood"),
    ("salmon", "Meat & Seafood"),
    ("tuna", "Meat & Seafood"),
    ("shrimp", "Meat & Seafood"),
    ("crab", "Meat & Seafood"),
    ("lobster", "Meat & Seafood"),
    ("scallop", "Meat & Seafood"),

    # Dairy & Eggs
    ("milk", "Dairy & Eggs"),
    ("cream", "Dairy & Eggs"),
    ("half and half", "Dairy & Eggs"),
    ("butter", "Dairy & Eggs"),
    ("cheese", "Dairy & Eggs"),
    ("cheddar", "Dairy & Eggs"),
    ("mozzarella", "Dairy & Eggs"),
    ("parmesan", "Dairy & Eggs"),
    ("feta", "Dairy & Eggs"),
    ("yogurt", "Dairy & Eggs"),
    ("sour cream", "Dairy & Eggs"),
    ("cream cheese", "Dairy & Eggs"),
    ("egg", "Dairy & Eggs"),

    # Bakery
    ("bread", "Bakery"),
    ("roll", "Bakery"),
    ("bun", "Bakery"),
    ("bagel", "Bakery"),
    ("pita", "Bakery"),
    ("tortilla", "Bakery"),
    ("croissant", "Bakery"),
    ("muffin", "Bakery"),

    # Pantry
    ("flour", "Pantry"),
    ("sugar", "Pantry"),
    ("brown sugar", "Pantry"),
    ("powdered sugar", "Pantry"),
    ("honey", "Pantry"),
    ("maple syrup", "Pantry"),
    ("cereal", "Pantry"),
    ("oatmeal", "Pantry"),
    ("pancake mix", "Pantry"),
    ("chocolate chip", "Baking"),
    ("broth", "Pantry"),
    ("beef broth", "Pantry"),
    ("chicken broth", "Pantry"),
    ("vegetable broth", "Pantry"),
    ("stock", "Pantry"),

    # Canned Goods
    ("canned tomato", "Canned Goods"),
    ("tomato sauce", "Canned Goods"),
    ("tomato paste", "Canned Goods"),
    ("canned bean", "Canned Goods"),
    ("kidney bean", "Canned Goods"),
    ("black bean", "Canned Goods"),
    ("chickpea", "Canned Goods"),
    ("canned corn", "Canned Goods"),
    ("canned tuna", "Canned Goods"),
    ("canned soup", "Canned Goods"),

    # Frozen Foods
    ("frozen vegetable", "Frozen Foods"),
    ("frozen fruit", "Frozen Foods"),
    ("ice cream", "Frozen Foods"),
    ("frozen pizza", "Frozen Foods"),
    ("frozen meal", "Frozen Foods"),

    # Condiments & Sauces
    ("ketchup", "Condiments & Sauces"),
    ("mustard", "Condiments & Sauces"),
    ("mayonnaise", "Condiments & Sauces"),
    ("soy sauce", "International"),
    ("hot sauce", "Condiments & Sauces"),
    ("bbq sauce", "Condiments & Sauces"),
    ("salsa", "Condiments & Sauces"),
    ("jam", "Condiments & Sauces"),
    ("jelly", "Condiments & Sauces"),
    ("peanut butter", "Condiments & Sauces"),

    # Herbs & Spices
    ("salt", "Herbs & Spices"),
    ("pepper", "Herbs & Spices"),
    ("basil", "Herbs & Spices"),
    ("oregano", "Herbs & Spices"),
    ("thyme", "Herbs & Spices"),
    ("rosemary", "Herbs & Spices"),
    ("cinnamon", "Herbs & Spices"),
    ("nutmeg", "Herbs & Spices"),
    ("paprika", "Herbs & Spices"),
    ("cumin", "Herbs & Spices"),
    ("chili powder", "Herbs & Spices"),
    ("bay leaf", "Herbs & Spices"),

    # Oils & Vinegars
    ("olive oil", "Oils & Vinegars"),
    ("vegetable oil", "Oils & Vinegars"),
    ("canola oil", "Oils & Vinegars"),
    ("coconut oil", "Oils & Vinegars"),
    ("sesame oil", "Oils & Vinegars"),
    ("vinegar", "Oils & Vinegars"),
    ("balsamic vinegar", "Oils & Vinegars"),
    ("red wine vinegar", "Oils & Vinegars"),
    ("apple cider vinegar", "Oils & Vinegars"),

    # Snacks
    ("chip", "Snacks"),
    ("cracker", "Snacks"),
    ("pretzel", "Snacks"),
    ("popcorn", "Snacks"),
    ("nut", "Snacks"),
    ("candy", "Snacks"),
    ("chocolate", "Snacks"),

    # Beverages
    ("water", "Beverages"),
    ("soda", "Beverages"),
    ("juice", "Beverages"),
    ("coffee", "Beverages"),
    ("tea", "Beverages"),
    ("wine", "Beverages"),
    ("beer", "Beverages"),

    # Baking
    ("baking powder", "Baking"),
    ("baking soda", "Baking"),
    ("yeast", "Baking"),
    ("vanilla extract", "Baking"),
    ("cocoa powder", "Baking"),

    # Pasta & Rice
    ("pasta", "Pasta & Rice"),
    ("spaghetti", "Pasta & Rice"),
    ("penne", "Pasta & Rice"),
    ("macaroni", "Pasta & Rice"),
    ("rice", "Pasta & Rice"),
    ("brown rice", "Pasta & Rice"),
    ("white rice", "Pasta & Rice"),
    ("quinoa", "Pasta & Rice"),
    ("couscous", "Pasta & Rice"),

    # Nuts & Seeds
    ("almond", "Nuts & Seeds"),
    ("walnut", "Nuts & Seeds"),
    ("pecan", "Nuts & Seeds"),
    ("cashew", "Nuts & Seeds"),
    ("peanut", "Nuts & Seeds"),
    ("sunflower seed", "Nuts & Seeds"),
    ("pumpkin seed", "Nuts & Seeds"),
    ("chia seed", "Nuts & Seeds"),
    ("flax seed", "Nuts & Seeds"),

    # International
    ("curry paste", "International"),
    ("curry powder", "International"),
    ("fish sauce", "International"),
    ("hoisin sauce", "International"),
    ("sriracha", "International"),
    ("tahini", "International"),
    ("miso", "International"),
    ("coconut milk", "International"),
)

# Exact-match index built from the ordered table
_EXACT_LOOKUP: Dict[str, str] = {}
for _keyword, _category in CATEGORY_KEYWORDS:
    _EXACT_LOOKUP.setdefault(_keyword, _category)


def get_exact_category(name: str) -> str | None:
    """Return the category mapped to exactly ``name`` (already lowercased), if any."""
    return _EXACT_LOOKUP.get(name)


def get_all_categories() -> List[str]:
    """Return the category enumeration in display order."""
    return list(INGREDIENT_CATEGORIES)
