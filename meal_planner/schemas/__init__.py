from .ingredient_schemas import (
    CategorizedName,
    ParsedIngredient,
    ParseResponse,
    ParserKind,
    RecipeIngredient,
)
from .harness_schemas import (
    FieldDifference,
    IndexDifference,
    ParserComparison,
    ParserTestCase,
    ParserTestReport,
    CompareParsersResponse,
)

__all__ = [
    "CategorizedName",
    "ParsedIngredient",
    "ParseResponse",
    "ParserKind",
    "RecipeIngredient",
    "FieldDifference",
    "IndexDifference",
    "ParserComparison",
    "ParserTestCase",
    "ParserTestReport",
    "CompareParsersResponse",
]
