from typing import Callable

from meal_planner.core.config import settings
from meal_planner.schemas.ingredient_schemas import ParserKind
from meal_planner.services.base_parser import IngredientTextParser
from meal_planner.services.llm_parsers import get_ingredient_parser

ParserFactory = Callable[[ParserKind], IngredientTextParser]


def get_parser_factory() -> ParserFactory:
    return get_ingredient_parser


def default_parser_kind() -> ParserKind:
    return settings.default_parser
