"""
Services module for ingredient parsing.
Contains the category classifier, the rule-based and prompt-driven parsers,
and the differential harness that compares them.
"""

from .base_parser import (
    ImageReadError,
    IngredientParseError,
    IngredientTextParser,
    ParserAuthenticationError,
)
from .category_classifier import guess_ingredient_category
from .llm_parsers import GeminiIngredientParser, OpenAIIngredientParser, get_ingredient_parser
from .parser_harness import run_parser_tests
from .rule_based_parser import RuleBasedIngredientParser, parse_ingredients_with_rules

__all__ = [
    "ImageReadError",
    "IngredientParseError",
    "IngredientTextParser",
    "ParserAuthenticationError",
    "guess_ingredient_category",
    "GeminiIngredientParser",
    "OpenAIIngredientParser",
    "get_ingredient_parser",
    "run_parser_tests",
    "RuleBasedIngredientParser",
    "parse_ingredients_with_rules",
]
