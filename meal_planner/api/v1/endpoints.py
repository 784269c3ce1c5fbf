import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile

from meal_planner.api.v1.deps import ParserFactory, default_parser_kind, get_parser_factory
from meal_planner.core.config import settings
from meal_planner.data.ingredient_categories import get_all_categories
from meal_planner.schemas.harness_schemas import CompareParsersResponse
from meal_planner.schemas.ingredient_schemas import (
    CategorizedName,
    CategorizeRequest,
    CompareParsersRequest,
    ParseResponse,
    ParserKind,
    ParseTextRequest,
    RecipeIngredient,
    ToRecipeRequest,
)
from meal_planner.services.base_parser import IngredientParseError, ParserAuthenticationError
from meal_planner.services.category_classifier import guess_ingredient_category
from meal_planner.services.parser_harness import CollectingSink, run_parser_tests
from meal_planner.services.recipe_ingredients import to_recipe_ingredients

router = APIRouter(prefix="/ingredients", tags=["Ingredients"])
logger = logging.getLogger(__name__)


def _error(status_code: int, code: str, message: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail={"code": code, "message": message})


def _parse_failure(exc: IngredientParseError) -> HTTPException:
    if isinstance(exc, ParserAuthenticationError):
        return _error(401, "PARSER_AUTH_FAILED", exc.message)
    return _error(502, "PARSE_FAILED", exc.message)


# ---------- Categories ----------

@router.get("/categories", response_model=List[str])
async def list_categories():
    """The fixed shopping categories, in display order."""
    return get_all_categories()


@router.post("/categorize", response_model=List[CategorizedName])
async def categorize(body: CategorizeRequest):
    return [CategorizedName(name=name, category=guess_ingredient_category(name)) for name in body.names]


# ---------- Parsing ----------

@router.post("/parse", response_model=ParseResponse)
async def parse_ingredients(
    body: ParseTextRequest,
    parser_factory: ParserFactory = Depends(get_parser_factory),
):
    kind = body.parser or default_parser_kind()
    parser = parser_factory(kind)

    try:
        ingredients = await parser.parse(body.text)
    except IngredientParseError as exc:
        logger.warning("Ingredient parse failed with %s parser: %s", kind.value, exc)
        raise _parse_failure(exc) from exc

    return ParseResponse(parser=kind, ingredients=ingredients)


@router.post("/parse-image", response_model=ParseResponse)
async def parse_ingredients_image(
    file: UploadFile = File(...),
    parser: Optional[ParserKind] = Query(None),
    parser_factory: ParserFactory = Depends(get_parser_factory),
):
    """
    Receive a photo of an ingredients list, send it to a vision model and
    return the parsed ingredients.
    """
    kind = parser or default_parser_kind()
    if kind == ParserKind.RULES:
        raise _error(400, "PARSER_UNSUPPORTED", "The rule-based parser cannot read images.")

    if file.content_type not in settings.allowed_image_types:
        raise _error(
            400,
            "UNSUPPORTED_FILE_TYPE",
            f"Unsupported file type: {file.content_type}. "
            f"Allowed: {', '.join(settings.allowed_image_types)}",
        )

    contents = await file.read()
    if len(contents) > settings.max_image_size_bytes:
        raise _error(
            413,
            "FILE_TOO_LARGE",
            f"File too large ({len(contents)} bytes). Max is {settings.max_image_size_bytes} bytes.",
        )

    try:
        ingredients = await parser_factory(kind).parse_image(contents, file.content_type)
    except IngredientParseError as exc:
        logger.warning("Image ingredient parse failed with %s parser: %s", kind.value, exc)
        raise _parse_failure(exc) from exc

    return ParseResponse(parser=kind, ingredients=ingredients)


@router.post("/to-recipe", response_model=List[RecipeIngredient])
async def convert_to_recipe(body: ToRecipeRequest):
    """Turn reviewed parser output into ingredient rows for a saved recipe."""
    return to_recipe_ingredients(body.ingredients)


# ---------- Parser comparison (debug) ----------

@router.post("/compare", response_model=CompareParsersResponse)
async def compare_parsers(
    body: CompareParsersRequest,
    parser_factory: ParserFactory = Depends(get_parser_factory),
):
    """Run the rule-based parser and a prompt-driven parser side by side."""
    if body.parser == ParserKind.RULES:
        raise _error(400, "PARSER_UNSUPPORTED", "Compare against a prompt-driven parser (openai or gemini).")

    sink = CollectingSink()
    try:
        report = await run_parser_tests(body.input, llm_parser=parser_factory(body.parser), sink=sink)
    except IngredientParseError as exc:
        logger.warning("Parser comparison failed: %s", exc)
        raise _parse_failure(exc) from exc

    return CompareParsersResponse(report=report, output=sink.render())
