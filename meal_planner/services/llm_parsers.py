"""
Prompt-driven ingredient parsers.

Two transports share one prompt and one response decoder:

- OpenAIIngredientParser: OpenAI chat completions (text and vision)
- GeminiIngredientParser: Gemini ``generate_content`` through the Google SDK

Line-level problems in the model's answer are dropped silently. Anything
that fails the whole call (transport, auth, a response without content)
surfaces as a single IngredientParseError.
"""

import base64
import logging
import re
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from openai import AsyncOpenAI, AuthenticationError, PermissionDeniedError
from PIL import Image, UnidentifiedImageError

from ..core.config import Settings, settings
from ..data.ingredient_categories import INGREDIENT_CATEGORIES
from ..schemas.ingredient_schemas import ParsedIngredient, ParserKind
from .base_parser import (
    IMAGE_FAILURE_MESSAGE,
    TEXT_FAILURE_MESSAGE,
    ImageReadError,
    IngredientParseError,
    IngredientTextParser,
    ParserAuthenticationError,
)
from .category_classifier import guess_ingredient_category
from .llm_prompts import INGREDIENT_PROMPT, build_text_prompt
from .rule_based_parser import RuleBasedIngredientParser

logger = logging.getLogger(__name__)

ImageSource = Union[bytes, str, Path]

# Same leading-number reading as a lenient float parse: "1.0", "100g" -> 100
LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
FILLER_PREFIXES = ("Here", "I")

# Pillow format name -> content type sent upstream
SUPPORTED_IMAGE_FORMATS = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "GIF": "image/gif",
    "WEBP": "image/webp",
}


# =============================================================================
# Response decoding
# =============================================================================

def _leading_float(text: str) -> Optional[float]:
    match = LEADING_NUMBER.match(text.strip())
    if not match:
        return None
    return float(match.group(0))


def parse_ingredient_lines(content: str) -> List[ParsedIngredient]:
    """
    Decode a pipe-delimited model answer into parsed ingredients.

    Accepts ``quantity | unit | item | notes`` and
    ``quantity | unit | item | notes | category`` lines. Conversational
    filler, lines without a pipe, lines with another column count and lines
    whose first column is not a number are dropped.

    Args:
        content: Raw text returned by the model

    Returns:
        One record per valid line, in original order (possibly empty)
    """
    lines = [line.strip() for line in (content or "").strip().split("\n")]
    lines = [
        line for line in lines
        if line and not line.startswith(FILLER_PREFIXES) and "|" in line
    ]
    logger.debug("Cleaned response lines: %s", lines)

    ingredients = []
    for line in lines:
        parts = [part.strip() for part in line.split("|")]
        quantity = _leading_float(parts[0])
        if len(parts) not in (4, 5) or quantity is None:
            logger.debug("Discarding invalid line: %s", line)
            continue

        unit, item, notes = parts[1], parts[2], parts[3]
        category = parts[4] if len(parts) == 5 else ""
        if category not in INGREDIENT_CATEGORIES:
            if category:
                logger.debug("Unknown category %r for %r, guessing instead", category, item)
            category = guess_ingredient_category(item)

        ingredients.append(
            ParsedIngredient(
                quantity=quantity,
                unit=unit,
                item=item,
                notes=notes or None,
                category=category,
            )
        )

    return ingredients


# =============================================================================
# Image helpers
# =============================================================================

def read_image(image: ImageSource) -> Tuple[bytes, str]:
    """
    Load an image and make sure it decodes before it is sent anywhere.

    Args:
        image: Raw image bytes, or a path to an image file

    Returns:
        Tuple of (image bytes, detected content type)

    Raises:
        ImageReadError: If the file can't be read, is corrupt or isn't a supported format
    """
    if isinstance(image, (str, Path)):
        try:
            data = Path(image).read_bytes()
        except OSError as exc:
            logger.warning("Could not read image file %s: %s", image, exc)
            raise ImageReadError() from exc
    else:
        data = image

    if not data:
        raise ImageReadError()

    try:
        with Image.open(BytesIO(data)) as img:
            img.verify()
            image_format = img.format
        # verify() leaves the image unusable; reopen to decode the pixel data
        with Image.open(BytesIO(data)) as img:
            img.load()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError, EOFError) as exc:
        logger.warning("Image data could not be decoded: %s", exc)
        raise ImageReadError() from exc

    content_type = SUPPORTED_IMAGE_FORMATS.get(image_format)
    if content_type is None:
        logger.warning("Unsupported image format: %s", image_format)
        raise ImageReadError()

    return data, content_type


def encode_image(image: ImageSource, content_type: Optional[str] = None) -> Tuple[str, str]:
    """
    Read an image into base64 for inlining in a request.

    Args:
        image: Raw image bytes, or a path to an image file
        content_type: Declared content type; the detected type wins

    Returns:
        Tuple of (base64 data, content type)
    """
    data, detected = read_image(image)
    if content_type and content_type != detected:
        logger.debug("Declared %s but image decodes as %s", content_type, detected)
    return base64.b64encode(data).decode("utf-8"), detected


# =============================================================================
# Transports
# =============================================================================

class OpenAIIngredientParser(IngredientTextParser):
    """Parses ingredients with OpenAI chat completions."""

    name = "openai"

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or settings

    def _client(self) -> AsyncOpenAI:
        if not self.config.openai_api_key:
            raise ParserAuthenticationError(
                "OpenAI API key is not configured. Set OPENAI_API_KEY in .env"
            )
        return AsyncOpenAI(
            api_key=self.config.openai_api_key,
            base_url=self.config.openai_base_url,
            max_retries=0,
            timeout=self.config.llm_timeout_seconds,
        )

    async def _complete(self, model: str, content: Any, failure_message: str) -> str:
        client = self._client()
        try:
            completion = await client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": content}],
                temperature=self.config.llm_temperature,
                max_tokens=self.config.llm_max_tokens,
            )
        except (AuthenticationError, PermissionDeniedError) as exc:
            logger.error("OpenAI rejected the API key: %s", exc)
            raise ParserAuthenticationError("OpenAI rejected the configured API key.") from exc
        except Exception as exc:
            logger.exception("OpenAI request failed")
            raise IngredientParseError(failure_message) from exc

        if not completion.choices or not completion.choices[0].message.content:
            logger.error("Unexpected OpenAI response: %s", completion)
            raise IngredientParseError(failure_message)

        return completion.choices[0].message.content

    async def parse(self, text: str) -> List[ParsedIngredient]:
        content = await self._complete(
            self.config.openai_text_model, build_text_prompt(text), TEXT_FAILURE_MESSAGE
        )
        ingredients = parse_ingredient_lines(content)
        logger.info("OpenAI parser produced %d ingredients", len(ingredients))
        return ingredients

    async def parse_image(self, image: ImageSource, content_type: str = "image/jpeg") -> List[ParsedIngredient]:
        image_b64, detected_type = encode_image(image, content_type)
        data_url = f"data:{detected_type};base64,{image_b64}"
        content = await self._complete(
            self.config.openai_vision_model,
            [
                {"type": "text", "text": INGREDIENT_PROMPT},
                {"type": "image_url", "image_url": {"url": data_url}},
            ],
            IMAGE_FAILURE_MESSAGE,
        )
        ingredients = parse_ingredient_lines(content)
        logger.info("OpenAI parser produced %d ingredients from image", len(ingredients))
        return ingredients


def _is_rejected_key(exc: Exception) -> bool:
    if isinstance(exc, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied)):
        return True
    # An invalid key comes back as 400 rather than 401
    return isinstance(exc, google_exceptions.InvalidArgument) and "API_KEY_INVALID" in str(exc)


class GeminiIngredientParser(IngredientTextParser):
    """Parses ingredients with Gemini through the google-generativeai SDK."""

    name = "gemini"

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or settings

    def _model(self) -> "genai.GenerativeModel":
        if not self.config.gemini_api_key:
            raise ParserAuthenticationError(
                "Gemini API key is not configured. Set GEMINI_API_KEY in .env"
            )
        genai.configure(api_key=self.config.gemini_api_key)
        return genai.GenerativeModel(self.config.gemini_model)

    async def _generate(self, contents: List[Any], failure_message: str) -> str:
        model = self._model()
        # No SDK-level retries; the caller owns retry policy
        request_options: Dict[str, Any] = {"retry": None}
        if self.config.llm_timeout_seconds is not None:
            request_options["timeout"] = self.config.llm_timeout_seconds

        try:
            response = await model.generate_content_async(
                contents,
                generation_config=genai.types.GenerationConfig(
                    temperature=self.config.llm_temperature,
                    max_output_tokens=self.config.llm_max_tokens,
                ),
                request_options=request_options,
            )
        except Exception as exc:
            if _is_rejected_key(exc):
                logger.error("Gemini rejected the API key: %s", exc)
                raise ParserAuthenticationError("Gemini rejected the configured API key.") from exc
            logger.exception("Gemini request failed")
            raise IngredientParseError(failure_message) from exc

        try:
            content = response.text
        except ValueError as exc:
            # Raised by the SDK when the answer was blocked or has no text parts
            logger.error("Gemini returned no usable text: %s", exc)
            raise IngredientParseError(failure_message) from exc

        if not content:
            logger.error("Gemini returned an empty answer")
            raise IngredientParseError(failure_message)

        return content

    async def parse(self, text: str) -> List[ParsedIngredient]:
        content = await self._generate([build_text_prompt(text)], TEXT_FAILURE_MESSAGE)
        ingredients = parse_ingredient_lines(content)
        logger.info("Gemini parser produced %d ingredients", len(ingredients))
        return ingredients

    async def parse_image(self, image: ImageSource, content_type: str = "image/jpeg") -> List[ParsedIngredient]:
        data, detected_type = read_image(image)
        content = await self._generate(
            [INGREDIENT_PROMPT, {"mime_type": detected_type, "data": data}],
            IMAGE_FAILURE_MESSAGE,
        )
        ingredients = parse_ingredient_lines(content)
        logger.info("Gemini parser produced %d ingredients from image", len(ingredients))
        return ingredients


def get_ingredient_parser(kind: Union[ParserKind, str], config: Optional[Settings] = None) -> IngredientTextParser:
    """Build the parser for a strategy name ("rules", "openai" or "gemini")."""
    kind = ParserKind(kind)
    if kind == ParserKind.RULES:
        return RuleBasedIngredientParser()
    if kind == ParserKind.OPENAI:
        return OpenAIIngredientParser(config)
    return GeminiIngredientParser(config)
