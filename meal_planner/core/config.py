from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from meal_planner.schemas.ingredient_schemas import ParserKind


class Settings(BaseSettings):
    app_name: str = "Meal Planner API"

    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_text_model: str = "gpt-4"
    openai_vision_model: str = "gpt-4o"

    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"

    llm_temperature: float = 0.1
    llm_max_tokens: int = 1000
    # None waits for the upstream; callers impose their own deadline
    llm_timeout_seconds: Optional[float] = None

    # rules | openai | gemini, rejected at startup when anything else
    default_parser: ParserKind = ParserKind.GEMINI

    max_image_size_bytes: int = 10 * 1024 * 1024  # 10 MB
    allowed_image_types: List[str] = ["image/jpeg", "image/png", "image/webp", "image/gif"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
