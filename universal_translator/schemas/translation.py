"""Translation request/response schemas.

Wire format is camelCase to match the web client; Python attributes stay
snake_case. Request fields are all optional at the schema level so that
missing fields reach the handler and produce the service's own 400 body
instead of FastAPI's 422.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TranslateRequest(BaseModel):
    """POST /api/translate request body."""

    model_config = ConfigDict(populate_by_name=True)

    text: str | None = None
    source_language: str | None = Field(default=None, alias="from")
    target_language: str | None = Field(default=None, alias="to")


class TranslateResponse(_CamelModel):
    """POST /api/translate response body."""

    translated_text: str
    source_language: str
    target_language: str


class DetectLanguageRequest(BaseModel):
    """POST /api/detect-language request body."""

    text: str | None = None


class DetectLanguageResponse(BaseModel):
    """POST /api/detect-language response body."""

    language: str


class TranslationRecordResponse(_CamelModel):
    """Single entry in GET /api/translations."""

    id: int
    source_text: str
    translated_text: str
    source_language: str
    target_language: str
    created_at: datetime


class HealthResponse(BaseModel):
    """GET /api/health response body."""

    status: str
    providers: list[str]
