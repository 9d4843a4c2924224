from typing import Any, Dict, List

from pydantic import BaseModel, Field, StrictStr, field_validator

DEFAULT_SEARCH_TOPIC = "positive news today"


class TopicRequest(BaseModel):
    topic: StrictStr = Field(min_length=1)
    page: int = 1  # anything that isn't an int >= 1 falls back to the first page

    @field_validator("topic")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("topic is blank")
        return v

    @field_validator("page", mode="before")
    @classmethod
    def _lenient_page(cls, v: Any) -> int:
        if isinstance(v, bool):
            return 1
        try:
            page = int(v)
        except (TypeError, ValueError, OverflowError):
            return 1
        return page if page >= 1 else 1


class SearchRequest(BaseModel):
    topic: StrictStr = DEFAULT_SEARCH_TOPIC

    @field_validator("topic")
    @classmethod
    def _default_when_blank(cls, v: str) -> str:
        return v if v.strip() else DEFAULT_SEARCH_TOPIC


class ErrorResponse(BaseModel):
    error: str


class ProviderFailureResponse(BaseModel):
    error: str
    fallback: List[Dict[str, str]]


class SearchResponse(BaseModel):
    result: str


class SearchFailureResponse(BaseModel):
    error: str
    detail: str
