"""
Input models for every tool, with the bounds callers must respect.

``validate_input`` turns pydantic's errors into our ``ValidationError`` naming
the offending field, so bad input is rejected before any scoring happens.
"""

from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel, Field, field_validator

from .errors import ValidationError
from .templates.metadata import Category

ModelT = TypeVar("ModelT", bound=BaseModel)

SUGGEST_LIMIT_MAX = 10
QUOTE_LIMIT_MAX = 20
QUOTE_MAX_LENGTH_MIN = 10
QUOTE_MAX_LENGTH_MAX = 200


class _Strict(BaseModel):
    model_config = pydantic.ConfigDict(extra="forbid")


class SuggestTemplatesInput(_Strict):
    content: str = Field(min_length=1)
    limit: int = Field(default=5, ge=1, le=SUGGEST_LIMIT_MAX)


class SuggestTemplatesBatchInput(_Strict):
    contents: list[str] = Field(min_length=1)
    limit: int = Field(default=5, ge=1, le=SUGGEST_LIMIT_MAX)


class ExtractQuotesInput(_Strict):
    content: str = Field(min_length=1)
    max_length: int = Field(default=100, ge=QUOTE_MAX_LENGTH_MIN, le=QUOTE_MAX_LENGTH_MAX)
    limit: int = Field(default=10, ge=1, le=QUOTE_LIMIT_MAX)


class SearchByKeywordInput(_Strict):
    query: str
    limit: int = Field(default=10, gt=0)

    @field_validator("query")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Query must not be empty")
        return value


class SearchByCategoryInput(_Strict):
    category: Category


class TemplateDetailsInput(_Strict):
    template_ids: list[str] = Field(min_length=1)


class GenerateMemeInput(_Strict):
    template: str = Field(min_length=1)
    text_lines: list[str] = Field(min_length=1, max_length=8)


class GenerateMemesInput(_Strict):
    requests: list[dict[str, Any]] = Field(min_length=1)


class FetchContentInput(_Strict):
    url: pydantic.HttpUrl


def validate_input(model: type[ModelT], **values: Any) -> ModelT:
    """
    Build ``model`` from keyword arguments, dropping ``None`` so defaults apply.

    Raises:
        ValidationError: naming the first offending field.
    """
    try:
        return model(**{key: value for key, value in values.items() if value is not None})
    except pydantic.ValidationError as e:
        errors = e.errors()
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in errors
        )
        raise ValidationError(f"Invalid input for {model.__name__}: {details}", field=field) from e
