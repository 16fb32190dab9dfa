"""Validation primitives for plugin APIs."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

import pydantic
from pydantic import BaseModel


class ValidationError(ValueError):
    """Raised when validation fails."""

    def __init__(self, message: str, *, details: Any | None = None):
        super().__init__(message)
        self.details = details


class SchemaModel(BaseModel):
    """Strict base model for request/response validation."""

    model_config = pydantic.ConfigDict(extra="forbid", str_strip_whitespace=True)


TModel = TypeVar("TModel", bound=SchemaModel)


def parse_model(model: type[TModel], payload: Mapping[str, Any] | None) -> TModel:
    payload = payload or {}
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        # errors(include_context=False) keeps the details JSON serialisable
        raise ValidationError(
            "Invalid request payload", details={"errors": exc.errors(include_context=False)}
        ) from exc


def enforce_text_limit(text: str, limit: Any, *, field: str) -> None:
    """Reject ``text`` longer than ``limit`` characters (configured values may be strings)."""

    try:
        max_chars = max(int(float(limit)), 1)
    except (TypeError, ValueError):
        max_chars = None
    if max_chars is not None and len(text) > max_chars:
        raise ValidationError(f"{field} exceeds {max_chars} characters")


__all__ = [
    "ValidationError",
    "SchemaModel",
    "parse_model",
    "enforce_text_limit",
]
