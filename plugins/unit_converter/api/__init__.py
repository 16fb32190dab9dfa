"""Unit converter API with standardized responses."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request
from pydantic import Field

from common.errors import AppError, NotFoundAppError, UnprocessableAppError, ValidationAppError
from common.logging import get_logger
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, enforce_text_limit, parse_model

from ..core import (
    ConversionError,
    LoadError,
    ParseError,
    ReferenceNotFoundError,
    UnitConverter,
    UnitConverterError,
    get_info,
    go,
    list_references,
)
from ..core.lookup import find_unit, get_reference_units

logger = get_logger(__name__)

DEFAULT_MAX_CUSTOM_UNITS_CHARS = 20_000


class ConversionOptions(SchemaModel):
    reference: str | None = None
    custom_units: str | None = None


class ConvertPayload(ConversionOptions):
    value: float
    from_unit: str = Field(min_length=1)
    to_unit: str = Field(min_length=1)


class BlockPayload(ConversionOptions):
    value: float
    block: str = Field(min_length=1)


api_bp = Blueprint("unit_converter_api", __name__, url_prefix="/api/unit_converter")


def _settings() -> dict:
    return current_app.config.get("PLUGIN_SETTINGS", {}).get("unit_converter", {}) or {}


def _app_error(exc: UnitConverterError) -> AppError:
    if isinstance(exc, ParseError):
        return ValidationAppError(message=str(exc), code="unit.invalid_block")
    if isinstance(exc, LoadError):
        return ValidationAppError(message=str(exc), code="unit.invalid_custom_units")
    if isinstance(exc, ReferenceNotFoundError):
        return NotFoundAppError(message=str(exc), code="unit.reference_not_found")
    if isinstance(exc, ConversionError):
        return UnprocessableAppError(message=str(exc), code="unit.conversion_failed")
    return ValidationAppError(message=str(exc), code="unit.error")  # pragma: no cover


def _invalid_request(exc: ValidationError) -> Response:
    return fail(
        ValidationAppError(
            message=str(exc),
            code="unit.invalid_request",
            details=getattr(exc, "details", None),
        )
    )


def _configured_converter() -> UnitConverter:
    """Return a fresh converter holding the configured custom units."""

    return go(_settings().get("custom_units_file") or None)


def _request_converter(options: ConversionOptions) -> UnitConverter:
    """Build a per-request converter with configured and inline custom units."""

    settings = _settings()
    converter = _configured_converter()
    if options.custom_units:
        limit = settings.get("max_custom_units_chars", DEFAULT_MAX_CUSTOM_UNITS_CHARS)
        enforce_text_limit(options.custom_units, limit, field="custom_units")
        converter.load_custom_unit_content(options.custom_units)
    return converter


@api_bp.get("/info")
def info() -> Response:
    return ok(get_info().to_dict())


@api_bp.get("/references")
def references() -> Response:
    return ok({"references": list_references()})


@api_bp.get("/references/<tag>")
def reference_detail(tag: str) -> Response:
    output = request.args.get("format", "table")
    if output not in {"table", "object"}:
        return fail(
            ValidationAppError(
                message="format must be 'table' or 'object'", code="unit.invalid_request"
            )
        )
    try:
        content = _configured_converter().check_reference(tag, as_object=output == "object")
    except UnitConverterError as exc:
        return fail(_app_error(exc))
    return ok({"reference": tag.strip().upper(), "format": output, "units": content})


@api_bp.get("/references/<tag>/units")
def reference_units(tag: str) -> Response:
    try:
        units = get_reference_units(tag, _configured_converter().namespace)
    except UnitConverterError as exc:
        return fail(_app_error(exc))
    return ok({"reference": tag.strip().upper(), "units": units})


@api_bp.get("/units/<path:unit>")
def unit_lookup(unit: str) -> Response:
    try:
        converter = _configured_converter()
    except UnitConverterError as exc:
        return fail(_app_error(exc))
    return ok({"unit": unit, **find_unit(unit, converter.namespace).to_dict()})


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ConvertPayload, raw_payload)
        converter = _request_converter(payload)
        value = converter.convert(
            payload.value, payload.from_unit, payload.to_unit, payload.reference
        )
        reference = payload.reference or converter.find_reference(
            payload.from_unit, payload.to_unit
        )
    except ValidationError as exc:
        return _invalid_request(exc)
    except UnitConverterError as exc:
        logger.info("conversion rejected: %s", exc)
        return fail(_app_error(exc))
    return ok(
        {
            "value": value,
            "from_unit": payload.from_unit,
            "to_unit": payload.to_unit,
            "reference": reference.strip().upper(),
        }
    )


@api_bp.post("/blocks")
def block_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(BlockPayload, raw_payload)
        converter = _request_converter(payload)
        block = converter.check_conversion_block(payload.block)
        value = converter.to(payload.value, payload.block, payload.reference)
    except ValidationError as exc:
        return _invalid_request(exc)
    except UnitConverterError as exc:
        logger.info("block conversion rejected: %s", exc)
        return fail(_app_error(exc))
    return ok(
        {
            "value": value,
            "from_unit": block.from_unit,
            "to_unit": block.to_unit,
        }
    )


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "info",
    "references",
    "reference_detail",
    "reference_units",
    "unit_lookup",
    "convert_endpoint",
    "block_endpoint",
]
