"""Error envelopes returned by the Unit Converter AIO HTTP API.

Plugins translate their own exceptions into these classes; the
``code`` is namespaced per plugin (``unit.reference_not_found``) and the
HTTP status travels with the error so :func:`common.responses.fail` can
render it directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping


@dataclass(slots=True)
class AppError(Exception):
    """An API failure: machine-readable ``code``, message and HTTP status."""

    message: str
    code: str = "error"
    status_code: int = 400
    details: Mapping[str, Any] | None = None

    def to_dict(self) -> Mapping[str, Any]:
        """Body of the ``error`` member in a failure envelope."""

        payload: MutableMapping[str, Any] = {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details or {}),
        }
        return payload


@dataclass(slots=True)
class ValidationAppError(AppError):
    """Malformed request: bad payload, conversion block or custom-unit YAML."""

    code: str = "validation_error"
    status_code: int = 400


@dataclass(slots=True)
class NotFoundAppError(AppError):
    """Unknown route, reference tag or unit pair."""

    code: str = "not_found"
    status_code: int = 404


@dataclass(slots=True)
class UnprocessableAppError(AppError):
    """Well-formed request whose units the chosen reference cannot convert."""

    code: str = "unprocessable"
    status_code: int = 422


@dataclass(slots=True)
class InternalAppError(AppError):
    code: str = "internal_error"
    status_code: int = 500


def ensure_app_error(error: AppError | Exception, *, fallback_code: str) -> AppError:
    """Return ``error`` unchanged if it is an :class:`AppError`, else wrap it as a 500."""

    if isinstance(error, AppError):
        return error
    return InternalAppError(code=fallback_code, message=str(error))


__all__ = [
    "AppError",
    "ValidationAppError",
    "NotFoundAppError",
    "UnprocessableAppError",
    "InternalAppError",
    "ensure_app_error",
]
