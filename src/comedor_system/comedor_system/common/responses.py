from __future__ import annotations

import logging

from flask import jsonify

from ..core.exceptions import (
    ConflictError,
    DomainError,
    InvalidReferenceError,
    NotFoundError,
    StorageUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS = (
    (NotFoundError, 404),
    (ConflictError, 409),
    (InvalidReferenceError, 422),
    (ValidationError, 400),
    (StorageUnavailableError, 503),
)


def status_for(error: DomainError) -> int:
    for cls, status in _STATUS:
        if isinstance(error, cls):
            return status
    return 400


def ok(payload=None, status: int = 200, **extra):
    body = {"success": True}
    if payload is not None:
        body["data"] = payload
    body.update(extra)
    return jsonify(body), status


def fail(error: Exception):
    """JSON error body; unexpected errors are logged and reported as 500."""
    if isinstance(error, DomainError):
        return jsonify({"success": False, "error": error.__class__.__name__, "message": str(error)}), status_for(error)

    logger.exception("Unexpected error handling request")
    return jsonify({"success": False, "error": "InternalError", "message": "Error interno del servidor"}), 500


def json_body(request) -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Se esperaba un cuerpo JSON")
    return data


def as_bool(value, default=None):
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "si", "sí", "on"}
