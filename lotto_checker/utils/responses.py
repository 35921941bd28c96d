"""Helpers for the JSON envelope shared by every API response.

``{"success": bool, "data": ..., "error": {"code", "message", "details"} | None}``
"""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify

from lotto_checker.errors import AppError


NO_STORE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def ok(data: Any, status_code: int = 200) -> Response:
    """Success response."""

    return jsonify({"success": True, "data": data, "error": None}), status_code


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> Response:
    """Error response."""

    body = {"code": code, "message": message, "details": details}
    return jsonify({"success": False, "data": None, "error": body}), status_code


def fail_with(exc: AppError) -> Response:
    return fail(exc.code, exc.message, exc.status_code, exc.details)
