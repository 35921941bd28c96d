"""Lotto check API (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lotto_checker.check_api import get_check_service
from lotto_checker.schemas.check import CheckRequestSchema, CheckResponseSchema
from lotto_checker.utils.responses import ok


check_bp = Blueprint("check", __name__)

_request_schema = CheckRequestSchema()
_response_schema = CheckResponseSchema()


@check_bp.post("/lotto/check")
def check_lotto():
    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    service = get_check_service()
    if data.get("user_lotto_strings") is not None:
        outcome = service.submit_lines(data["user_lotto_strings"])
    else:
        outcome = service.submit(str(data["lotto_input"]))

    return ok(_response_schema.dump(outcome))
