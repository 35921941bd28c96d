"""Health check routes."""

from __future__ import annotations

from flask import Blueprint

from lotto_checker.check_api import get_check_client
from lotto_checker.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Liveness only; the scoring service is not contacted."""

    return ok({"status": "ok", "check_api_url": get_check_client().url})
