"""Scoring service client wiring.

One client (and its pooled HTTP session) per application.
"""

from __future__ import annotations

from flask import Flask, current_app

from lotto_checker.clients.check_client import LottoCheckClient
from lotto_checker.services.check_service import CheckService


def init_check_client(app: Flask) -> None:
    """Create the scoring service client from app config."""

    client = LottoCheckClient(
        str(app.config["CHECK_API_URL"]),
        timeout_seconds=float(app.config["CHECK_API_TIMEOUT"]),
        response_shape=str(app.config["CHECK_API_RESPONSE_SHAPE"]),
    )
    app.extensions["check_client"] = client


def get_check_client() -> LottoCheckClient:
    client: LottoCheckClient | None = current_app.extensions.get("check_client")
    if client is None:
        raise RuntimeError("Lotto check client not initialized")
    return client


def get_check_service() -> CheckService:
    return CheckService(get_check_client())
