"""HTTP client for the external lotto check (scoring) service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import requests
from marshmallow import ValidationError as MarshmallowValidationError
from requests.adapters import HTTPAdapter

from lotto_checker.config import DEFAULT_CHECK_API_TIMEOUT, RESPONSE_SHAPES
from lotto_checker.errors import UpstreamError
from lotto_checker.models.check_result import CheckOutcome
from lotto_checker.schemas.check import CheckResponseSchema, RankedResultSchema


logger = logging.getLogger(__name__)

_wrapped_schema = CheckResponseSchema()
_list_schema = RankedResultSchema(many=True)


def build_http_session() -> requests.Session:
    """Pooled session without retries; one submission means one request."""

    adapter = HTTPAdapter(max_retries=0, pool_connections=10, pool_maxsize=10)

    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def parse_check_response(payload: Any, response_shape: str = "wrapped") -> CheckOutcome:
    """Load a decoded response body of the configured shape.

    Raises:
        marshmallow.ValidationError: the body does not have the expected shape.
    """

    if response_shape == "list":
        results = _list_schema.load(payload)
        return CheckOutcome(winning_numbers=None, results=list(results))

    return _wrapped_schema.load(payload)


class LottoCheckClient:
    """Submits lotto lines to the scoring service."""

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float = DEFAULT_CHECK_API_TIMEOUT,
        response_shape: str = "wrapped",
        http: requests.Session | None = None,
    ) -> None:
        if response_shape not in RESPONSE_SHAPES:
            raise ValueError(f"Unknown response shape {response_shape!r} (expected one of {RESPONSE_SHAPES})")

        self._url = url
        self._timeout = timeout_seconds
        self._response_shape = response_shape
        self._http = http or build_http_session()

    @property
    def url(self) -> str:
        return self._url

    def check(self, lines: Sequence[str]) -> CheckOutcome:
        """POST the lines and parse the result.

        Raises:
            UpstreamError: on transport failure, non-2xx status, or an
                unusable response body.
        """

        logger.info("Checking %s lotto line(s) against %s", len(lines), self._url)

        try:
            resp = self._http.post(
                self._url,
                json={"userLottoStrings": list(lines)},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Lotto check request failed: %s", exc)
            raise UpstreamError() from exc

        if not 200 <= resp.status_code < 300:
            logger.warning("Lotto check service answered %s", resp.status_code)
            raise UpstreamError(details={"status": resp.status_code})

        try:
            outcome = parse_check_response(resp.json(), self._response_shape)
        except (ValueError, MarshmallowValidationError) as exc:
            # requests raises a ValueError subclass for undecodable JSON.
            logger.exception("Unusable response from lotto check service")
            raise UpstreamError() from exc

        if len(outcome.results) != len(lines):
            logger.warning(
                "Lotto check service returned %s result(s) for %s line(s)",
                len(outcome.results),
                len(lines),
            )

        return outcome
