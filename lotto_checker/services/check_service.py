"""Business logic for checking user-entered lotto lines."""

from __future__ import annotations

from collections.abc import Iterable

from lotto_checker.clients.check_client import LottoCheckClient
from lotto_checker.models.check_result import CheckOutcome
from lotto_checker.services.lotto_input import normalize_lotto_lines, require_lotto_lines


class CheckService:
    """Lotto check use-cases."""

    def __init__(self, client: LottoCheckClient) -> None:
        self._client = client

    def submit(self, raw_text: str) -> CheckOutcome:
        """Check the lines of a textarea submission."""

        return self._client.check(require_lotto_lines(normalize_lotto_lines(raw_text)))

    def submit_lines(self, lines: Iterable[str]) -> CheckOutcome:
        # Raises before any network call when nothing is left.
        cleaned = require_lotto_lines(lines)
        return self._client.check(cleaned)
