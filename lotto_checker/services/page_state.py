"""Display state of the lotto check page.

A submission clears the previous results, raises the loading flag and takes a
ticket from a monotonically increasing sequence. Outcomes and errors are only
applied for the latest ticket, so a slow stale response can never overwrite a
newer one. The form route builds one state per request, so there the guard is
a model-level safeguard; in the browser the submit lock in index.html keeps
one request in flight.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from lotto_checker.errors import AppError
from lotto_checker.models.check_result import CheckOutcome, RankedResult, WinningNumbers


logger = logging.getLogger(__name__)


@dataclass
class PageState:
    lotto_input: str = ""
    winning_numbers: WinningNumbers | None = None
    results: list[RankedResult] = field(default_factory=list)
    is_loading: bool = False
    error: str | None = None
    _sequence: int = field(default=0, init=False, repr=False)

    @property
    def sequence(self) -> int:
        return self._sequence

    def begin(self) -> int:
        """Start a submission and return its ticket."""

        self._sequence += 1
        self.is_loading = True
        self.results = []
        self.winning_numbers = None
        self.error = None
        return self._sequence

    def is_current(self, ticket: int) -> bool:
        return ticket == self._sequence

    def apply_outcome(self, ticket: int, outcome: CheckOutcome) -> bool:
        if not self.is_current(ticket):
            logger.debug("Dropping stale outcome (ticket=%s, latest=%s)", ticket, self._sequence)
            return False

        self.winning_numbers = outcome.winning_numbers
        self.results = list(outcome.results)
        return True

    def apply_error(self, ticket: int, message: str) -> bool:
        if not self.is_current(ticket):
            logger.debug("Dropping stale error (ticket=%s, latest=%s)", ticket, self._sequence)
            return False

        self.winning_numbers = None
        self.results = []
        self.error = message
        return True

    def finish(self, ticket: int) -> None:
        if self.is_current(ticket):
            self.is_loading = False

    def submit(self, submit: Callable[[str], CheckOutcome]) -> bool:
        """Run one submission of the current input through ``submit``.

        Application errors become the page error message; the loading flag is
        cleared whatever happens. Returns True when results were applied.
        """

        ticket = self.begin()
        try:
            outcome = submit(self.lotto_input)
        except AppError as exc:
            self.apply_error(ticket, exc.message)
            return False
        else:
            return self.apply_outcome(ticket, outcome)
        finally:
            self.finish(ticket)
