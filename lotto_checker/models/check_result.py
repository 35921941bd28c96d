"""Domain objects returned by the lotto check service.

The rank of a submitted line is either a structured object carrying a
human-readable description or a plain label such as ``"MISS"``. Both variants
carry an explicit ``kind`` so rendering never has to probe runtime types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class RankKind(str, Enum):
    STRUCTURED = "STRUCTURED"
    LABEL = "LABEL"


@dataclass(frozen=True)
class StructuredRank:
    """Rank sent as an object, e.g. ``{"description": "2등"}``."""

    description: str
    kind: RankKind = field(default=RankKind.STRUCTURED, init=False)


@dataclass(frozen=True)
class LabelRank:
    """Rank sent as a bare string, e.g. ``"MISS"``."""

    label: str
    kind: RankKind = field(default=RankKind.LABEL, init=False)


Rank = Union[StructuredRank, LabelRank]


@dataclass(frozen=True)
class WinningNumbers:
    """Winning numbers of one draw."""

    winning_numbers: tuple[int, ...]
    bonus_number: int
    draw_no: int
    first_prize: int


@dataclass(frozen=True)
class RankedResult:
    """Result for one submitted line."""

    submitted_numbers: str
    rank: Rank
    prize: int
    error_message: str | None = None


@dataclass(frozen=True)
class CheckOutcome:
    winning_numbers: WinningNumbers | None
    results: list[RankedResult]
