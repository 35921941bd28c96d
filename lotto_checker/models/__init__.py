"""Domain models."""

from lotto_checker.models.check_result import (
    CheckOutcome,
    LabelRank,
    Rank,
    RankedResult,
    RankKind,
    StructuredRank,
    WinningNumbers,
)

__all__ = [
    "CheckOutcome",
    "LabelRank",
    "Rank",
    "RankedResult",
    "RankKind",
    "StructuredRank",
    "WinningNumbers",
]
