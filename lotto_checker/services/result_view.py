"""View models for rendering check results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from lotto_checker.models.check_result import RankKind, Rank, RankedResult, WinningNumbers


CURRENCY_SUFFIX = "원"


@dataclass(frozen=True)
class WinningNumbersView:
    draw_no: int
    first_prize: str
    numbers: tuple[int, ...]
    bonus_number: int


@dataclass(frozen=True)
class ResultRow:
    submitted_numbers: str
    rank: str
    prize: str
    error_message: str


def rank_label(rank: Rank) -> str:
    """Text shown in the rank column."""

    if rank.kind is RankKind.STRUCTURED:
        return rank.description  # type: ignore[union-attr]
    if rank.kind is RankKind.LABEL:
        return rank.label  # type: ignore[union-attr]
    raise ValueError(f"Unknown rank kind: {rank.kind!r}")


def format_amount(amount: int) -> str:
    return f"{int(amount):,}{CURRENCY_SUFFIX}"


def build_winning_view(winning_numbers: WinningNumbers | None) -> WinningNumbersView | None:
    if winning_numbers is None:
        return None

    return WinningNumbersView(
        draw_no=winning_numbers.draw_no,
        first_prize=format_amount(winning_numbers.first_prize),
        numbers=tuple(winning_numbers.winning_numbers),
        bonus_number=winning_numbers.bonus_number,
    )


def build_result_rows(results: Iterable[RankedResult]) -> list[ResultRow]:
    return [
        ResultRow(
            submitted_numbers=r.submitted_numbers,
            rank=rank_label(r.rank),
            prize=format_amount(r.prize),
            error_message=r.error_message or "",
        )
        for r in results
    ]
