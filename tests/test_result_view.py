from lotto_checker.models import LabelRank, RankedResult, StructuredRank, WinningNumbers
from lotto_checker.services.result_view import (
    build_result_rows,
    build_winning_view,
    format_amount,
    rank_label,
)


def test_structured_rank_shows_description():
    assert rank_label(StructuredRank(description="2nd")) == "2nd"


def test_label_rank_shows_label():
    assert rank_label(LabelRank(label="MISS")) == "MISS"


def test_amount_has_thousands_separators():
    assert format_amount(0) == "0원"
    assert format_amount(5000) == "5,000원"
    assert format_amount(2000000000) == "2,000,000,000원"


def test_no_winning_view_without_winning_numbers():
    assert build_winning_view(None) is None


def test_winning_view():
    view = build_winning_view(
        WinningNumbers(winning_numbers=(3, 11, 19, 25, 33, 41), bonus_number=7, draw_no=1150, first_prize=2000000000)
    )

    assert view.draw_no == 1150
    assert view.first_prize == "2,000,000,000원"
    assert view.numbers == (3, 11, 19, 25, 33, 41)
    assert view.bonus_number == 7


def test_result_rows_keep_order_and_blank_missing_errors():
    rows = build_result_rows(
        [
            RankedResult("3,11,19,25,33,41", StructuredRank(description="1등"), 2000000000),
            RankedResult("1,2,3,4,5,6", LabelRank(label="MISS"), 0),
            RankedResult("1,2,3", LabelRank(label="MISS"), 0, error_message="로또 번호는 6개여야 합니다."),
        ]
    )

    assert [r.submitted_numbers for r in rows] == ["3,11,19,25,33,41", "1,2,3,4,5,6", "1,2,3"]
    assert [r.rank for r in rows] == ["1등", "MISS", "MISS"]
    assert [r.prize for r in rows] == ["2,000,000,000원", "0원", "0원"]
    assert [r.error_message for r in rows] == ["", "", "로또 번호는 6개여야 합니다."]
