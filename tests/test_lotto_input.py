import pytest

from lotto_checker.errors import EMPTY_INPUT_MESSAGE, ValidationError
from lotto_checker.services.lotto_input import (
    clean_lotto_lines,
    normalize_lotto_lines,
    require_lotto_lines,
)


def test_blank_and_padded_lines_are_dropped_in_order():
    raw = "1,2,3,4,5,6\n\n7,8,9,10,11,12\n  "
    assert normalize_lotto_lines(raw) == ["1,2,3,4,5,6", "7,8,9,10,11,12"]


def test_crlf_line_breaks_from_form_posts():
    raw = " 1,2,3,4,5,6 \r\n\r\n\t7,8,9,10,11,12\r\n"
    assert normalize_lotto_lines(raw) == ["1,2,3,4,5,6", "7,8,9,10,11,12"]


def test_line_content_is_not_validated():
    raw = "1,2,3\nabc\n1, 2, 3, 4, 5, 99"
    assert normalize_lotto_lines(raw) == ["1,2,3", "abc", "1, 2, 3, 4, 5, 99"]


def test_inner_whitespace_is_kept():
    assert clean_lotto_lines(["  1, 2, 3, 4, 5, 6  "]) == ["1, 2, 3, 4, 5, 6"]


@pytest.mark.parametrize("raw", ["", "\n", "   \n\t\n  ", "\r\n\r\n"])
def test_blank_input_is_rejected(raw):
    with pytest.raises(ValidationError) as excinfo:
        require_lotto_lines(normalize_lotto_lines(raw))

    assert excinfo.value.message == EMPTY_INPUT_MESSAGE
    assert excinfo.value.status_code == 400


def test_only_newline_separates_lines():
    raw = "1,2,3\x0c4,5,6\n7\r8"
    assert normalize_lotto_lines(raw) == ["1,2,3\x0c4,5,6", "7\r8"]
