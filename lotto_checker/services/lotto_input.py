"""Normalization of user-entered lotto lines.

Each line of the input is one set of numbers (e.g. ``1,2,3,4,5,6``). Lines are
trimmed and blank lines dropped; the content of a line is left for the
scoring service to validate.
"""

from __future__ import annotations

from collections.abc import Iterable

from lotto_checker.errors import EMPTY_INPUT_MESSAGE, ValidationError


def clean_lotto_lines(lines: Iterable[str]) -> list[str]:
    """Trim every line and drop the ones left empty, keeping order."""

    cleaned: list[str] = []
    for line in lines:
        stripped = line.strip()
        if stripped:
            cleaned.append(stripped)
    return cleaned


def normalize_lotto_lines(raw_text: str) -> list[str]:
    # Only "\n" separates lines; strip() drops the "\r" of "\r\n".
    return clean_lotto_lines(raw_text.split("\n"))


def require_lotto_lines(lines: Iterable[str]) -> list[str]:
    """Clean lines and raise ValidationError when nothing is left."""

    cleaned = clean_lotto_lines(lines)
    if not cleaned:
        raise ValidationError(message=EMPTY_INPUT_MESSAGE)
    return cleaned
