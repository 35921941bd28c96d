"""Schemas for the lotto check API and the external scoring service."""

from __future__ import annotations

from collections.abc import Mapping

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validates_schema

from lotto_checker.models.check_result import (
    CheckOutcome,
    LabelRank,
    RankKind,
    RankedResult,
    StructuredRank,
    WinningNumbers,
)
from lotto_checker.services.result_view import rank_label


class RankField(fields.Field):
    """Decode the two wire forms of a rank into the tagged union."""

    default_error_messages = {
        "invalid": "Rank must be an object with a description or a string.",
    }

    def _deserialize(self, value, attr, data, **kwargs):  # type: ignore[no-untyped-def]
        if isinstance(value, str):
            return LabelRank(label=value)
        if isinstance(value, Mapping):
            description = value.get("description")
            if isinstance(description, str):
                return StructuredRank(description=description)
        raise self.make_error("invalid")

    def _serialize(self, value, attr, obj, **kwargs):  # type: ignore[no-untyped-def]
        if value is None:
            return None
        if value.kind is RankKind.STRUCTURED:
            return {"description": value.description}
        return value.label


class WinningNumbersSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    winning_numbers = fields.List(fields.Integer(strict=True), required=True, data_key="winningNumbers")
    bonus_number = fields.Integer(strict=True, required=True, data_key="bonusNumber")
    draw_no = fields.Integer(strict=True, required=True, data_key="drwNo")
    first_prize = fields.Integer(strict=True, required=True, data_key="firstPrize")

    @post_load
    def _make(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return WinningNumbers(
            winning_numbers=tuple(int(n) for n in data["winning_numbers"]),
            bonus_number=int(data["bonus_number"]),
            draw_no=int(data["draw_no"]),
            first_prize=int(data["first_prize"]),
        )


class RankedResultSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    submitted_numbers = fields.String(required=True, data_key="userLottoNumbers")
    rank = RankField(required=True)
    prize = fields.Integer(strict=True, required=True)
    error_message = fields.String(required=False, allow_none=True, load_default=None, data_key="errorMessage")

    # Only present in responses of this application's own API.
    rank_label = fields.Function(lambda obj: rank_label(obj.rank), dump_only=True, data_key="rankLabel")

    @post_load
    def _make(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return RankedResult(
            submitted_numbers=data["submitted_numbers"],
            rank=data["rank"],
            prize=int(data["prize"]),
            error_message=data.get("error_message"),
        )


class CheckResponseSchema(Schema):
    """Canonical response shape: ``{"winningNumbers": {...}, "results": [...]}``."""

    class Meta:
        unknown = EXCLUDE

    winning_numbers = fields.Nested(WinningNumbersSchema, required=True, allow_none=True, data_key="winningNumbers")
    results = fields.List(fields.Nested(RankedResultSchema), required=True)

    @post_load
    def _make(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return CheckOutcome(winning_numbers=data["winning_numbers"], results=list(data["results"]))


class CheckRequestSchema(Schema):
    """Validate a check request sent to this application."""

    lotto_input = fields.String(required=False, load_default=None, data_key="lottoInput")
    user_lotto_strings = fields.List(
        fields.String(),
        required=False,
        load_default=None,
        data_key="userLottoStrings",
    )

    @validates_schema
    def _validate_one_source(self, data, **kwargs):  # type: ignore[no-untyped-def]
        if data.get("lotto_input") is None and data.get("user_lotto_strings") is None:
            raise ValidationError({"lottoInput": ["Either lottoInput or userLottoStrings is required"]})
