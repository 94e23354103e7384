"""Tests for the transaction context Normalizer."""

import dataclasses
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from txdoctor.classification.classifier import classify
from txdoctor.classification.models import ClassificationResult
from txdoctor.normalization.models import NormalizedContext
from txdoctor.normalization.normalizer import Normalizer, format_timestamp, normalize


class TestDefaults:
    def test_empty_record_is_fully_defaulted(self, fixed_clock) -> None:
        ctx = normalize({}, clock=fixed_clock)
        assert ctx.hash == "N/A"
        assert ctx.status == "failed"
        assert ctx.gas_used == "N/A"
        assert ctx.gas_limit == "N/A"
        assert ctx.gas_price == "N/A"
        assert ctx.from_address == "N/A"
        assert ctx.to_address == "N/A"
        assert ctx.value == "0"
        assert ctx.nonce == "N/A"
        assert ctx.error == "No error message"
        assert ctx.revert_reason == "No revert reason"
        assert ctx.contract_address == "N/A"
        assert ctx.contract_name == "Unknown Contract"
        assert ctx.function_name == "Unknown Function"
        assert ctx.input_data == "N/A"
        assert ctx.network == "Ethereum Mainnet"
        assert ctx.timestamp == "2024-01-15T12:00:00.000Z"
        assert ctx.additional_context == {}
        assert ctx.error_category.key == "UNKNOWN"

    def test_no_field_is_none(self, fixed_clock) -> None:
        for record in ({}, None, [], {"error": 1}, {"additionalContext": None}):
            ctx = normalize(record, clock=fixed_clock)
            for f in dataclasses.fields(ctx):
                assert getattr(ctx, f.name) is not None, f.name

    def test_empty_strings_fall_back_to_defaults(self, fixed_clock) -> None:
        ctx = normalize({"hash": "", "error": "", "network": ""}, clock=fixed_clock)
        assert ctx.hash == "N/A"
        assert ctx.error == "No error message"
        assert ctx.network == "Ethereum Mainnet"

    def test_zero_numbers_fall_back_to_defaults(self, fixed_clock) -> None:
        ctx = normalize({"nonce": 0, "gasUsed": 0, "gasPrice": 0.0, "value": 0}, clock=fixed_clock)
        assert (ctx.nonce, ctx.gas_used, ctx.gas_price) == ("N/A", "N/A", "N/A")
        assert ctx.value == "0"


class TestPopulatedRecord:
    def test_keeps_provided_values(self, allowance_record, fixed_clock) -> None:
        ctx = normalize(allowance_record, clock=fixed_clock)
        assert ctx.hash == "0xabc"
        assert ctx.network == "Polygon"
        assert ctx.from_address == "0xUser"
        assert ctx.function_name == "supply"
        assert ctx.timestamp == "2024-01-15T14:20:30Z"
        assert ctx.additional_context == {"token": "USDT", "currentAllowance": "0 USDT"}
        assert ctx.error_category.key == "REVERT_NO_REASON"

    def test_error_message_is_not_a_context_field(self) -> None:
        field_names = {f.name for f in dataclasses.fields(NormalizedContext)}
        assert "error_message" not in field_names


class TestContractAddressFallback:
    def test_falls_back_to_recipient(self) -> None:
        record = {"to": "0xRouter", "error": "ERC20: transfer amount exceeds allowance"}
        ctx = normalize(record)
        assert ctx.contract_address == "0xRouter"
        assert ctx.error_category.key == "ALLOWANCE"

    def test_explicit_contract_address_wins(self) -> None:
        ctx = normalize({"to": "0xProxy", "contractAddress": "0xImpl"})
        assert ctx.contract_address == "0xImpl"
        assert ctx.to_address == "0xProxy"


class TestClassificationEmbedding:
    def test_matches_classify(self, allowance_record, fixed_clock) -> None:
        for record in ({}, allowance_record, {"errorMessage": "nonce too low"}, None):
            assert normalize(record, clock=fixed_clock).error_category == classify(record)

    def test_uses_injected_classifier(self) -> None:
        classifier = MagicMock()
        classifier.classify.return_value = ClassificationResult("X", "X Error", ("x",))
        ctx = Normalizer(classifier=classifier).normalize({"error": "x"})
        assert ctx.error_category.key == "X"
        classifier.classify.assert_called_once()


class TestClock:
    def test_clock_not_read_when_timestamp_present(self) -> None:
        clock = MagicMock()
        Normalizer(clock=clock).normalize({"timestamp": "2024-01-15T10:23:45Z"})
        clock.assert_not_called()

    def test_clock_read_when_timestamp_missing(self, fixed_clock) -> None:
        assert normalize({}, clock=fixed_clock).timestamp == "2024-01-15T12:00:00.000Z"

    def test_default_clock_is_current_utc(self) -> None:
        ctx = normalize({})
        parsed = datetime.fromisoformat(ctx.timestamp.replace("Z", "+00:00"))
        assert abs(datetime.now(timezone.utc) - parsed) < timedelta(minutes=1)

    def test_format_timestamp_treats_naive_as_utc(self) -> None:
        assert format_timestamp(datetime(2024, 1, 1, 8, 30)) == "2024-01-01T08:30:00.000Z"

    def test_format_timestamp_converts_to_utc(self) -> None:
        moment = datetime(2024, 1, 1, 10, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(moment) == "2024-01-01T08:00:00.000Z"


class TestPurity:
    def test_does_not_mutate_input(self, allowance_record) -> None:
        snapshot = {**allowance_record, "additionalContext": dict(allowance_record["additionalContext"])}
        ctx = normalize(allowance_record)
        ctx.additional_context["extra"] = 1
        assert allowance_record == snapshot

    def test_idempotent_given_fixed_clock(self, fixed_clock) -> None:
        record = {"hash": "0x1", "error": "out of gas"}
        assert normalize(record, clock=fixed_clock) == normalize(record, clock=fixed_clock)
