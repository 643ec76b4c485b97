import json

import pytest

from justice_ai.advice.models import AdviceResult, SchemaViolation, parse_advice


def test_plain_json_parses(advice_payload):
    result = parse_advice(json.dumps(advice_payload))

    assert isinstance(result, AdviceResult)
    assert result.legal_analysis == advice_payload["legalAnalysis"]
    assert result.to_wire() == advice_payload


def test_fenced_json_parses(advice_payload):
    raw = "```json\n" + json.dumps(advice_payload, ensure_ascii=False) + "\n```"

    assert isinstance(parse_advice(raw), AdviceResult)


def test_mapping_input_parses(urdu_advice_payload):
    result = parse_advice(urdu_advice_payload)

    assert isinstance(result, AdviceResult)
    assert result.action_plan == urdu_advice_payload["actionPlan"]


@pytest.mark.parametrize(
    "missing", ["legalAnalysis", "rightsAnalysis", "actionPlan", "disclaimer"])
def test_missing_field_is_violation(advice_payload, missing):
    del advice_payload[missing]

    result = parse_advice(json.dumps(advice_payload))

    assert isinstance(result, SchemaViolation)
    assert missing in result.reason


@pytest.mark.parametrize("value", ["", "   ", None, 42, ["a", "b"]])
def test_empty_or_non_string_field_is_violation(advice_payload, value):
    advice_payload["disclaimer"] = value

    assert isinstance(parse_advice(advice_payload), SchemaViolation)


@pytest.mark.parametrize("raw", ["", "   ", "I cannot help with that.", "[1, 2, 3]", '"text"'])
def test_non_object_output_is_violation(raw):
    assert isinstance(parse_advice(raw), SchemaViolation)


TRUNCATED_REPLY = (
    '{"legalAnalysis": "a", "rightsAnalysis": "b", '
    '"actionPlan": "c", "disclaimer": "Consult a law'
)


@pytest.mark.parametrize(
    "raw",
    [
        TRUNCATED_REPLY,
        "```json\n" + TRUNCATED_REPLY + "\n```",
        "```json\n" + TRUNCATED_REPLY,
    ],
)
def test_truncated_json_is_violation(raw):
    result = parse_advice(raw)

    assert isinstance(result, SchemaViolation)
    assert "not valid JSON" in result.reason


def test_extra_keys_are_dropped(advice_payload):
    advice_payload["confidence"] = "high"

    result = parse_advice(advice_payload)

    assert isinstance(result, AdviceResult)
    assert set(result.to_wire()) == {
        "legalAnalysis", "rightsAnalysis", "actionPlan", "disclaimer"}


def test_values_are_trimmed(advice_payload):
    advice_payload["actionPlan"] = "  1. Send notice.  \n"

    assert parse_advice(advice_payload).action_plan == "1. Send notice."
