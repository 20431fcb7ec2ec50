import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from models import Market, parse_string_array
from utils.formatting import format_scalar, is_zero


@pytest.mark.parametrize(
    "raw, expected",
    [
        (["Yes", "No"], ["Yes", "No"]),
        ('["Yes", "No"]', ["Yes", "No"]),
        (None, []),
        ("[]", []),
        ("not json", []),
        ('{"a": 1}', []),
        ('"Yes"', []),
        ("[0.65, 0.35]", []),
        ('["a", 1]', []),
        ([1, 2.0, True, None], ["1", "2", "true", "null"]),
        ('[["a"], {"b": 1}]', []),
        ([["a"], {"b": 1}], ['["a"]', '{"b":1}']),
        (42, ["42"]),
    ],
)
def test_parse_string_array(raw, expected):
    assert parse_string_array(raw) == expected


def test_market_accepts_native_arrays():
    market = Market.model_validate({"outcomes": ["Yes", "No"], "outcomePrices": [0.2, 0.8]})
    assert market.outcomes == ["Yes", "No"]
    assert market.outcome_prices == ["0.2", "0.8"]


def test_market_accepts_encoded_arrays():
    market = Market.model_validate({
        "outcomes": '["Yes", "No"]',
        "outcomePrices": '["0.2", "0.8"]',
        "clobTokenIds": '["111", "222"]',
    })
    assert market.outcomes == ["Yes", "No"]
    assert market.outcome_prices == ["0.2", "0.8"]
    assert market.clob_token_ids == ["111", "222"]


def test_market_missing_or_null_arrays_are_empty():
    market = Market.model_validate({"id": "1", "outcomes": None})
    assert market.outcomes == []
    assert market.clob_token_ids == []


def test_unparsable_array_degrades_to_empty():
    market = Market.model_validate({"outcomes": "Yes,No", "outcomePrices": '["0.5"]'})
    assert market.outcomes == []
    assert market.outcome_prices == ["0.5"]


def test_encoded_array_of_numbers_degrades_to_empty():
    market = Market.model_validate({"outcomePrices": "[0.65, 0.35]", "clobTokenIds": '["111", 222]'})
    assert market.outcome_prices == []
    assert market.clob_token_ids == []


def test_outcome_price_map():
    market = Market.model_validate({
        "outcomes": '["Yes", "No", "Maybe"]',
        "outcomePrices": '["0.25", "0.75", "n/a"]',
    })
    assert market.outcome_price_map() == {"Yes": 0.25, "No": 0.75}


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (3.0, "3"),
        (0.125, "0.125"),
        ("abc", "abc"),
        (None, "null"),
    ],
)
def test_format_scalar(value, expected):
    assert format_scalar(value) == expected


def test_is_zero():
    assert is_zero(None)
    assert is_zero(0)
    assert is_zero(False)
    assert is_zero("")
    assert is_zero([])
    assert not is_zero("0")
    assert not is_zero(0.5)
    assert not is_zero(["a"])
