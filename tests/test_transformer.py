import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import json

import pytest

from core.errors import DecodeError
from models import Activity, Comment, Event, Holder, Page, Position, Series, Trade
from services.transformer import decode_as


def _body(payload) -> bytes:
    return json.dumps(payload).encode()


def test_event_with_mixed_market_encodings():
    body = _body({
        "id": "903",
        "slug": "us-election",
        "title": "US Election",
        "active": True,
        "volume24hr": 1234.5,
        "markets": [
            {"id": "1", "outcomes": '["Yes", "No"]', "outcomePrices": '["0.6", "0.4"]'},
            {"id": "2", "outcomes": ["Yes", "No"], "clobTokenIds": ["9", "10"]},
            {"id": "3"},
        ],
        "tags": [{"id": "5", "label": "Politics", "slug": "politics"}],
    })
    event = decode_as(body, Event, "Get event by ID")
    assert event.id == "903"
    assert event.volume_24hr == 1234.5
    assert [m.outcomes for m in event.markets] == [["Yes", "No"], ["Yes", "No"], []]
    assert event.markets[0].outcome_prices == ["0.6", "0.4"]
    assert event.markets[1].clob_token_ids == ["9", "10"]
    assert event.tags[0].label == "Politics"


def test_numeric_ids_become_strings():
    events = decode_as(_body([{"id": 16085, "title": "x"}]), list[Event], "Get events")
    assert events[0].id == "16085"


def test_nulls_fall_back_to_defaults():
    event = decode_as(_body({"id": "1", "title": None, "markets": None}), Event, "Get event")
    assert event.title == ""
    assert event.markets == []


def test_unknown_fields_are_ignored():
    series = decode_as(_body({"id": "2", "someNewField": {"x": 1}}), Series, "Get series")
    assert series.id == "2"


def test_page_of_events():
    body = _body({"data": [{"id": "1"}, {"id": "2"}], "pagination": {"hasMore": True, "totalResults": 40}})
    page = decode_as(body, Page[Event], "Get paginated events")
    assert [e.id for e in page.items] == ["1", "2"]
    assert page.has_more is True


def test_page_without_pagination():
    page = decode_as(_body({"data": []}), Page[Event], "Get paginated events")
    assert page.items == []
    assert page.has_more is False


def test_data_api_aliases():
    activity = decode_as(
        _body({"proxyWallet": "0x1", "asset": "123", "type": "TRADE", "usdcSize": 5.5}),
        Activity,
        "Get activity",
    )
    assert activity.proxy_wallet == "0x1"
    assert activity.asset_id == "123"

    holder = decode_as(_body({"proxyWallet": "0x2", "amount": 3}), Holder, "Get holders")
    assert holder.wallet == "0x2"
    assert holder.balance == "3"

    comment = decode_as(_body({"id": "c1", "parentEntityID": 77}), Comment, "Get comments")
    assert comment.parent_entity_id == 77


def test_trade_notional():
    trade = decode_as(_body({"side": "BUY", "size": 10, "price": 0.42}), Trade, "Get trades")
    assert trade.notional == pytest.approx(4.2)


@pytest.mark.parametrize("body", [b"not json", b'{"id": "1"}', b"[1, 2]"])
def test_wrong_shape_raises_decode_error(body):
    with pytest.raises(DecodeError) as exc_info:
        decode_as(body, list[Position], "Get positions")
    assert exc_info.value.operation == "Get positions"
    assert "[Get positions]" in str(exc_info.value)
