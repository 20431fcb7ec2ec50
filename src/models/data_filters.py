"""Filter objects for the Data API.

Market and event id lists are sent comma-joined (``market=0xa,0xb``).
"""
from enum import Enum
from typing import Optional, Union

from pydantic import Field

from core.query import CollectionStyle, QueryModel, QueryPolicy, query_field
from .trade import TradeSide


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


def _text(alias: Optional[str] = None):
    return query_field(alias, policy=QueryPolicy.OMIT_IF_ZERO)


def _joined(alias: Optional[str] = None):
    return query_field(alias, policy=QueryPolicy.OMIT_IF_ZERO, style=CollectionStyle.JOINED)


class PositionsQuery(QueryModel):
    user: Optional[str] = _text()
    market: Optional[list[str]] = _joined()
    event_id: Optional[list[str]] = _joined("eventId")
    # sizeThreshold=0 is a meaningful filter and must survive encoding
    size_threshold: Optional[float] = Field(None, alias="sizeThreshold")
    redeemable: Optional[bool] = None
    mergeable: Optional[bool] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    sort_by: Optional[str] = _text("sortBy")
    sort_direction: Optional[SortDirection] = Field(None, alias="sortDirection")
    title: Optional[str] = _text()


class ClosedPositionsQuery(QueryModel):
    user: Optional[str] = _text()
    market: Optional[list[str]] = _joined()
    event_id: Optional[list[str]] = _joined("eventId")
    title: Optional[str] = _text()
    limit: Optional[int] = None
    offset: Optional[int] = None
    sort_by: Optional[str] = _text("sortBy")
    sort_direction: Optional[SortDirection] = Field(None, alias="sortDirection")


class TradesQuery(QueryModel):
    limit: Optional[int] = None
    offset: Optional[int] = None
    taker_only: Optional[bool] = Field(None, alias="takerOnly")
    filter_type: Optional[str] = _text("filterType")
    filter_amount: Optional[float] = Field(None, alias="filterAmount")
    market: Optional[list[str]] = _joined()
    event_id: Optional[list[str]] = _joined("eventId")
    user: Optional[str] = _text()
    side: Optional[TradeSide] = None


class ActivityQuery(QueryModel):
    user: Optional[str] = _text()
    limit: Optional[int] = None
    offset: Optional[int] = None
    market: Optional[list[str]] = _joined()
    event_id: Optional[list[str]] = _joined("eventId")
    type: Optional[str] = _text()
    start: Optional[Union[int, str]] = None
    end: Optional[Union[int, str]] = None
    sort_by: Optional[str] = _text("sortBy")
    sort_direction: Optional[SortDirection] = Field(None, alias="sortDirection")
    side: Optional[TradeSide] = None


class HoldersQuery(QueryModel):
    limit: Optional[int] = None
    market: list[str] = query_field(policy=QueryPolicy.REQUIRED, min_length=1)
    min_balance: Optional[int] = Field(None, alias="minBalance")


class TotalValueQuery(QueryModel):
    user: str = query_field(policy=QueryPolicy.REQUIRED, min_length=1)
    market: Optional[list[str]] = _joined()


class TradedQuery(QueryModel):
    user: str = query_field(policy=QueryPolicy.REQUIRED, min_length=1)


class OpenInterestQuery(QueryModel):
    market: list[str] = query_field(policy=QueryPolicy.REQUIRED, min_length=1)


class LiveVolumeQuery(QueryModel):
    id: int = query_field(policy=QueryPolicy.REQUIRED, ge=1)
