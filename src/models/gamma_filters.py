"""Filter objects for the Gamma API.

Field aliases are the upstream query parameter names. Optional scalars are
sent whenever the caller sets them (``ascending=False`` included); free-text
and list filters are dropped when empty.
"""
from datetime import datetime
from typing import Optional, Union

from pydantic import Field

from core.query import CollectionStyle, QueryModel, QueryPolicy, query_field

DateParam = Union[datetime, str]


def _text(alias: Optional[str] = None):
    return query_field(alias, policy=QueryPolicy.OMIT_IF_ZERO)


def _repeated(alias: Optional[str] = None):
    return query_field(alias, policy=QueryPolicy.OMIT_IF_ZERO, style=CollectionStyle.REPEATED)


class PageQuery(QueryModel):
    limit: Optional[int] = None
    offset: Optional[int] = None
    order: Optional[str] = _text()
    ascending: Optional[bool] = None


class TeamQuery(PageQuery):
    league: Optional[str] = _text()


class TagQuery(PageQuery):
    search: Optional[str] = _text()
    is_carousel: Optional[bool] = None


class TagByIdQuery(QueryModel):
    include_template: Optional[bool] = None


class RelatedTagsQuery(PageQuery):
    pass


class _EventFilters(PageQuery):
    search: Optional[str] = _text()
    active: Optional[bool] = None
    closed: Optional[bool] = None
    archived: Optional[bool] = None
    featured: Optional[bool] = None
    new: Optional[bool] = None
    restricted: Optional[bool] = None
    series: Optional[str] = _text()
    tag: Optional[str] = _text()
    start_date: Optional[DateParam] = Field(None, alias="startDate")
    end_date: Optional[DateParam] = Field(None, alias="endDate")


class EventQuery(_EventFilters):
    min_volume: Optional[float] = Field(None, alias="minVolume")
    max_volume: Optional[float] = Field(None, alias="maxVolume")
    min_liquidity: Optional[float] = Field(None, alias="minLiquidity")
    max_liquidity: Optional[float] = Field(None, alias="maxLiquidity")


class PaginatedEventQuery(_EventFilters):
    pass


class EventByIdQuery(QueryModel):
    include_chat: Optional[bool] = None


class MarketQuery(PageQuery):
    id: Optional[list[int]] = _repeated()
    slug: Optional[list[str]] = _repeated()
    clob_token_ids: Optional[list[str]] = _repeated()
    condition_ids: Optional[list[str]] = _repeated()
    market_maker_address: Optional[str] = _text()

    liquidity_num_min: Optional[float] = None
    liquidity_num_max: Optional[float] = None
    volume_num_min: Optional[float] = None
    volume_num_max: Optional[float] = None

    start_date_min: Optional[DateParam] = None
    start_date_max: Optional[DateParam] = None
    end_date_min: Optional[DateParam] = None
    end_date_max: Optional[DateParam] = None

    tag_id: Optional[int] = None
    related_tags: Optional[bool] = None
    cyom: Optional[bool] = None
    uma_resolution_status: Optional[str] = _text()

    game_id: Optional[str] = _text()
    sports_market_types: Optional[list[str]] = _repeated()

    rewards_min_size: Optional[float] = None
    question_ids: Optional[list[str]] = _repeated()

    include_tag: Optional[bool] = None
    closed: Optional[bool] = None


class MarketByIdQuery(QueryModel):
    include_tag: Optional[bool] = None


class SeriesQuery(PageQuery):
    search: Optional[str] = _text()
    active: Optional[bool] = None
    closed: Optional[bool] = None
    archived: Optional[bool] = None
    min_volume: Optional[float] = Field(None, alias="minVolume")
    max_volume: Optional[float] = Field(None, alias="maxVolume")
    start_date: Optional[DateParam] = Field(None, alias="startDate")
    end_date: Optional[DateParam] = Field(None, alias="endDate")


class SeriesByIdQuery(QueryModel):
    include_chat: Optional[bool] = None


class CommentQuery(PageQuery):
    parent_entity_type: Optional[str] = _text()
    parent_entity_id: Optional[int] = None


class CommentByIdQuery(PageQuery):
    pass


class CommentsByUserQuery(PageQuery):
    pass


class SearchQuery(QueryModel):
    q: Optional[str] = _text()
    limit_per_type: Optional[int] = None
    events_status: Optional[str] = _text()
    events_active: Optional[bool] = None
    events_closed: Optional[bool] = None
    events_archived: Optional[bool] = None
    events_featured: Optional[bool] = None
    markets_active: Optional[bool] = None
    markets_closed: Optional[bool] = None
    tags_carousel: Optional[bool] = None
    series_active: Optional[bool] = None
    series_closed: Optional[bool] = None
