from .base import ApiModel, Page, Pagination
from .polymorphic import StringArray, parse_string_array
from .market import Market, EventMarket
from .event import Event, EventsPage
from .series import Series
from .tag import Tag, UpdatedTag, TagRelationship, RelatedTagRelationship
from .comment import Comment
from .team import Team
from .search import SearchResponse
from .position import Position, ClosedPosition
from .trade import Trade, TradeSide
from .activity import Activity
from .holder import Holder, MetaHolder
from .stats import TotalValue, TotalMarketsTraded, OpenInterest, LiveVolume, LiveVolumeMarket, DataHealth
from .gamma_filters import (
    TeamQuery, TagQuery, TagByIdQuery, RelatedTagsQuery,
    EventQuery, PaginatedEventQuery, EventByIdQuery,
    MarketQuery, MarketByIdQuery, SeriesQuery, SeriesByIdQuery,
    CommentQuery, CommentByIdQuery, CommentsByUserQuery, SearchQuery,
)
from .data_filters import (
    SortDirection, PositionsQuery, ClosedPositionsQuery, TradesQuery,
    ActivityQuery, HoldersQuery, TotalValueQuery, TradedQuery,
    OpenInterestQuery, LiveVolumeQuery,
)

__all__ = [
    "ApiModel",
    "Page",
    "Pagination",
    "StringArray",
    "parse_string_array",
    "Market",
    "EventMarket",
    "Event",
    "EventsPage",
    "Series",
    "Tag",
    "UpdatedTag",
    "TagRelationship",
    "RelatedTagRelationship",
    "Comment",
    "Team",
    "SearchResponse",
    "Position",
    "ClosedPosition",
    "Trade",
    "TradeSide",
    "Activity",
    "Holder",
    "MetaHolder",
    "TotalValue",
    "TotalMarketsTraded",
    "OpenInterest",
    "LiveVolume",
    "LiveVolumeMarket",
    "DataHealth",
    "TeamQuery",
    "TagQuery",
    "TagByIdQuery",
    "RelatedTagsQuery",
    "EventQuery",
    "PaginatedEventQuery",
    "EventByIdQuery",
    "MarketQuery",
    "MarketByIdQuery",
    "SeriesQuery",
    "SeriesByIdQuery",
    "CommentQuery",
    "CommentByIdQuery",
    "CommentsByUserQuery",
    "SearchQuery",
    "SortDirection",
    "PositionsQuery",
    "ClosedPositionsQuery",
    "TradesQuery",
    "ActivityQuery",
    "HoldersQuery",
    "TotalValueQuery",
    "TradedQuery",
    "OpenInterestQuery",
    "LiveVolumeQuery",
]
