from typing import Any, Optional, Union

from config import Config
from core.interfaces import IHttpExecutor
from core.query import quote_segment
from models import (
    Comment, Event, Market, Page, RelatedTagRelationship, SearchResponse,
    Series, Team, UpdatedTag,
)
from models.gamma_filters import (
    CommentByIdQuery, CommentQuery, CommentsByUserQuery, EventByIdQuery,
    EventQuery, MarketByIdQuery, MarketQuery, PaginatedEventQuery,
    RelatedTagsQuery, SearchQuery, SeriesByIdQuery, SeriesQuery, TagByIdQuery,
    TagQuery, TeamQuery,
)
from services.base_client import BaseApiClient

EntityId = Union[int, str]


class GammaClient(BaseApiClient):
    """Client for the Gamma API: events, markets, series, tags, comments, teams, search.

    Lookups by id or slug return None when the API answers 404. Every other
    non-2xx status raises UpstreamError.
    """

    def __init__(
        self,
        logger=None,
        executor: Optional[IHttpExecutor] = None,
        config: Optional[Config] = None,
    ):
        config = config or Config()
        super().__init__(config.gamma_base_url, logger=logger, executor=executor, config=config)

    async def get_health(self) -> dict[str, Any]:
        return await self._get("/health", dict[str, Any], "Get health")

    # Teams

    async def get_teams(self, query: Optional[TeamQuery] = None) -> list[Team]:
        return await self._get_list("/teams", Team, "Get teams", query)

    # Tags

    async def get_tags(self, query: Optional[TagQuery] = None) -> list[UpdatedTag]:
        return await self._get_list("/tags", UpdatedTag, "Get tags", query)

    async def get_tag_by_id(self, tag_id: EntityId, query: Optional[TagByIdQuery] = None) -> Optional[UpdatedTag]:
        return await self._get_one(f"/tags/{quote_segment(tag_id)}", UpdatedTag, "Get tag by ID", query)

    async def get_tag_by_slug(self, slug: str, query: Optional[TagByIdQuery] = None) -> Optional[UpdatedTag]:
        return await self._get_one(f"/tags/slug/{quote_segment(slug)}", UpdatedTag, "Get tag by slug", query)

    async def get_related_tag_relationships_by_id(
        self, tag_id: EntityId, query: Optional[RelatedTagsQuery] = None
    ) -> list[RelatedTagRelationship]:
        return await self._get_list(
            f"/tags/{quote_segment(tag_id)}/related-tags",
            RelatedTagRelationship,
            "Get related tag relationships",
            query,
        )

    async def get_related_tag_relationships_by_slug(
        self, slug: str, query: Optional[RelatedTagsQuery] = None
    ) -> list[RelatedTagRelationship]:
        return await self._get_list(
            f"/tags/slug/{quote_segment(slug)}/related-tags",
            RelatedTagRelationship,
            "Get related tag relationships",
            query,
        )

    async def get_tags_related_to_id(self, tag_id: EntityId, query: Optional[RelatedTagsQuery] = None) -> list[UpdatedTag]:
        return await self._get_list(
            f"/tags/{quote_segment(tag_id)}/related-tags/tags", UpdatedTag, "Get related tags", query
        )

    async def get_tags_related_to_slug(self, slug: str, query: Optional[RelatedTagsQuery] = None) -> list[UpdatedTag]:
        return await self._get_list(
            f"/tags/slug/{quote_segment(slug)}/related-tags/tags", UpdatedTag, "Get related tags", query
        )

    # Events

    async def get_events(self, query: Optional[EventQuery] = None) -> list[Event]:
        return await self._get_list("/events", Event, "Get events", query)

    async def get_events_paginated(self, query: Optional[PaginatedEventQuery] = None) -> Page[Event]:
        return await self._get("/events/pagination", Page[Event], "Get paginated events", query)

    async def get_event_by_id(self, event_id: EntityId, query: Optional[EventByIdQuery] = None) -> Optional[Event]:
        return await self._get_one(f"/events/{quote_segment(event_id)}", Event, "Get event by ID", query)

    async def get_event_by_slug(self, slug: str, query: Optional[EventByIdQuery] = None) -> Optional[Event]:
        return await self._get_one(f"/events/slug/{quote_segment(slug)}", Event, "Get event by slug", query)

    async def get_event_tags(self, event_id: EntityId) -> list[UpdatedTag]:
        return await self._get_list(f"/events/{quote_segment(event_id)}/tags", UpdatedTag, "Get event tags")

    async def get_active_events(self, query: Optional[EventQuery] = None) -> list[Event]:
        return await self.get_events(_with(query, EventQuery, active=True))

    async def get_closed_events(self, query: Optional[EventQuery] = None) -> list[Event]:
        return await self.get_events(_with(query, EventQuery, closed=True))

    async def get_featured_events(self, query: Optional[EventQuery] = None) -> list[Event]:
        return await self.get_events(_with(query, EventQuery, featured=True))

    # Markets

    async def get_markets(self, query: Optional[MarketQuery] = None) -> list[Market]:
        return await self._get_list("/markets", Market, "Get markets", query)

    async def get_market_by_id(self, market_id: EntityId, query: Optional[MarketByIdQuery] = None) -> Optional[Market]:
        return await self._get_one(f"/markets/{quote_segment(market_id)}", Market, "Get market by ID", query)

    async def get_market_by_slug(self, slug: str, query: Optional[MarketByIdQuery] = None) -> Optional[Market]:
        return await self._get_one(f"/markets/slug/{quote_segment(slug)}", Market, "Get market by slug", query)

    async def get_market_tags(self, market_id: EntityId) -> list[UpdatedTag]:
        return await self._get_list(f"/markets/{quote_segment(market_id)}/tags", UpdatedTag, "Get market tags")

    async def get_closed_markets(self, query: Optional[MarketQuery] = None) -> list[Market]:
        return await self.get_markets(_with(query, MarketQuery, closed=True))

    # Series

    async def get_series(self, query: Optional[SeriesQuery] = None) -> list[Series]:
        return await self._get_list("/series", Series, "Get series", query)

    async def get_series_by_id(self, series_id: EntityId, query: Optional[SeriesByIdQuery] = None) -> Optional[Series]:
        return await self._get_one(f"/series/{quote_segment(series_id)}", Series, "Get series by ID", query)

    # Comments

    async def get_comments(self, query: Optional[CommentQuery] = None) -> list[Comment]:
        return await self._get_list("/comments", Comment, "Get comments", query)

    async def get_comments_by_comment_id(
        self, comment_id: EntityId, query: Optional[CommentByIdQuery] = None
    ) -> list[Comment]:
        return await self._get_list(
            f"/comments/{quote_segment(comment_id)}", Comment, "Get comments by comment ID", query
        )

    async def get_comments_by_user_address(
        self, user_address: str, query: Optional[CommentsByUserQuery] = None
    ) -> list[Comment]:
        return await self._get_list(
            f"/comments/user_address/{quote_segment(user_address)}",
            Comment,
            "Get comments by user address",
            query,
        )

    # Search

    async def search(self, query: SearchQuery) -> SearchResponse:
        return await self._get("/public-search", SearchResponse, "Search", query)


def _with(query, query_cls, **overrides):
    """Copy of query (or a fresh one) with overrides marked as set."""
    return (query or query_cls()).model_copy(update=overrides)
