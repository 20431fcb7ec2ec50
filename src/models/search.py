from typing import Any, Optional

from pydantic import Field

from .base import ApiModel, Pagination
from .event import Event


class SearchResponse(ApiModel):
    events: list[Event] = Field(default_factory=list)
    tags: list[dict[str, Any]] = Field(default_factory=list)
    profiles: list[dict[str, Any]] = Field(default_factory=list)
    pagination: Optional[Pagination] = None
