from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel


class Tag(ApiModel):
    """Tag as embedded in events."""

    id: str = ""
    label: str = ""
    slug: str = ""
    force_show: Optional[bool] = None
    created_at: Optional[str] = None
    is_carousel: Optional[bool] = None


class UpdatedTag(ApiModel):
    """Tag as returned by the /tags endpoints."""

    id: str = ""
    label: str = ""
    slug: str = ""
    force_show: Optional[bool] = None
    published_at: Optional[str] = None
    created_by: Optional[int] = None
    updated_by: Optional[int] = None
    created_at: str = ""
    updated_at: str = ""
    force_hide: Optional[bool] = None
    is_carousel: Optional[bool] = None


class TagRelationship(ApiModel):
    id: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RelatedTagRelationship(ApiModel):
    source_tag_id: int = 0
    target_tag_id: int = 0
    relationship_type: str = ""
    target_tag: UpdatedTag = Field(default_factory=UpdatedTag)
    relationship: TagRelationship = Field(default_factory=TagRelationship)
