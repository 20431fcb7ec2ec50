from typing import Any, Optional

from pydantic import Field

from .base import ApiModel


class Comment(ApiModel):
    id: str = ""
    body: str = ""
    parent_entity_type: str = ""
    parent_entity_id: int = Field(0, alias="parentEntityID")
    user_address: str = ""
    created_at: str = ""
    # Shape of profile and reactions varies between responses
    profile: Optional[Any] = None
    reactions: Optional[Any] = None
    report_count: int = 0
    reaction_count: int = 0
