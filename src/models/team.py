from datetime import datetime
from typing import Optional

from .base import ApiModel


class Team(ApiModel):
    id: int = 0
    name: str = ""
    league: str = ""
    record: Optional[str] = None
    logo: str = ""
    abbreviation: str = ""
    alias: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
