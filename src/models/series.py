from typing import Optional

from pydantic import Field

from .base import ApiModel


class Series(ApiModel):
    id: str = ""
    ticker: str = ""
    slug: str = ""
    title: str = ""
    subtitle: Optional[str] = None
    series_type: Optional[str] = None
    recurrence: Optional[str] = None
    image: Optional[str] = None
    icon: Optional[str] = None
    active: bool = False
    closed: bool = False
    archived: bool = False
    volume: Optional[float] = None
    liquidity: Optional[float] = None
    start_date: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""
    competitive: Optional[float] = None
    volume_24hr: Optional[float] = Field(None, alias="volume24hr")
    pyth_token_id: Optional[str] = None
    last_active_at: Optional[str] = None
    series_type_map: Optional[str] = None
