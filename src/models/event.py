from typing import Optional

from pydantic import Field

from .base import ApiModel, Page
from .market import EventMarket
from .series import Series
from .tag import Tag


class Event(ApiModel):
    id: str = ""
    ticker: str = ""
    slug: str = ""
    title: str = ""
    description: Optional[str] = None
    resolution_source: Optional[str] = None
    start_date: Optional[str] = None
    creation_date: Optional[str] = None
    end_date: Optional[str] = None
    image: str = ""
    icon: str = ""
    active: bool = False
    closed: bool = False
    archived: bool = False
    new: Optional[bool] = None
    featured: Optional[bool] = None
    restricted: Optional[bool] = None
    liquidity: Optional[float] = None
    volume: Optional[float] = None
    volume_24hr: Optional[float] = Field(None, alias="volume24hr")
    volume_num: Optional[float] = None
    last_active_at: Optional[str] = None
    liquidity_amm: Optional[float] = None
    liquidity_num: Optional[float] = None
    markets: list[EventMarket] = Field(default_factory=list)
    series: list[Series] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    cyom: Optional[bool] = None
    show_all_outcomes: Optional[bool] = None
    show_market_images: Optional[bool] = None
    enable_neg_risk: Optional[bool] = None
    automatically_active: Optional[bool] = None
    series_slug: Optional[str] = None
    gmp_chart_mode: Optional[str] = None
    neg_risk_augmented: Optional[bool] = None
    pending_deployment: Optional[bool] = None
    deploying: Optional[bool] = None
    sort_by: Optional[str] = None
    closed_time: Optional[str] = None
    automatically_resolved: Optional[bool] = None


EventsPage = Page[Event]
