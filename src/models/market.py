from typing import Optional

from pydantic import Field

from .base import ApiModel
from .polymorphic import StringArray


class EventMarket(ApiModel):
    """A market as embedded in an event payload."""

    id: str = ""
    question: str = ""
    condition_id: str = ""
    slug: str = ""
    resolution_source: Optional[str] = None
    end_date: Optional[str] = None
    liquidity: Optional[str] = None
    start_date: Optional[str] = None
    image: str = ""
    icon: str = ""
    description: str = ""
    outcomes: StringArray = Field(default_factory=list)
    outcome_prices: StringArray = Field(default_factory=list)
    volume: Optional[str] = None
    active: bool = False
    closed: bool = False
    market_maker_address: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""
    new: Optional[bool] = None
    clob_token_ids: StringArray = Field(default_factory=list)


class Market(ApiModel):
    id: str = ""
    question: str = ""
    condition_id: str = ""
    slug: str = ""
    liquidity: Optional[str] = None
    start_date: Optional[str] = None
    image: str = ""
    icon: str = ""
    description: str = ""
    active: bool = False
    volume: str = ""
    outcomes: StringArray = Field(default_factory=list)
    outcome_prices: StringArray = Field(default_factory=list)
    closed: bool = False
    new: Optional[bool] = None
    question_id: Optional[str] = None
    volume_num: float = 0.0
    liquidity_num: Optional[float] = None
    start_date_iso: Optional[str] = None
    has_reviewed_dates: Optional[bool] = None
    clob_token_ids: StringArray = Field(default_factory=list)
    end_date: Optional[str] = None
    last_active_at: Optional[str] = None

    def outcome_price_map(self) -> dict[str, float]:
        """Pair each outcome with its price, skipping unparsable prices."""
        prices: dict[str, float] = {}
        for outcome, raw in zip(self.outcomes, self.outcome_prices):
            try:
                prices[outcome] = float(raw)
            except ValueError:
                continue
        return prices
