from enum import Enum
from typing import Optional

from .base import ApiModel


class TradeSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class Trade(ApiModel):
    proxy_wallet: str = ""
    side: str = ""
    condition_id: str = ""
    outcome: str = ""
    market: str = ""
    size: float = 0.0
    price: float = 0.0
    fee: Optional[float] = None
    timestamp: int = 0
    transaction_hash: str = ""
    maker: str = ""
    taker: str = ""
    asset_id: str = ""
    title: str = ""
    slug: str = ""
    icon: str = ""
    event_slug: str = ""
    outcome_index: int = 0
    name: str = ""
    pseudonym: str = ""
    bio: str = ""
    profile_image: str = ""
    profile_image_optimized: str = ""

    @property
    def notional(self) -> float:
        return self.size * self.price
