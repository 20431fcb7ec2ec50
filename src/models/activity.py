from typing import Optional

from pydantic import Field

from .base import ApiModel


class Activity(ApiModel):
    proxy_wallet: str = ""
    timestamp: int = 0
    type: str = ""
    size: float = 0.0
    usdc_size: float = 0.0
    transaction_hash: str = ""
    price: Optional[float] = None
    asset_id: str = Field("", alias="asset")
    side: str = ""
    fee: Optional[float] = None
    condition_id: str = ""
    outcome: str = ""
    market: str = ""
    from_address: str = Field("", alias="from")
    to_address: str = Field("", alias="to")
    value: Optional[float] = None
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
