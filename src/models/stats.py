from pydantic import Field

from .base import ApiModel


class TotalValue(ApiModel):
    user: str = ""
    value: float = 0.0


class TotalMarketsTraded(ApiModel):
    user: str = ""
    traded: int = 0


class OpenInterest(ApiModel):
    market: str = ""
    value: float = 0.0


class LiveVolumeMarket(ApiModel):
    market: str = ""
    value: float = 0.0


class LiveVolume(ApiModel):
    total: float = 0.0
    markets: list[LiveVolumeMarket] = Field(default_factory=list)


class DataHealth(ApiModel):
    data: str = ""
