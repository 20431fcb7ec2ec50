from typing import Optional

from config import Config
from core.interfaces import IHttpExecutor
from models import (
    Activity, ClosedPosition, DataHealth, LiveVolume, MetaHolder, OpenInterest,
    Position, TotalMarketsTraded, TotalValue, Trade,
)
from models.data_filters import (
    ActivityQuery, ClosedPositionsQuery, HoldersQuery, LiveVolumeQuery,
    OpenInterestQuery, PositionsQuery, TotalValueQuery, TradedQuery, TradesQuery,
)
from services.base_client import BaseApiClient


class DataClient(BaseApiClient):
    """Client for the Data API: positions, trades, activity and holder statistics."""

    def __init__(
        self,
        logger=None,
        executor: Optional[IHttpExecutor] = None,
        config: Optional[Config] = None,
    ):
        config = config or Config()
        super().__init__(config.data_base_url, logger=logger, executor=executor, config=config)

    async def get_health(self) -> DataHealth:
        return await self._get("/", DataHealth, "Get data health")

    async def get_positions(self, query: Optional[PositionsQuery] = None) -> list[Position]:
        return await self._get_list("/positions", Position, "Get positions", query)

    async def get_closed_positions(self, query: Optional[ClosedPositionsQuery] = None) -> list[ClosedPosition]:
        return await self._get_list("/closed-positions", ClosedPosition, "Get closed positions", query)

    async def get_trades(self, query: Optional[TradesQuery] = None) -> list[Trade]:
        return await self._get_list("/trades", Trade, "Get trades", query)

    async def get_activity(self, query: Optional[ActivityQuery] = None) -> list[Activity]:
        return await self._get_list("/activity", Activity, "Get activity", query)

    async def get_holders(self, query: HoldersQuery) -> list[MetaHolder]:
        return await self._get_list("/holders", MetaHolder, "Get holders", query)

    async def get_total_value(self, query: TotalValueQuery) -> list[TotalValue]:
        return await self._get_list("/value", TotalValue, "Get total value", query)

    async def get_total_markets_traded(self, query: TradedQuery) -> TotalMarketsTraded:
        return await self._get("/traded", TotalMarketsTraded, "Get total markets traded", query)

    async def get_open_interest(self, query: OpenInterestQuery) -> list[OpenInterest]:
        return await self._get_list("/oi", OpenInterest, "Get open interest", query)

    async def get_live_volume(self, query: LiveVolumeQuery) -> list[LiveVolume]:
        return await self._get_list("/live-volume", LiveVolume, "Get live volume", query)
