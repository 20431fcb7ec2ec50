from typing import Optional

from .base import ApiModel


class Position(ApiModel):
    proxy_wallet: str = ""
    asset: str = ""
    condition_id: str = ""
    size: float = 0.0
    avg_price: float = 0.0
    initial_value: float = 0.0
    current_value: float = 0.0
    cash_pnl: float = 0.0
    percent_pnl: float = 0.0
    total_bought: float = 0.0
    realized_pnl: float = 0.0
    percent_realized_pnl: float = 0.0
    cur_price: float = 0.0
    redeemable: bool = False
    mergeable: bool = False
    title: str = ""
    slug: str = ""
    icon: str = ""
    event_id: str = ""
    event_slug: str = ""
    outcome: str = ""
    outcome_index: int = 0
    opposite_outcome: str = ""
    opposite_asset: str = ""
    end_date: Optional[str] = None
    negative_risk: Optional[bool] = None


class ClosedPosition(ApiModel):
    proxy_wallet: str = ""
    asset: str = ""
    condition_id: str = ""
    size: float = 0.0
    avg_price: float = 0.0
    realized_pnl: float = 0.0
    closed_price: float = 0.0
    closed_at: str = ""
    title: str = ""
    slug: str = ""
    icon: str = ""
    event_id: str = ""
    event_slug: str = ""
    outcome: str = ""
    outcome_index: int = 0
    opposite_outcome: str = ""
    opposite_asset: str = ""
    negative_risk: Optional[bool] = None
