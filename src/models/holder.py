from pydantic import AliasChoices, Field

from .base import ApiModel


class Holder(ApiModel):
    wallet: str = Field("", validation_alias=AliasChoices("wallet", "proxyWallet"))
    balance: str = Field("", validation_alias=AliasChoices("balance", "amount"))
    value: str = ""


class MetaHolder(ApiModel):
    token: str = ""
    holders: list[Holder] = Field(default_factory=list)
