from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for response entities: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null means "missing": non-optional fields fall back to their zero default
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


T = TypeVar("T")


class Pagination(ApiModel):
    has_more: bool = False


class Page(ApiModel, Generic[T]):
    """One page of a paginated listing: ``{data: [...], pagination: {hasMore}}``."""

    data: list[T] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    @property
    def items(self) -> list[T]:
        return self.data

    @property
    def has_more(self) -> bool:
        return self.pagination.has_more
