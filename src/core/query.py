"""
Query-string encoding for filter objects.

Filter objects are pydantic models whose aliases are the upstream parameter
names. Each field also carries a QueryPolicy deciding when it is omitted and,
for list values, a CollectionStyle deciding how it is spelled on the wire:

    class TeamQuery(QueryModel):
        limit: Optional[int] = None
        league: Optional[str] = query_field("league", policy=QueryPolicy.OMIT_IF_ZERO)

    build_url(base, "/teams", TeamQuery(limit=0))   # -> .../teams?limit=0
"""
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Optional
from urllib.parse import quote, urlencode, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from utils.formatting import format_scalar, is_zero
from .errors import MalformedEndpoint


class QueryPolicy(str, Enum):
    REQUIRED = "required"
    # Sent whenever the caller supplied it, even as 0 / False
    OMIT_IF_UNSET = "omit_if_unset"
    # Sent only when supplied and non-zero
    OMIT_IF_ZERO = "omit_if_zero"


class CollectionStyle(str, Enum):
    JOINED = "joined"  # key=a,b
    REPEATED = "repeated"  # key=a&key=b


@dataclass(frozen=True)
class QueryParamSpec:
    attr: str
    name: str
    policy: QueryPolicy
    style: CollectionStyle


def query_field(
    alias: Optional[str] = None,
    *,
    default: Any = None,
    policy: QueryPolicy = QueryPolicy.OMIT_IF_UNSET,
    style: CollectionStyle = CollectionStyle.JOINED,
    **kwargs: Any,
) -> Any:
    extra = {"query_policy": policy.value, "collection_style": style.value}
    if policy is QueryPolicy.REQUIRED:
        return Field(alias=alias, json_schema_extra=extra, **kwargs)
    return Field(default, alias=alias, json_schema_extra=extra, **kwargs)


@lru_cache(maxsize=None)
def query_schema(model_cls: type["QueryModel"]) -> tuple[QueryParamSpec, ...]:
    specs = []
    for attr, info in model_cls.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        if "query_policy" in extra:
            policy = QueryPolicy(extra["query_policy"])
        elif info.is_required():
            policy = QueryPolicy.REQUIRED
        else:
            policy = QueryPolicy.OMIT_IF_UNSET
        style = CollectionStyle(extra.get("collection_style", CollectionStyle.JOINED.value))
        specs.append(QueryParamSpec(attr=attr, name=info.alias or attr, policy=policy, style=style))
    return tuple(specs)


class QueryModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @classmethod
    def query_policies(cls) -> dict[str, QueryPolicy]:
        return {spec.name: spec.policy for spec in query_schema(cls)}

    def query_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        supplied = self.model_fields_set
        for spec in query_schema(type(self)):
            value = getattr(self, spec.attr)
            if value is None:
                continue
            if spec.policy is QueryPolicy.OMIT_IF_UNSET and spec.attr not in supplied:
                continue
            if spec.policy is QueryPolicy.OMIT_IF_ZERO and is_zero(value):
                continue
            params.extend(_encode_value(spec, value))
        return params


def _encode_value(spec: QueryParamSpec, value: Any) -> list[tuple[str, str]]:
    if isinstance(value, (list, tuple)):
        items = [format_scalar(item) for item in value]
        if not items:
            return []
        if spec.style is CollectionStyle.REPEATED:
            return [(spec.name, item) for item in items]
        return [(spec.name, ",".join(items))]
    return [(spec.name, format_scalar(value))]


def encode_query(query: Optional[QueryModel]) -> list[tuple[str, str]]:
    if query is None:
        return []
    return query.query_params()


def quote_segment(value: Any) -> str:
    """Escape an id, slug or address for use as one path segment."""
    text = format_scalar(value)
    if not text:
        raise MalformedEndpoint(text, "empty path segment")
    return quote(text, safe="")


def build_url(base_url: str, path: str, query: Optional[QueryModel] = None) -> str:
    parts = urlsplit(base_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise MalformedEndpoint(base_url, "base URL must be an absolute http(s) URL")
    if not path.startswith("/"):
        raise MalformedEndpoint(path, "path must start with '/'")
    if "?" in path or "#" in path:
        raise MalformedEndpoint(path, "path must not carry a query or fragment")

    url = base_url.rstrip("/") + path
    params = encode_query(query)
    if params:
        url = f"{url}?{urlencode(params)}"
    return url
