from .interfaces import HttpResult, IHttpExecutor
from .errors import (
    ApiClientError, TransportError, MalformedEndpoint,
    UpstreamError, EmptyResponse, DecodeError,
)
from .query import (
    QueryModel, QueryPolicy, CollectionStyle, QueryParamSpec,
    query_field, query_schema, encode_query, build_url, quote_segment,
)
from .envelope import GammaErrorPayload, ResponseEnvelope, discriminate_error, execute

__all__ = [
    "HttpResult",
    "IHttpExecutor",
    "ApiClientError",
    "TransportError",
    "MalformedEndpoint",
    "UpstreamError",
    "EmptyResponse",
    "DecodeError",
    "QueryModel",
    "QueryPolicy",
    "CollectionStyle",
    "QueryParamSpec",
    "query_field",
    "query_schema",
    "encode_query",
    "build_url",
    "quote_segment",
    "GammaErrorPayload",
    "ResponseEnvelope",
    "discriminate_error",
    "execute",
]
