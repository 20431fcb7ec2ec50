from typing import Any, Optional, TypeVar

from config import Config
from core.envelope import ResponseEnvelope, execute
from core.errors import DecodeError, TransportError, UpstreamError
from core.interfaces import IHttpExecutor
from core.query import QueryModel, build_url
from services.http_executor import AiohttpExecutor
from services.transformer import decode_as
from utils.logger import get_logger

T = TypeVar("T")


class BaseApiClient:
    """Shared request plumbing: one GET per call, classified and decoded.

    The executor is created from config unless one is injected; an injected
    executor is left open on close().
    """

    def __init__(
        self,
        base_url: str,
        logger=None,
        executor: Optional[IHttpExecutor] = None,
        config: Optional[Config] = None,
    ):
        self._config = config or Config()
        self._base_url = base_url
        self._logger = logger or get_logger(type(self).__name__)
        self._owns_executor = executor is None
        self._executor = executor or AiohttpExecutor(
            timeout_seconds=self._config.request_timeout_seconds,
            proxy_url=self._config.proxy_url,
        )
        self._headers = dict(self._config.default_headers)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def close(self) -> None:
        if self._owns_executor:
            await self._executor.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _request(self, path: str, query: Optional[QueryModel], operation: str) -> ResponseEnvelope:
        url = build_url(self._base_url, path, query)
        self._logger.debug("api_request", operation=operation, url=url)
        try:
            envelope = await execute(self._executor, "GET", url, self._headers)
        except TransportError as e:
            self._logger.error("api_transport_failed", operation=operation, url=url, error=e.reason)
            raise TransportError(e.url, e.reason, operation) from e
        self._logger.debug("api_response", operation=operation, status=envelope.status, size=len(envelope.body))
        return envelope

    def _decode(self, envelope: ResponseEnvelope, target: Any, operation: str) -> Any:
        try:
            body = envelope.unwrap(operation)
        except UpstreamError as e:
            self._logger.warning("api_upstream_error", operation=operation, status=e.status)
            raise
        try:
            return decode_as(body, target, operation)
        except DecodeError as e:
            self._logger.error("api_decode_failed", operation=operation, error=e.reason)
            raise

    async def _get(self, path: str, target: Any, operation: str, query: Optional[QueryModel] = None) -> Any:
        envelope = await self._request(path, query, operation)
        return self._decode(envelope, target, operation)

    async def _get_list(self, path: str, model: type[T], operation: str, query: Optional[QueryModel] = None) -> list[T]:
        return await self._get(path, list[model], operation, query)

    async def _get_one(self, path: str, model: type[T], operation: str, query: Optional[QueryModel] = None) -> Optional[T]:
        """Fetch a single entity by id or slug; 404 yields None."""
        envelope = await self._request(path, query, operation)
        if envelope.not_found:
            self._logger.info("api_not_found", operation=operation, path=path)
            return None
        return self._decode(envelope, model, operation)
