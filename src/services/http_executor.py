import asyncio
import ssl
import certifi
from typing import Optional

import aiohttp

from core.errors import TransportError
from core.interfaces import HttpResult, IHttpExecutor


class AiohttpExecutor(IHttpExecutor):
    """IHttpExecutor backed by a lazily created aiohttp session."""

    def __init__(self, timeout_seconds: float = 30.0, proxy_url: Optional[str] = None):
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._proxy_url = proxy_url
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            connector = aiohttp.TCPConnector(ssl=ssl_context)
            self._session = aiohttp.ClientSession(connector=connector, timeout=self._timeout)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def execute(self, method: str, url: str, headers: dict[str, str]) -> HttpResult:
        session = await self._get_session()
        try:
            async with session.request(method, url, headers=headers, proxy=self._proxy_url) as resp:
                body = await resp.read()
                return HttpResult(status=resp.status, body=body)
        except asyncio.TimeoutError as e:
            raise TransportError(url, "request timed out") from e
        except aiohttp.ClientError as e:
            raise TransportError(url, str(e) or type(e).__name__) from e
