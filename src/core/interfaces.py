from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class HttpResult:
    status: int
    body: bytes


class IHttpExecutor(ABC):
    """Performs one HTTP exchange and returns the fully buffered body.

    Implementations raise core.errors.TransportError when no status was
    received; any status, including 4xx/5xx, is returned as an HttpResult.
    """

    @abstractmethod
    async def execute(self, method: str, url: str, headers: dict[str, str]) -> HttpResult:
        pass

    @abstractmethod
    async def close(self) -> None:
        pass
