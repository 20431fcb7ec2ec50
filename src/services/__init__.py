from .http_executor import AiohttpExecutor
from .transformer import decode_as
from .base_client import BaseApiClient
from .gamma_client import GammaClient
from .data_client import DataClient

__all__ = [
    "AiohttpExecutor",
    "decode_as",
    "BaseApiClient",
    "GammaClient",
    "DataClient",
]
