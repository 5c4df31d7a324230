from ._base_service import BaseService
from .network import Network

__all__ = [
    "BaseService",
    "Network",
]
