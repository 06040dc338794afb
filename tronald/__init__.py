from .paging import Page, Pageable
from .rest.client import TronaldClient
from .rest.config import ClientConfig
from .rest.exceptions import (
    InvalidArgumentError,
    TronaldClientError,
    TronaldHTTPError,
    TronaldTransportError,
)
from .rest.models import Quote

__all__ = [
    "Page",
    "Pageable",
    "TronaldClient",
    "ClientConfig",
    "InvalidArgumentError",
    "TronaldClientError",
    "TronaldHTTPError",
    "TronaldTransportError",
    "Quote",
]
