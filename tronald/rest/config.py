from __future__ import annotations
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from typing import Optional
import logging

import httpx

BASE_URL = "https://api.tronalddump.io"
DISTRIBUTION_NAME = "tronald-client"


def client_version() -> Optional[str]:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return None


def default_user_agent() -> str:
    return f"tronalddump-io/client-python-{client_version() or ''}"


@dataclass
class ClientConfig:
    base_url: str = BASE_URL
    timeout: float = 10.0
    user_agent: str = field(default_factory=default_user_agent)

    logger: Optional[logging.Logger] = None
    transport: Optional[httpx.BaseTransport] = None

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")
