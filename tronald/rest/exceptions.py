from typing import Optional


class InvalidArgumentError(ValueError):
    """Raised when a caller-supplied argument violates a precondition. Never involves I/O."""


class TronaldClientError(Exception):
    """Base exception for all errors of a remote call."""


class TronaldTransportError(TronaldClientError):
    """Raised when a request cannot complete or its response body cannot be decoded."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class TronaldHTTPError(TronaldClientError):
    """Raised for non-2xx responses carrying a structured error body."""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message
