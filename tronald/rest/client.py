from typing import Any, Dict, List, Optional
from urllib.parse import quote
import logging

import httpx
from pydantic import ValidationError

from ..core import DATE_FORMAT, PathResolver, RecordMapper
from ..paging import Page, Pageable
from .config import ClientConfig
from .exceptions import InvalidArgumentError, TronaldHTTPError, TronaldTransportError
from .models import ErrorResponse, Quote, SearchResponse, TagsResponse

logger = logging.getLogger(__name__)

QUOTE_RULES: Dict[str, Dict[str, Any]] = {
    "id": {"path": "quote_id", "cast": "str", "default": ""},
    "value": {"path": "value", "cast": "str", "default": ""},
    "source_url": {"path": "_embedded.source?[0].url", "cast": "str"},
    "date": {"date": {"path": "appeared_at", "fmt": DATE_FORMAT}},
    "tags": {"list": {"path": "tags", "cast": "str"}, "default": []},
}


class TronaldClient:
    """
    Client for the Tronald Dump quotes API.

    Every public method performs exactly one GET request. Failures surface as
    TronaldHTTPError (the server answered with a non-2xx status and an error body)
    or TronaldTransportError (the request or the decoding of its body failed).
    Invalid arguments raise InvalidArgumentError before any request is made.

    Example:
        >>> from tronald import TronaldClient, Pageable
        >>> with TronaldClient() as client:
        ...     quote = client.get_random_quote(tag="Hillary Clinton")
        ...     page = client.search("wall", Pageable(page=2, size=10))
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self._config = config or ClientConfig()
        self.base_url = self._config.base_url
        self._logger = self._config.logger or logger
        self._mapper = RecordMapper(QUOTE_RULES, logger=self._logger)
        self._client = httpx.Client(
            timeout=self._config.timeout,
            headers={"User-Agent": self._config.user_agent},
            transport=self._config.transport,
        )

    def list_tags(self) -> List[str]:
        data = self._get("/tags", what="tags")
        try:
            return TagsResponse.model_validate(data).embedded
        except ValidationError as e:
            raise self._transport_error("Invalid tags response format", e) from e

    def get_quote(self, quote_id: str) -> Quote:
        if not isinstance(quote_id, str) or not quote_id:
            raise InvalidArgumentError("'quote_id' must be a non-empty string")
        if quote_id in (".", ".."):
            raise InvalidArgumentError("'quote_id' must not be a relative path segment")

        data = self._get(f"/quote/{self._encode_segment(quote_id)}", what="quote")
        return self._decode_quote(data)

    def get_random_quote(self, tag: Optional[str] = None) -> Quote:
        if tag is not None and not isinstance(tag, str):
            raise InvalidArgumentError("'tag' must be a string when given")

        params = {"tag": tag} if tag is not None else None
        data = self._get("/random/quote", params=params, what="random quote")
        return self._decode_quote(data)

    def search(self, query: str, pageable: Optional[Pageable] = None) -> Page[Quote]:
        if not isinstance(query, str) or not query:
            raise InvalidArgumentError("'query' must be a non-empty string")
        if pageable is None:
            pageable = Pageable()
        elif not isinstance(pageable, Pageable):
            raise InvalidArgumentError("'pageable' must be a Pageable")

        params = {"query": query, "page": pageable.page, "size": pageable.size}
        data = self._get("/search/quote", params=params, what="search results")
        try:
            total = SearchResponse.model_validate(data).total
        except ValidationError as e:
            raise self._transport_error("Invalid search response format", e) from e

        items = PathResolver.get(data, "_embedded.quotes")
        if items is None:
            items = []
        if not isinstance(items, list):
            raise self._transport_error(
                "Invalid search response format",
                TypeError(f"'_embedded.quotes' must be an array, got {type(items).__name__}"),
            )

        content = [self._decode_quote(item) for item in items]
        return Page(content, pageable, total)

    def _get(self, path: str, *, what: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        self._logger.debug("GET %s params=%s", url, params)
        try:
            response = self._client.get(url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            raise self._transport_error(f"Error retrieving {what}", e) from e

        if not response.is_success:
            error = self._decode_error(response, what)
            self._logger.warning(
                "Error retrieving %s: (#%s) %s", what, error.status, error.message
            )
            raise error

        try:
            return response.json()
        except ValueError as e:
            raise self._transport_error(f"Invalid {what} response body", e) from e

    def _decode_error(self, response: httpx.Response, what: str) -> TronaldHTTPError:
        try:
            body = ErrorResponse.model_validate(response.json())
        except (ValidationError, ValueError) as e:
            raise self._transport_error(
                f"Error retrieving {what}: undecodable error body for status {response.status_code}", e
            ) from e

        return TronaldHTTPError(body.status, body.message)

    def _decode_quote(self, data: Any) -> Quote:
        if not isinstance(data, dict):
            raise self._transport_error(
                "Invalid quote format",
                TypeError(f"quote must be a JSON object, got {type(data).__name__}"),
            )

        return Quote.model_validate(self._mapper.map(data))

    def _encode_segment(self, value: str) -> str:
        try:
            return quote(value, safe="")
        except UnicodeEncodeError as e:
            raise self._transport_error(f"Unable to url encode string: {value!r}", e) from e

    def _transport_error(self, message: str, cause: BaseException) -> TronaldTransportError:
        self._logger.error("%s: %r", message, cause)
        return TronaldTransportError(f"{message}: {cause}", cause)

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
