"""
HTTP transport for the blockchain.info service family.

One ``BlockchainHttpClient`` talks to one host. It attaches the optional API
code, validates the response envelope and hands the body to a decoder.

API Documentation: https://www.blockchain.com/explorer/api
"""

import json
from typing import Any, Callable, Optional, Type, TypeVar

import requests
import structlog
from pydantic import BaseModel, TypeAdapter

from blockchain_api.core.exceptions import (
    ArgumentMissingError,
    BlockNotFoundError,
    ClientApiError,
    ServerApiError,
)
from blockchain_api.core.query_string import QueryString
from blockchain_api.models.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT

logger = structlog.get_logger(__name__)

T = TypeVar("T")

DEFAULT_CONTENT_TYPE = "application/x-www-form-urlencoded"
ERROR_ENVELOPE_PREFIX = '{"error":'
BLOCK_NOT_FOUND = "Block Not Found"


class BlockchainHttpClient:
    """
    Synchronous client for a single blockchain.info host.

    Every request uses a fixed timeout and is sent exactly once. Network
    failures surface as ``requests.RequestException``.
    """

    TIMEOUT = 100

    def __init__(self,
                 api_code: Optional[str] = None,
                 base_url: str = DEFAULT_BASE_URL,
                 session: Optional[requests.Session] = None,
                 user_agent: str = DEFAULT_USER_AGENT):
        """
        Initialize the transport.

        Args:
            api_code: Optional API code attached to every request
            base_url: Host (and optional path prefix) requests are sent to
            session: Session to use; a new one is created when omitted
            user_agent: User-Agent header value
        """
        self.api_code = api_code
        self.base_url = base_url.rstrip("/")

        self.session = session if session is not None else requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent,
            "Accept": "application/json",
        })

        self._closed = False

    # ==================== Lifecycle ====================

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the underlying session. Safe to call more than once."""
        if self._closed:
            return
        try:
            self.session.close()
        finally:
            self._closed = True
        logger.debug("HTTP client closed", base_url=self.base_url)

    def __enter__(self) -> "BlockchainHttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise ClientApiError("The HTTP client has been closed")

    # ==================== Requests ====================

    def get(self,
            route: str,
            query_string: Optional[QueryString] = None,
            deserializer: Optional[Callable[[str], T]] = None,
            response_type: Optional[Type[T]] = None) -> Any:
        """
        Send a GET request and decode the response.

        The API code, when set, replaces any ``api_code`` already present in
        the query string. The caller's query string is left unchanged.
        """
        if route is None:
            raise ArgumentMissingError("route")
        self._ensure_open()

        if self.api_code is not None:
            query_string = query_string.copy() if query_string is not None else QueryString()
            query_string.add_or_update("api_code", self.api_code)

        path = route
        if query_string is not None and len(query_string) > 0:
            rendered = str(query_string)
            if "?" in route:
                route = f"{route}&{rendered[1:]}"
            else:
                route = f"{route}{rendered}"

        logger.debug("Sending request", method="GET", route=path)

        response = self.session.get(self._url(route), timeout=self.TIMEOUT)
        text = self._validate_response(response, "GET", path)
        return self._decode(text, deserializer, response_type)

    def post(self,
             route: str,
             body: Any,
             deserializer: Optional[Callable[[str], T]] = None,
             response_type: Optional[Type[T]] = None,
             multipart: bool = False,
             content_type: str = DEFAULT_CONTENT_TYPE) -> Any:
        """
        Send a POST request and decode the response.

        Pydantic models are serialized by alias, strings are sent as they
        are and anything else goes through ``json.dumps``. With ``multipart``
        the payload becomes the ``tx`` field of a multipart form.
        """
        if route is None:
            raise ArgumentMissingError("route")
        self._ensure_open()

        path = route
        if self.api_code is not None:
            separator = "&" if "?" in route else "?"
            route = f"{route}{separator}api_code={self.api_code}"

        payload = self._serialize(body)
        mime_type = f"{content_type}; charset=utf-8"

        logger.debug("Sending request", method="POST", route=path, multipart=multipart)

        if multipart:
            response = self.session.post(
                self._url(route),
                files={"tx": (None, payload.encode("utf-8"), mime_type)},
                timeout=self.TIMEOUT,
            )
        else:
            response = self.session.post(
                self._url(route),
                data=payload.encode("utf-8"),
                headers={"Content-Type": mime_type},
                timeout=self.TIMEOUT,
            )

        text = self._validate_response(response, "POST", path)
        return self._decode(text, deserializer, response_type)

    # ==================== Helpers ====================

    def _url(self, route: str) -> str:
        return f"{self.base_url}/{route.lstrip('/')}"

    @staticmethod
    def _serialize(body: Any) -> str:
        if body is None:
            return ""
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True, exclude_none=True)
        if isinstance(body, str):
            return body
        return json.dumps(body)

    @staticmethod
    def _decode(text: str,
                deserializer: Optional[Callable[[str], T]],
                response_type: Optional[Type[T]]) -> Any:
        if deserializer is not None:
            return deserializer(text)
        if response_type is not None:
            return TypeAdapter(response_type).validate_json(text)
        return text

    def _validate_response(self, response: requests.Response, method: str, route: str) -> str:
        """Return the body of a successful response or raise ServerApiError."""
        text = response.text

        if 200 <= response.status_code < 300:
            if not text.startswith(ERROR_ENVELOPE_PREFIX):
                return text
            error = ServerApiError(_error_message(text), status_code=400)
        elif text.strip().lower() == BLOCK_NOT_FOUND.lower():
            error = BlockNotFoundError()
        else:
            error = ServerApiError(f"{response.reason}: {text}", status_code=response.status_code)

        logger.warning("Server API error",
                       method=method,
                       route=route,
                       status_code=error.status_code,
                       error=error.message)
        raise error


def _error_message(text: str) -> str:
    try:
        message = json.loads(text).get("error")
    except (ValueError, AttributeError):
        return text
    if message is None:
        return ""
    return message if isinstance(message, str) else json.dumps(message)
