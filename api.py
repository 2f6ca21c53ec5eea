import asyncio
import json
import logging
from typing import Any, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

import config
from exceptions.api import (
    ApiConnectionException,
    ApiRequestException,
    ApiResponseException,
    AuthenticationFailedException,
    AuthenticationRequiredException,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def resolve_token(impersonation_token: str | None, token: str | None) -> str | None:
    """
    Pick the bearer token for client-side calls.

    An agent/admin acting as a client carries an impersonation token which
    takes precedence over the client's own login token. Tokens are opaque.
    """
    return impersonation_token or token or None


def parse_payload(model: type[ModelT], data: Any, path: str) -> ModelT:
    """
    Validate a decoded response body into a DTO.

    Raises:
        ApiResponseException: The payload does not fit the model
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "payload"
        logger.error(f"Malformed response from {path}: {e.error_count()} invalid field(s), first at {location}")
        raise ApiResponseException(path, f"{location}: {first['msg']}") from e


class StorefrontApiClient:
    """
    Thin async client for the storefront REST backend.

    Every call sends the bearer token and a JSON body, and returns the decoded
    JSON payload. Failures are raised as ApiException subclasses; nothing is
    retried here.

    Usage:
        async with StorefrontApiClient(token) as client:
            cart = await CartRepository.get(client)
    """

    def __init__(
        self,
        token: str | None,
        base_url: str | None = None,
        timeout: float | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        self.token = token
        self.base_url = (base_url or config.API_URL).rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout or config.API_TIMEOUT_SECONDS)
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> 'StorefrontApiClient':
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def close(self):
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._session = None

    @staticmethod
    async def _read_payload(response: aiohttp.ClientResponse) -> Any:
        text = await response.text()
        if not text:
            return {}
        try:
            return json.loads(text)
        except ValueError:
            # Some error pages are plain text / HTML
            return {"message": text}

    async def request(self, method: str, path: str, json_body: dict | None = None) -> Any:
        """
        Send one request and return the decoded JSON payload.

        Raises:
            AuthenticationRequiredException: No token (raised before any network call)
            AuthenticationFailedException: HTTP 401
            ApiRequestException: Other non-2xx status or {"success": false}
            ApiConnectionException: Network error or timeout
        """
        if not self.token:
            raise AuthenticationRequiredException()

        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {path}")

        try:
            async with self._get_session().request(method, url, json=json_body, headers=headers) as response:
                status = response.status
                payload = await self._read_payload(response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"{method} {path} failed: {type(e).__name__} {e}")
            raise ApiConnectionException(path, str(e) or type(e).__name__) from e

        message = payload.get("message") if isinstance(payload, dict) else None

        if status == 401:
            raise AuthenticationFailedException(path)
        if status >= 400:
            logger.warning(f"{method} {path} returned {status}: {message}")
            raise ApiRequestException(path, status, message)
        if isinstance(payload, dict) and payload.get("success") is False:
            logger.warning(f"{method} {path} rejected: {message}")
            raise ApiRequestException(path, status, message)

        return payload

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, json_body: dict | None = None) -> Any:
        return await self.request("POST", path, json_body)

    async def put(self, path: str, json_body: dict | None = None) -> Any:
        return await self.request("PUT", path, json_body)

    async def patch(self, path: str, json_body: dict | None = None) -> Any:
        return await self.request("PATCH", path, json_body)

    async def delete(self, path: str, json_body: dict | None = None) -> Any:
        return await self.request("DELETE", path, json_body)
