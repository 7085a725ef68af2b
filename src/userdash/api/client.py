"""Thin asynchronous client for the remote users endpoint.

A single GET is issued per call; there is no retry and no timeout beyond
aiohttp's default.  Failures are reported as one of two ``UserApiError``
subclasses:

- ``ResponseError`` when the server answered with a non-success status.
  Its message is the fixed ``FETCH_FAILED_MESSAGE``.
- ``TransportError`` when the request could not complete or the body is
  not a list of user records.  Its message is the underlying error's text.
"""

import asyncio
import logging

import aiohttp
from pydantic import TypeAdapter, ValidationError

from userdash.constants import FETCH_FAILED_MESSAGE
from userdash.models import User

logger = logging.getLogger(__name__)

_USERS = TypeAdapter(list[User])


class UserApiError(Exception):
    """Base class for failures while retrieving users."""


class ResponseError(UserApiError):
    """Raised when the endpoint answers with a non-success HTTP status."""

    def __init__(self, status: int) -> None:
        super().__init__(FETCH_FAILED_MESSAGE)
        self.status = status


class TransportError(UserApiError):
    """Raised when the request fails or the payload cannot be parsed."""


def parse_users(payload: object) -> list[User]:
    """Validate a decoded JSON payload into an ordered list of users.

    Raises TransportError if the payload is not an array of user objects
    carrying the fields the dashboard consumes.
    """
    try:
        return _USERS.validate_python(payload)
    except ValidationError as exc:
        raise TransportError(str(exc)) from exc


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class UserApiClient:
    """Fetches the user collection from a fixed URL.

    Args:
        endpoint: Absolute URL returning a JSON array of users.
    """

    def __init__(self, endpoint: str) -> None:
        self._endpoint = endpoint

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def fetch_users(self) -> list[User]:
        """GET the endpoint and return the parsed users in received order."""
        logger.debug("GET %s", self._endpoint)
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self._endpoint) as response:
                    if not response.ok:
                        logger.warning("GET %s returned HTTP %s", self._endpoint, response.status)
                        raise ResponseError(response.status)
                    payload: object = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            logger.warning("GET %s failed: %s", self._endpoint, _describe(exc))
            raise TransportError(_describe(exc)) from exc
        return parse_users(payload)
