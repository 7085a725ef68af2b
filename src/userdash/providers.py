"""User provider protocol and implementations."""

from typing import Protocol

from userdash.api.client import UserApiClient, parse_users
from userdash.constants import DEFAULT_ENDPOINT, MOCK_USERS
from userdash.models import User


class UserProvider(Protocol):
    """Protocol that all user backends must satisfy."""

    async def fetch_users(self) -> list[User]:
        """Return the full user collection in source order.

        Raises UserApiError (ResponseError or TransportError) on failure.
        """
        ...


class HttpUserProvider:
    """UserProvider backed by the remote JSON endpoint."""

    def __init__(self, endpoint: str = DEFAULT_ENDPOINT) -> None:
        self._client = UserApiClient(endpoint)

    @property
    def endpoint(self) -> str:
        return self._client.endpoint

    async def fetch_users(self) -> list[User]:
        return await self._client.fetch_users()


class MockUserProvider:
    """In-memory provider seeded from MOCK_USERS, or from the given records."""

    def __init__(self, records: list[dict] | None = None) -> None:
        self._records = list(records if records is not None else MOCK_USERS)

    async def fetch_users(self) -> list[User]:
        return parse_users(self._records)
