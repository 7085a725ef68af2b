"""One-shot user loading.

``UserSource`` owns the ``LoadState`` cell for a single dashboard instance.
It starts in ``Loading``, waits a configurable delay, asks its provider for
users exactly once and publishes either ``Ready`` or ``Failed``.  After that
the state never changes again.
"""

import asyncio
import logging

from userdash.api.client import UserApiError
from userdash.constants import DEFAULT_INITIAL_DELAY_MS
from userdash.domain.load_state import Failed, Loading, LoadState, Ready
from userdash.models import User
from userdash.providers import UserProvider

logger = logging.getLogger(__name__)


class LoadStateError(Exception):
    """Raised when a load is requested more than once."""


class UserSource:
    """Fetches users once and exposes the resulting state.

    Args:
        provider: Backend queried for the user collection.
        initial_delay_ms: Minimum wait before the request is issued.
    """

    def __init__(
        self,
        provider: UserProvider,
        initial_delay_ms: int = DEFAULT_INITIAL_DELAY_MS,
    ) -> None:
        if initial_delay_ms < 0:
            raise ValueError(f"initial_delay_ms must be >= 0, got {initial_delay_ms}")
        self._provider = provider
        self._initial_delay_ms = initial_delay_ms
        self._state: LoadState = Loading()
        self._started = False

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def initial_delay_ms(self) -> int:
        return self._initial_delay_ms

    @property
    def users(self) -> tuple[User, ...]:
        """The fetched users when ready, otherwise an empty tuple."""
        state = self._state
        return state.users if isinstance(state, Ready) else ()

    async def load(self) -> LoadState:
        """Run the single fetch and publish its terminal state.

        Any exception from the provider becomes ``Failed``; cancellation
        propagates and leaves the state at ``Loading``.
        Raises LoadStateError if called again after a load has started.
        """
        if self._started:
            raise LoadStateError("users have already been requested for this source")
        self._started = True

        await asyncio.sleep(self._initial_delay_ms / 1000)
        try:
            users = await self._provider.fetch_users()
        except UserApiError as exc:
            logger.warning("User load failed: %s", exc)
            self._publish(Failed(str(exc)))
        except Exception as exc:
            logger.exception("User load failed unexpectedly")
            self._publish(Failed(str(exc) or type(exc).__name__))
        else:
            logger.info("Loaded %d users", len(users))
            self._publish(Ready(tuple(users)))
        return self._state

    def _publish(self, state: Failed | Ready) -> None:
        # Single reference swap of an immutable value.
        self._state = state
