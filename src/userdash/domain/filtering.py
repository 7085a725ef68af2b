"""Pure derivation of the visible user list from the search query."""

from collections.abc import Sequence

from userdash.models import User


def filter_users(users: Sequence[User], query: str) -> list[User]:
    """Return the users whose name or email contains ``query``.

    Matching is case-insensitive and an empty query matches everyone.
    The result is a new list in the original order; ``users`` is never
    modified, so repeated calls with the same inputs give equal results.
    """
    if not query:
        return list(users)
    return [user for user in users if user.matches(query)]
