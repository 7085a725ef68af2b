"""Lifecycle of the one-shot user fetch.

A fetch starts in ``Loading`` and settles exactly once into either
``Failed`` or ``Ready``.  All three values are immutable, so replacing the
current state is a single reference swap and readers never see a
half-written result.
"""

from dataclasses import dataclass

from userdash.models import User


@dataclass(frozen=True)
class Loading:
    @property
    def is_terminal(self) -> bool:
        return False


@dataclass(frozen=True)
class Failed:
    message: str

    @property
    def is_terminal(self) -> bool:
        return True


@dataclass(frozen=True)
class Ready:
    users: tuple[User, ...]

    @property
    def is_terminal(self) -> bool:
        return True


LoadState = Loading | Failed | Ready
