"""Scrollable grid of user cards."""

from collections.abc import Sequence

from textual.containers import ScrollableContainer

from userdash.models import User
from userdash.widgets.user_card import UserCard


class UserGrid(ScrollableContainer):
    """Responsive grid holding one ``UserCard`` per visible user.

    The column count follows the terminal width (1, 2 or 3 columns), set
    from ``on_resize``.  ``load`` replaces every card, keeping the order of
    the list it is given.
    """

    def on_resize(self) -> None:
        width = self.size.width
        columns = 3 if width >= 120 else 2 if width >= 80 else 1
        self.styles.grid_size_columns = columns

    async def load(self, users: Sequence[User]) -> None:
        """Replace grid contents with cards for the given users."""
        await self.remove_children()
        if users:
            await self.mount_all(UserCard(user) for user in users)

    @property
    def users(self) -> list[User]:
        """The users currently shown, in display order."""
        return [card.user for card in self.query(UserCard)]
