"""User card widget."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import Static

from userdash.constants import ACTIVE_LABEL, INACTIVE_LABEL
from userdash.models import User


class StatusBadge(Static):
    """Active/Inactive pill.  Styled via the ``active`` / ``inactive`` classes."""

    DEFAULT_CSS = """
    StatusBadge {
        width: auto;
        height: 1;
        padding: 0 1;
        text-style: bold;
    }
    StatusBadge.active {
        background: $success 30%;
        color: $text-success;
    }
    StatusBadge.inactive {
        background: $panel;
        color: $text-muted;
    }
    """

    def __init__(self, active: bool) -> None:
        super().__init__(
            ACTIVE_LABEL if active else INACTIVE_LABEL,
            classes="active" if active else "inactive",
        )
        self.active = active


class UserCard(Widget):
    """A single user rendered as a bordered card.

    Shows the name's initial as an avatar, the name and ``@username``, a
    status badge, then the email and company lines.  User-supplied strings
    are wrapped in ``Text`` so they are never parsed as markup.
    """

    def __init__(self, user: User) -> None:
        super().__init__(classes="user-card")
        self.user = user

    def compose(self) -> ComposeResult:
        user = self.user
        with Horizontal(classes="card-header"):
            yield Static(Text(user.initial, style="bold"), classes="card-avatar")
            with Vertical(classes="card-identity"):
                yield Static(Text(user.name, style="bold"), classes="card-name")
                yield Static(Text(f"@{user.username}"), classes="card-username")
            yield StatusBadge(user.is_active)
        yield Static(Text(f"📧 {user.email}"), classes="card-email")
        yield Static(Text(f"🏢 {user.company.name}"), classes="card-company")
