"""Key binding overlay."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, Static

from userdash.constants import APP_TITLE, HELP_TEXT


class HelpScreen(ModalScreen[None]):
    """Lists the dashboard's shortcuts.  Any of ``?``, ``q``, Escape or a click closes it."""

    BINDINGS = [
        Binding("escape", "close", show=False),
        Binding("question_mark", "close", show=False),
        Binding("q", "close", show=False),
    ]

    def compose(self) -> ComposeResult:
        with Vertical(id="help-container"):
            yield Label(f" {APP_TITLE} · keys", id="help-title")
            yield Static(HELP_TEXT, id="help-text")

    def action_close(self) -> None:
        self.dismiss(None)

    def on_click(self) -> None:
        self.dismiss(None)
