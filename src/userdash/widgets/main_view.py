"""Main view: search bar stacked above the loading, error and card areas."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Input, LoadingIndicator

from userdash.constants import SEARCH_PLACEHOLDER
from userdash.widgets.error_banner import ErrorBanner
from userdash.widgets.user_grid import UserGrid


class MainView(Vertical):
    """Composes the search input with the three load-state areas.

    Only one of ``#loading``, ``#error`` and ``#users`` is displayed at a
    time; the app toggles them as the load state settles.
    """

    def compose(self) -> ComposeResult:
        yield Input(placeholder=SEARCH_PLACEHOLDER, id="search")
        yield LoadingIndicator(id="loading")
        yield ErrorBanner(id="error")
        yield UserGrid(id="users")
