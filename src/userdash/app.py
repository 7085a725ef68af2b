"""Main application entry point."""

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Input, LoadingIndicator

from userdash.config import Settings, load_theme, save_theme
from userdash.constants import APP_SUBTITLE, APP_TITLE
from userdash.domain.filtering import filter_users
from userdash.domain.load_state import Failed, Loading, LoadState, Ready
from userdash.models import User
from userdash.providers import HttpUserProvider, UserProvider
from userdash.screens.help import HelpScreen
from userdash.source import UserSource
from userdash.widgets.error_banner import ErrorBanner
from userdash.widgets.main_view import MainView
from userdash.widgets.user_grid import UserGrid


class UserDashApp(App):
    """User Dashboard: fetches users once and lets you search them."""

    CSS_PATH = "app.tcss"
    TITLE = APP_TITLE
    SUB_TITLE = APP_SUBTITLE

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("question_mark", "toggle_help", "Help", key_display="?"),
        Binding("slash", "focus_search", "Search", key_display="/"),
        Binding("escape", "clear_search", show=False),
    ]

    def __init__(
        self,
        provider: UserProvider | None = None,
        settings: Settings | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or Settings()
        self._provider: UserProvider = provider or HttpUserProvider(self._settings.endpoint)
        self._source = UserSource(self._provider, self._settings.initial_delay_ms)
        self._filter: str = ""

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def source(self) -> UserSource:
        return self._source

    @property
    def load_state(self) -> LoadState:
        return self._source.state

    def compose(self) -> ComposeResult:
        yield Header()
        yield MainView(id="main")
        yield Footer()

    def on_mount(self) -> None:
        saved_theme = load_theme()
        if saved_theme:
            self.theme = saved_theme
        self._show_state(self._source.state)
        self._load_users()

    @work(exclusive=True, group="load")
    async def _load_users(self) -> None:
        """Run the one-shot fetch and render whatever state it settles in."""
        state = await self._source.load()
        self._show_state(state)
        if isinstance(state, Ready):
            await self._refresh_grid()
            self._get_grid().focus()

    def watch_theme(self, theme: str) -> None:
        """Persist theme changes whenever the theme is changed."""
        save_theme(theme)

    def visible_users(self) -> list[User]:
        """The users matching the current search, or [] until the load is ready."""
        state = self._source.state
        if not isinstance(state, Ready):
            return []
        return filter_users(state.users, self._filter)

    def _get_grid(self) -> UserGrid:
        return self.query_one("#users", UserGrid)

    def _show_state(self, state: LoadState) -> None:
        """Display exactly one of the loading, error and grid areas."""
        self.query_one("#loading", LoadingIndicator).display = isinstance(state, Loading)
        banner = self.query_one("#error", ErrorBanner)
        banner.display = isinstance(state, Failed)
        if isinstance(state, Failed):
            banner.show_error(state.message)
        self._get_grid().display = isinstance(state, Ready)

    async def _refresh_grid(self) -> None:
        """Repopulate the grid from the current search and update the subtitle."""
        if not isinstance(self._source.state, Ready):
            return
        visible = self.visible_users()
        await self._get_grid().load(visible)
        self._update_subtitle(len(visible))

    def _update_subtitle(self, shown: int) -> None:
        total = len(self._source.users)
        self.sub_title = f"{APP_SUBTITLE} · {shown}/{total} users"

    def action_toggle_help(self) -> None:
        self.push_screen(HelpScreen())

    def action_focus_search(self) -> None:
        self.query_one("#search", Input).focus()

    async def action_clear_search(self) -> None:
        """Clear the active filter and hand focus back to the grid."""
        search = self.query_one("#search", Input)
        if search.value:
            search.value = ""
            self._filter = ""
            await self._refresh_grid()
        self._get_grid().focus()

    async def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search":
            self._filter = event.value
            await self._refresh_grid()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search":
            self._get_grid().focus()
