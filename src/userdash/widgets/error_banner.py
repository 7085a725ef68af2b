"""Error banner shown when the user fetch fails."""

from rich.text import Text
from textual.widgets import Static


class ErrorBanner(Static):
    """Displays a failure message verbatim, prefixed with ``Error:``."""

    DEFAULT_CSS = """
    ErrorBanner {
        background: $error 20%;
        color: $text-error;
        padding: 1 2;
        margin: 1 0;
    }
    """

    message: str = ""

    def show_error(self, message: str) -> None:
        self.message = message
        self.update(Text(f"Error: {message}"))
