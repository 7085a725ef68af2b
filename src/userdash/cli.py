"""Command line entry point: resolve settings, set up logging, run the dashboard."""

import logging
from enum import Enum
from pathlib import Path

import typer

from userdash.app import UserDashApp
from userdash.config import ConfigError, Settings, load_config
from userdash.logs import configure_logging
from userdash.providers import HttpUserProvider, MockUserProvider, UserProvider

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Terminal dashboard listing users from a remote JSON API",
    add_completion=False,
)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def resolve_settings(endpoint: str | None, delay_ms: int | None) -> Settings:
    """Merge command line overrides on top of the config file."""
    settings = load_config()
    overrides: dict[str, object] = {}
    if endpoint is not None:
        overrides["endpoint"] = endpoint
    if delay_ms is not None:
        overrides["initial_delay_ms"] = delay_ms
    return Settings.model_validate({**settings.model_dump(), **overrides})


def build_app(settings: Settings, mock: bool = False) -> UserDashApp:
    provider: UserProvider = MockUserProvider() if mock else HttpUserProvider(settings.endpoint)
    return UserDashApp(provider=provider, settings=settings)


@app.command()
def run(
    endpoint: str | None = typer.Option(None, "--endpoint", help="URL returning a JSON array of users"),
    delay_ms: int | None = typer.Option(
        None, "--delay-ms", min=0, help="Wait this long before issuing the request"
    ),
    mock: bool = typer.Option(False, "--mock", help="Show built-in sample users instead of fetching"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Write logs to this file"),
    log_level: LogLevel = typer.Option(LogLevel.INFO, "--log-level", case_sensitive=False),
) -> None:
    """Launch the user dashboard."""
    configure_logging(log_level.value, log_file)
    try:
        settings = resolve_settings(endpoint, delay_ms)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    logger.info(
        "Starting dashboard (endpoint=%s, delay=%dms, mock=%s)",
        settings.endpoint,
        settings.initial_delay_ms,
        mock,
    )
    build_app(settings, mock=mock).run()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
