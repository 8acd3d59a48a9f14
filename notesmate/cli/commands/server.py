"""Server commands: run the API and apply migrations."""

import sys

import cyclopts
import uvicorn

from notesmate.cli.console import get_console
from notesmate.config import Config
from notesmate.domain.shared.error import ConfigurationError
from notesmate.infrastructure.persistence.migrate import run_migrations

app = cyclopts.App(name="server", help="Server management commands")


def _load_config() -> Config:
    console = get_console()
    try:
        return Config()
    except ConfigurationError as e:
        console.error(e.message, hint="Set NOTESMATE_AUTH__TOKEN__SECRET")
        sys.exit(1)


@app.command
def run(
    host: str = "0.0.0.0",
    port: int = 8000,
    reload: bool = False,
) -> None:
    """Run the NotesMate API server in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        reload: Restart on code changes (development only).
    """
    console = get_console()
    config = _load_config()
    if reload and config.server.is_production:
        console.error("--reload is not allowed in production")
        sys.exit(1)

    console.success(f"Starting {config.server.name} on http://{host}:{port}")
    console.detail("Environment", config.server.environment)
    console.detail("Database", config.database.url)

    uvicorn.run(
        "notesmate.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


@app.command
def migrate() -> None:
    """Apply pending database migrations."""
    console = get_console()
    config = _load_config()
    with console.status("Running migrations..."):
        run_migrations(config.database.url)
    console.success("Database is up to date")
