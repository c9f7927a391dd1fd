"""Command Line — `user-service --port N` starts the HTTP server.

Invariants:
    - --port defaults to Settings.port (8080 unless PORT is set in the environment or .env)
    - --port/--host overrides apply to a copy of the settings; the cached instance is untouched
"""

from typing import Optional

import typer
import uvicorn

from user_service.config import get_settings
from user_service.main import create_app

cli = typer.Typer(add_completion=False, help="User CRUD HTTP service.")


@cli.command()
def serve(
    port: Optional[int] = typer.Option(
        None, "--port", "-p", min=1, max=65535,
        help="Port to listen on (default: 8080).",
    ),
    host: Optional[str] = typer.Option(
        None, "--host", help="Interface to bind (default: 0.0.0.0).",
    ),
):
    """Run the HTTP server until interrupted."""
    settings = get_settings()
    overrides = {
        key: value for key, value in (("port", port), ("host", host))
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(update=overrides)
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
