"""Main CLI application using Cyclopts.

The CLI is a thin client - every command is one or a few calls to the
norikra server API. Global options (--host, --port, --verbose) are handled
by the meta launcher, which also installs the single error boundary.
"""

from typing import Annotated

import cyclopts
from cyclopts import Parameter

from norikra_client import __version__
from norikra_client.cli import context
from norikra_client.cli.commands import event, field, query, target
from norikra_client.cli.errors import error_boundary
from norikra_client.config import Config, configure_logging

app = cyclopts.App(
    name="norikra-client",
    help="Command line client for the norikra stream processing server",
    version=__version__,
)

app.command(target.app, name="target")
app.command(field.app, name="field")
app.command(query.app, name="query")
app.command(event.app, name="event")


@app.meta.default
def launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    host: str | None = None,
    port: int | None = None,
    verbose: bool = False,
) -> None:
    """Run a command against a norikra server.

    Args:
        host: Server host (default: NORIKRA_HOST or localhost).
        port: Server API port (default: NORIKRA_PORT or 26578).
        verbose: Enable debug logging on stderr.
    """
    overrides = {key: value for key, value in (("host", host), ("port", port)) if value is not None}
    config = Config(**overrides)
    configure_logging(config.logging, verbose=verbose)
    context.set_config(config)

    with error_boundary():
        app(tokens)


def main() -> None:
    """Console script entry point."""
    app.meta()
