"""Dispatch-level error boundary for CLI commands."""

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from norikra_client.cli.console import Console, get_console
from norikra_client.error import ClientError, DecodeError, ServerError, TransportError

logger = logging.getLogger(__name__)


@contextmanager
def error_boundary(console: Console | None = None) -> Iterator[None]:
    """Turn norikra errors raised by a command into one-line messages.

    Each error kind gets its own message on stderr, and the process exits
    with status 1 without a traceback. An interrupt exits with status 130,
    and a closed output pipe exits quietly with status 141.
    """
    console = console or get_console()
    try:
        yield
    except ClientError as e:
        logger.debug("Request rejected", exc_info=True)
        console.error(f"Failed: {e.message}")
        sys.exit(1)
    except ServerError as e:
        logger.debug("Server failure", exc_info=True)
        console.error(
            f"ERROR on norikra server: {e.message}",
            hint="For more details, see norikra server's logs",
        )
        sys.exit(1)
    except TransportError as e:
        logger.debug("Transport failure", exc_info=True)
        console.error(
            f"Could not connect to norikra server at {e.url}: {e.message}",
            hint="Is the server running? Check --host/--port or NORIKRA_HOST/NORIKRA_PORT",
        )
        sys.exit(1)
    except DecodeError as e:
        where = f" (line {e.line_number})" if e.line_number is not None else ""
        console.error(f"Invalid input{where}: {e.message}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    except BrokenPipeError:
        # Reader went away (e.g. `| head`); keep the final flush at exit quiet
        _silence_stdout()
        sys.exit(141)


def _silence_stdout() -> None:
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        pass  # stdout has no file descriptor (captured or replaced)
