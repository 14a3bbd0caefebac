"""Error hierarchy for the norikra client.

Error layers:
- NorikraError: Base class for all client errors
- RemoteError: The service answered, but refused or failed the request
- TransportError: The service could not be reached at all
- DecodeError: A local input line could not be turned into a record

All of them are terminal for the running command. They are converted to
one-line messages by the error boundary in norikra_client.cli.errors.
"""


class NorikraError(Exception):
    """Base class for all norikra client errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Remote Errors (reported by the service)
# =============================================================================


class RemoteError(NorikraError):
    """Base class for errors reported by the norikra server."""


class ClientError(RemoteError):
    """Request rejected: unknown target, duplicate query name, bad request."""


class ServerError(RemoteError):
    """Failure on the server side."""


# =============================================================================
# Local Errors
# =============================================================================


class TransportError(NorikraError):
    """Connection to the server failed or was lost."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message, code="TRANSPORT_ERROR")
        self.url = url


class DecodeError(NorikraError):
    """Input line could not be decoded into a record."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message, code="DECODE_ERROR")
        self.line_number = line_number
