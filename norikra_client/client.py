"""Handle to a remote norikra server.

Wraps the JSON API methods one-to-one. Target, field and query
administration are single calls with no local state; the event methods
return records in the ``(timestamp, record)`` shape used by the event
pipelines in norikra_client.event.
"""

import logging
from collections.abc import Iterator, Sequence
from typing import Any

import httpx

from norikra_client.config import Config
from norikra_client.formats import Record
from norikra_client.infrastructure.rpc import RPC

logger = logging.getLogger(__name__)

TimedRecord = tuple[int, Record]


class NorikraClient:
    """Synchronous client for one norikra server."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 26578,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            host: Server host name.
            port: Server API port.
            timeout: Per-request HTTP timeout in seconds.
            transport: Override the HTTP transport (used by tests).
        """
        self.host = host
        self.port = port
        self._rpc = RPC(
            httpx.Client(
                base_url=f"http://{host}:{port}",
                timeout=timeout,
                transport=transport,
            )
        )

    @classmethod
    def from_config(cls, config: Config) -> "NorikraClient":
        return cls(config.host, config.port, timeout=config.timeout)

    def __enter__(self) -> "NorikraClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._rpc.close()

    # -------------------------------------------------------------------------
    # Targets
    # -------------------------------------------------------------------------

    def targets(self) -> list[Any]:
        return self._rpc.call("targets") or []

    def open(
        self,
        target: str,
        fields: dict[str, str] | None = None,
        auto_field: bool = True,
    ) -> None:
        self._rpc.call("open", target=target, fields=fields, auto_field=auto_field)

    def close_target(self, target: str) -> None:
        self._rpc.call("close", target=target)

    def modify(self, target: str, auto_field: bool) -> None:
        self._rpc.call("modify", target=target, auto_field=auto_field)

    # -------------------------------------------------------------------------
    # Fields
    # -------------------------------------------------------------------------

    def fields(self, target: str) -> list[dict[str, Any]]:
        return self._rpc.call("fields", target=target) or []

    def reserve(self, target: str, field: str, type: str) -> None:
        self._rpc.call("reserve", target=target, field=field, type=type)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def queries(self) -> list[dict[str, Any]]:
        return self._rpc.call("queries") or []

    def register(self, query_name: str, query_group: str | None, expression: str) -> None:
        self._rpc.call(
            "register",
            query_name=query_name,
            query_group=query_group,
            expression=expression,
        )

    def deregister(self, query_name: str) -> None:
        self._rpc.call("deregister", query_name=query_name)

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def send(self, target: str, events: Sequence[Record]) -> None:
        """Send one batch of events into a target in a single call."""
        self._rpc.call("send", target=target, events=list(events))
        logger.debug("Sent %d events to %s", len(events), target)

    def event(self, query_name: str) -> Iterator[TimedRecord]:
        """Pull (and consume) the pending output events of a query."""
        return _timed(self._rpc.call("event", query_name=query_name))

    def see(self, query_name: str) -> Iterator[TimedRecord]:
        """Like event(), but leaves the output in place on the server."""
        return _timed(self._rpc.call("see", query_name=query_name))

    def sweep(self, query_group: str | None = None) -> dict[str, list[TimedRecord]]:
        """Pull the output of every query in a group (default group if None)."""
        data = self._rpc.call("sweep", query_group=query_group) or {}
        return {name: list(_timed(events)) for name, events in data.items()}


def _timed(events: list[Any] | None) -> Iterator[TimedRecord]:
    for time, record in events or []:
        yield int(time), record
