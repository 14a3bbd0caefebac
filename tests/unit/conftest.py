"""Shared fixtures for unit tests."""

from collections.abc import Iterator
from typing import Any

import pytest

from norikra_client.cli import context


class FakeClient:
    """In-memory stand-in for NorikraClient that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.sent: list[list[dict[str, Any]]] = []
        self.target_list: list[Any] = []
        self.query_list: list[dict[str, Any]] = []
        self.field_list: list[dict[str, Any]] = []
        self.events: dict[str, list[tuple[int, dict[str, Any]]]] = {}
        self.sweep_result: dict[str, list[tuple[int, dict[str, Any]]]] = {}
        self.closed = False

    def __enter__(self) -> "FakeClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.closed = True

    def targets(self) -> list[Any]:
        return self.target_list

    def open(self, target: str, fields: dict[str, str] | None = None, auto_field: bool = True) -> None:
        self.calls.append(("open", (target, fields, auto_field)))

    def close_target(self, target: str) -> None:
        self.calls.append(("close", (target,)))

    def modify(self, target: str, auto_field: bool) -> None:
        self.calls.append(("modify", (target, auto_field)))

    def fields(self, target: str) -> list[dict[str, Any]]:
        return self.field_list

    def reserve(self, target: str, field: str, type: str) -> None:
        self.calls.append(("reserve", (target, field, type)))

    def queries(self) -> list[dict[str, Any]]:
        return self.query_list

    def register(self, query_name: str, query_group: str | None, expression: str) -> None:
        self.calls.append(("register", (query_name, query_group, expression)))

    def deregister(self, query_name: str) -> None:
        self.calls.append(("deregister", (query_name,)))

    def send(self, target: str, events: list[dict[str, Any]]) -> None:
        self.calls.append(("send", (target,)))
        self.sent.append(list(events))

    def event(self, query_name: str) -> Iterator[tuple[int, dict[str, Any]]]:
        self.calls.append(("event", (query_name,)))
        return iter(self.events.get(query_name, []))

    def see(self, query_name: str) -> Iterator[tuple[int, dict[str, Any]]]:
        self.calls.append(("see", (query_name,)))
        return iter(self.events.get(query_name, []))

    def sweep(self, query_group: str | None = None) -> dict[str, list[tuple[int, dict[str, Any]]]]:
        self.calls.append(("sweep", (query_group,)))
        return self.sweep_result


@pytest.fixture
def fake_client(monkeypatch: pytest.MonkeyPatch) -> FakeClient:
    """Install a FakeClient as the client every CLI command opens."""
    client = FakeClient()
    monkeypatch.setattr(context, "open_client", lambda: client)
    return client


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's NORIKRA_* environment out of the tests."""
    for name in (
        "NORIKRA_HOST",
        "NORIKRA_PORT",
        "NORIKRA_TIMEOUT",
        "NORIKRA_CONFIG_FILE",
        "NORIKRA_LOG_FILE",
        "NORIKRA_LOGGING__LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_cli_context(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(context, "_config", None)
