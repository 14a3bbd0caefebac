"""Query commands."""

from typing import Annotated, Any

import cyclopts
from cyclopts import Parameter

from norikra_client.cli import context
from norikra_client.cli.console import get_console

app = cyclopts.App(name="query", help="Manage queries")

DEFAULT_GROUP_LABEL = "default"


def _sort_key(query: dict[str, Any]) -> tuple[str, str]:
    targets = query.get("targets") or [""]
    return targets[0], query["name"]


@app.command(name="list")
def list_queries(
    simple: Annotated[bool, Parameter(name=["--simple", "-s"])] = False,
) -> None:
    """Show list of queries, ordered by first target and name.

    Args:
        simple: Suppress header/footer.
    """
    with context.open_client() as client:
        queries = client.queries()

    if not simple:
        print("\t".join(["QUERY_NAME", "GROUP", "TARGETS", "QUERY"]))
    for query in sorted(queries, key=_sort_key):
        print(
            "\t".join(
                [
                    query["name"],
                    query.get("group") or DEFAULT_GROUP_LABEL,
                    ",".join(query.get("targets") or []),
                    query["expression"],
                ]
            )
        )
    if not simple:
        print(f"{len(queries)} queries found.")


@app.command
def add(
    query_name: str,
    expression: str,
    /,
    group: Annotated[str | None, Parameter(name=["--group", "-g"])] = None,
) -> None:
    """Register a query.

    Args:
        query_name: Unique query name.
        expression: Query expression.
        group: Query group for sweep (default: the default group).
    """
    with context.open_client() as client:
        client.register(query_name, group, expression)
    get_console().success(f"Query '{query_name}' registered")


@app.command
def remove(query_name: str, /) -> None:
    """Deregister a query.

    Args:
        query_name: Query name.
    """
    with context.open_client() as client:
        client.deregister(query_name)
    get_console().success(f"Query '{query_name}' removed")
