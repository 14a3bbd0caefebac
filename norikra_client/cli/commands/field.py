"""Field definition commands."""

from typing import Annotated

import cyclopts
from cyclopts import Parameter

from norikra_client.cli import context
from norikra_client.cli.console import get_console

app = cyclopts.App(name="field", help="Manage target field/datatype definitions")


@app.command(name="list")
def list_fields(
    target: str,
    /,
    simple: Annotated[bool, Parameter(name=["--simple", "-s"])] = False,
) -> None:
    """Show field definitions of a target.

    Args:
        target: Target name.
        simple: Suppress header/footer.
    """
    with context.open_client() as client:
        fields = client.fields(target)

    if not simple:
        print("FIELD\tTYPE\tOPTIONAL")
    for field in fields:
        print(f"{field['name']}\t{field['type']}\t{field.get('optional')}")
    if not simple:
        print(f"{len(fields)} fields found.")


@app.command
def add(target: str, field: str, type: str, /) -> None:
    """Reserve a field name and its type on a target.

    Args:
        target: Target name.
        field: Field name.
        type: Data type (e.g. string, boolean, integer, float).
    """
    with context.open_client() as client:
        client.reserve(target, field, type)
    get_console().success(f"Field '{field}' ({type}) reserved on '{target}'")
