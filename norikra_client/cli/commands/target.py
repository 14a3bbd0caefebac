"""Target commands."""

import sys
from typing import Annotated

import cyclopts
from cyclopts import Parameter

from norikra_client.cli import context
from norikra_client.cli.console import get_console

app = cyclopts.App(name="target", help="Manage targets")


def parse_field_defs(field_defs: tuple[str, ...]) -> dict[str, str] | None:
    """Turn ``name:type`` arguments into a field definition mapping.

    Raises:
        ValueError: If an argument has no ``:`` separator.
    """
    if not field_defs:
        return None
    fields: dict[str, str] = {}
    for field_def in field_defs:
        name, sep, type_ = field_def.partition(":")
        if not sep or not name or not type_:
            raise ValueError(f"Invalid field definition '{field_def}' (expected NAME:TYPE)")
        fields[name] = type_
    return fields


@app.command(name="list")
def list_targets(
    simple: Annotated[bool, Parameter(name=["--simple", "-s"])] = False,
) -> None:
    """Show list of targets.

    Args:
        simple: Suppress header/footer.
    """
    with context.open_client() as client:
        targets = client.targets()

    if not simple:
        print("TARGET")
    for target in targets:
        print(target["name"] if isinstance(target, dict) else target)
    if not simple:
        print(f"{len(targets)} targets found.")


@app.command(name="open")
def open_target(
    target: str,
    /,
    *field_defs: str,
    suppress_auto_field: bool = False,
) -> None:
    """Create a new target and optionally define its fields.

    Args:
        target: Target name.
        field_defs: Field definitions as NAME:TYPE (e.g. 'path:string').
        suppress_auto_field: Do not register fields of incoming events automatically.
    """
    try:
        fields = parse_field_defs(field_defs)
    except ValueError as e:
        get_console().error(str(e))
        sys.exit(1)

    with context.open_client() as client:
        client.open(target, fields, auto_field=not suppress_auto_field)
    get_console().success(f"Target '{target}' opened")


@app.command(name="close")
def close_target(target: str, /) -> None:
    """Close an existing target and all its queries.

    Args:
        target: Target name.
    """
    with context.open_client() as client:
        client.close_target(target)
    get_console().success(f"Target '{target}' closed")


@app.command
def modify(target: str, auto_field: bool, /) -> None:
    """Switch automatic field registration of a target on or off.

    Args:
        target: Target name.
        auto_field: Whether fields of incoming events are registered automatically.
    """
    with context.open_client() as client:
        client.modify(target, auto_field)
    get_console().success(f"Target '{target}' modified (auto_field={auto_field})")
