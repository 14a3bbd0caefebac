"""Event commands - send records in, fetch query output out."""

import sys
from collections.abc import Iterable
from typing import Annotated

import cyclopts
from cyclopts import Parameter, validators

from norikra_client.cli import context
from norikra_client.cli.console import get_console
from norikra_client.event import FormatOptions, IngestionBatcher, stream_query, sweep_events
from norikra_client.event.options import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_QUERY_NAME_KEY,
    DEFAULT_TIME_FORMAT,
    DEFAULT_TIME_KEY,
)
from norikra_client.formats import FormatName, get_codec

app = cyclopts.App(name="event", help="Send/fetch events")


def write_lines(lines: Iterable[str]) -> int:
    """Write each line to stdout as soon as it is produced."""
    out = sys.stdout
    count = 0
    for line in lines:
        out.write(line + "\n")
        count += 1
    out.flush()
    return count


@app.command
def send(
    target: str,
    /,
    format: FormatName = "json",
    batch_size: Annotated[int, Parameter(validator=validators.Number(gte=1))] = DEFAULT_BATCH_SIZE,
) -> None:
    """Send events read from stdin into a target, one record per line.

    Args:
        target: Target name.
        format: Format of input lines [json, ltsv].
        batch_size: Records sent in one transfer.
    """
    options = FormatOptions(format=format, batch_size=batch_size)
    codec = get_codec(options.format)

    with context.open_client() as client:
        batcher = IngestionBatcher(client, options.batch_size, codec.parse)
        # Raw bytes so that invalid UTF-8 is reported per line
        lines = getattr(sys.stdin, "buffer", sys.stdin)
        sent = batcher.run(lines, target)

    get_console().success(f"Sent {sent} events to '{target}'")


def _fetch(query_name: str, options: FormatOptions, *, consume: bool) -> None:
    codec = get_codec(options.format)
    with context.open_client() as client:
        events = client.event(query_name) if consume else client.see(query_name)
        write_lines(stream_query(events, options, codec.format))


@app.command
def fetch(
    query_name: str,
    /,
    format: FormatName = "json",
    time_key: str = DEFAULT_TIME_KEY,
    time_format: str = DEFAULT_TIME_FORMAT,
) -> None:
    """Fetch (and consume) output events of a query.

    Args:
        query_name: Query name.
        format: Format of output lines [json, ltsv].
        time_key: Output key name for event time.
        time_format: strftime pattern for event time (e.g. '2013/05/14 17:57:59').
    """
    options = FormatOptions(format=format, time_key=time_key, time_format=time_format)
    _fetch(query_name, options, consume=True)


@app.command
def see(
    query_name: str,
    /,
    format: FormatName = "json",
    time_key: str = DEFAULT_TIME_KEY,
    time_format: str = DEFAULT_TIME_FORMAT,
) -> None:
    """Show output events of a query without consuming them.

    Args:
        query_name: Query name.
        format: Format of output lines [json, ltsv].
        time_key: Output key name for event time.
        time_format: strftime pattern for event time.
    """
    options = FormatOptions(format=format, time_key=time_key, time_format=time_format)
    _fetch(query_name, options, consume=False)


@app.command
def sweep(
    query_group: str | None = None,
    /,
    format: FormatName = "json",
    query_name_key: str = DEFAULT_QUERY_NAME_KEY,
    time_key: str = DEFAULT_TIME_KEY,
    time_format: str = DEFAULT_TIME_FORMAT,
) -> None:
    """Fetch output events of all queries in the default (or given) query group.

    Args:
        query_group: Query group name.
        format: Format of output lines [json, ltsv].
        query_name_key: Output key name for query name.
        time_key: Output key name for event time.
        time_format: strftime pattern for event time.
    """
    options = FormatOptions(
        format=format,
        query_name_key=query_name_key,
        time_key=time_key,
        time_format=time_format,
    )
    codec = get_codec(options.format)
    with context.open_client() as client:
        results = client.sweep(query_group)
    write_lines(sweep_events(results, options, codec.format))
