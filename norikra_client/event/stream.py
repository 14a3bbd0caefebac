"""Streaming the output of a single query."""

from collections.abc import Callable, Iterable, Iterator

from norikra_client.event.enrich import enrich, render_time
from norikra_client.event.options import FormatOptions
from norikra_client.formats import Record


def stream_query(
    events: Iterable[tuple[int, Record]],
    options: FormatOptions,
    encode: Callable[[Record], str],
) -> Iterator[str]:
    """Yield one encoded line per query output event.

    Each event is pulled, enriched with its rendered time under
    ``options.time_key`` and encoded before the next one is pulled.
    """
    for timestamp, record in events:
        time = render_time(timestamp, options.time_format)
        yield encode(enrich(record, {options.time_key: time}))
