"""Flattening a query group's output into encoded lines."""

from collections.abc import Callable, Iterator, Mapping, Sequence

from norikra_client.event.enrich import enrich, render_time
from norikra_client.event.options import FormatOptions
from norikra_client.formats import Record


def sweep_events(
    results: Mapping[str, Sequence[tuple[int, Record]]],
    options: FormatOptions,
    encode: Callable[[Record], str],
) -> Iterator[str]:
    """Yield encoded lines for every event of every query in ``results``.

    Queries are emitted in ascending name order. Events of one query keep the
    order the server returned them in; they are not re-sorted by time.
    """
    for query_name in sorted(results):
        for timestamp, record in results[query_name]:
            fields = {
                options.time_key: render_time(timestamp, options.time_format),
                options.query_name_key: query_name,
            }
            yield encode(enrich(record, fields))
