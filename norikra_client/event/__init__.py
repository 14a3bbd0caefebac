"""Event movement: batched send, query streaming and group sweep."""

from norikra_client.event.batcher import IngestionBatcher
from norikra_client.event.enrich import enrich, render_time
from norikra_client.event.options import FormatOptions
from norikra_client.event.stream import stream_query
from norikra_client.event.sweep import sweep_events

__all__ = [
    "FormatOptions",
    "IngestionBatcher",
    "enrich",
    "render_time",
    "stream_query",
    "sweep_events",
]
