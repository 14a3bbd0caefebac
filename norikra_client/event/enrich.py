"""Timestamp rendering and record enrichment shared by fetch and sweep."""

from datetime import datetime
from typing import Any

from norikra_client.error import ServerError
from norikra_client.formats import Record


def render_time(timestamp: float, pattern: str) -> str:
    """Render epoch seconds as local time using a strftime pattern.

    Raises:
        ServerError: If the server sent a timestamp outside the platform's range.
    """
    try:
        return datetime.fromtimestamp(timestamp).strftime(pattern)
    except (ValueError, OverflowError, OSError) as e:
        raise ServerError(f"invalid event timestamp {timestamp}: {e}") from e


def enrich(record: Record, fields: dict[str, Any]) -> Record:
    """Return a new record with ``fields`` first, followed by the original fields.

    On key collisions the enrichment value wins. ``record`` is not modified.
    """
    enriched = dict(fields)
    for key, value in record.items():
        if key not in fields:
            enriched[key] = value
    return enriched
