"""Per-invocation formatting options for event commands."""

from pydantic import BaseModel, Field

from norikra_client.formats import FormatName

DEFAULT_BATCH_SIZE = 10000
DEFAULT_TIME_KEY = "time"
DEFAULT_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"
DEFAULT_QUERY_NAME_KEY = "query"


class FormatOptions(BaseModel):
    """Resolved once from command-line options, never mutated afterwards."""

    format: FormatName = "json"
    batch_size: int = Field(default=DEFAULT_BATCH_SIZE, gt=0)
    time_key: str = DEFAULT_TIME_KEY
    time_format: str = DEFAULT_TIME_FORMAT
    query_name_key: str = DEFAULT_QUERY_NAME_KEY  # sweep only

    model_config = {"frozen": True}
