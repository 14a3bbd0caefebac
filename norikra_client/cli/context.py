"""Per-invocation configuration shared by all commands."""

from norikra_client.client import NorikraClient
from norikra_client.config import Config

_config: Config | None = None


def set_config(config: Config) -> None:
    """Install the configuration resolved by the launcher."""
    global _config
    _config = config


def get_config() -> Config:
    """Get the active configuration (environment defaults if none was set)."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def open_client() -> NorikraClient:
    """Open a client for the configured server. Use as a context manager."""
    return NorikraClient.from_config(get_config())
