"""Client for the LootLocker server API: endpoints, logging, HTTP transport and asset calls."""

__version__ = "0.1.0"
__all__ = ["endpoints", "logger", "http_client", "asset_models", "asset_api"]