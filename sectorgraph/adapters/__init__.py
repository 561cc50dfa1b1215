"""
Adapters

Inbound sector sources and the console display used by the CLI.
"""

from .sector_source import (
    SectorApiClient,
    JsonFileSectorSource,
    SectorSourceError,
    parse_sector_payload,
)
from .console_display import ConsoleDisplay, Colors

__all__ = [
    "SectorApiClient",
    "JsonFileSectorSource",
    "SectorSourceError",
    "parse_sector_payload",
    "ConsoleDisplay",
    "Colors",
]
