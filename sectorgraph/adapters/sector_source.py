"""
Sector Sources

Where the sector list comes from: the catalog API (``GET /api/sectors``)
or a JSON file exported from it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

import requests

from sectorgraph.core.models import SectorRecord


class SectorSourceError(RuntimeError):
    """Raised when the sector list cannot be loaded or parsed."""


def parse_sector_payload(payload: Any) -> List[SectorRecord]:
    """Accept either a bare list or ``{"sectors": [...]}``."""
    if isinstance(payload, dict):
        payload = payload.get("sectors", [])
    if not isinstance(payload, list):
        raise SectorSourceError(f"Expected a list of sectors, got {type(payload).__name__}")
    try:
        return [SectorRecord.from_dict(item) for item in payload]
    except (KeyError, TypeError, ValueError) as e:
        raise SectorSourceError(f"Malformed sector record: {e}") from e


class SectorApiClient:
    """Fetches sectors from the catalog API."""

    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

    @property
    def sectors_url(self) -> str:
        return f"{self.base_url}/api/sectors"

    def fetch_sectors(self) -> List[SectorRecord]:
        self.logger.info(f"Fetching sectors from {self.sectors_url}")
        try:
            response = requests.get(self.sectors_url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise SectorSourceError(f"Sector request failed: {e}") from e
        except ValueError as e:
            raise SectorSourceError(f"Sector response is not JSON: {e}") from e

        records = parse_sector_payload(payload)
        self.logger.info(f"Loaded {len(records)} sectors")
        return records


class JsonFileSectorSource:
    """Reads sectors from a JSON file with the same shape as the API response."""

    def __init__(self, path: str):
        self.path = Path(path)
        self.logger = logging.getLogger(__name__)

    def fetch_sectors(self) -> List[SectorRecord]:
        self.logger.info(f"Loading sectors from {self.path}")
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as e:
            raise SectorSourceError(f"Cannot read {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SectorSourceError(f"Invalid JSON in {self.path}: {e}") from e
        return parse_sector_payload(payload)
