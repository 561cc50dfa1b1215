"""
Application Settings

Environment configuration for the application.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings from environment."""

    # Catalog API
    api_url: str = "http://localhost:5000"
    api_timeout: float = 10.0

    # Relationship generation
    seed: Optional[int] = None
    min_strength: float = 0.3

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        seed = os.getenv("SECTOR_SEED")
        return cls(
            api_url=os.getenv("SECTOR_API_URL", "http://localhost:5000"),
            api_timeout=float(os.getenv("SECTOR_API_TIMEOUT", "10")),
            seed=int(seed) if seed else None,
            min_strength=float(os.getenv("SECTOR_MIN_STRENGTH", "0.3")),
        )
