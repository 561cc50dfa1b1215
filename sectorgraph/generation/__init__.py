from .synergy import (
    KNOWN_SYNERGIES,
    SynergyGenerator,
    SynergyScoring,
    clean_sector_name,
    relationship_type_for,
)

__all__ = [
    "KNOWN_SYNERGIES",
    "SynergyGenerator",
    "SynergyScoring",
    "clean_sector_name",
    "relationship_type_for",
]
