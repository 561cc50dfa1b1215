"""
Synergy Generator

Produces the synthetic relationship set used to seed the dashboards.
Strengths are random draws shaped by a small table of known sector
synergies and by tier equality; they are demo data, not measurements.

Strength:
    known synergy pair : known_base + r * known_spread     (0.8 .. 1.0)
    same tier          : tier_base + r * tier_spread       (0.4 .. 0.7)
    otherwise          : r * other_spread                  (0.0 .. 0.6)

Type (from strength):
    > 0.8 integration, > 0.6 synergy, > 0.4 collaboration, else dependency

Usage:
    generator = SynergyGenerator(seed=42)
    relationships = generator.generate(nodes)
"""

from __future__ import annotations

import logging
import math
import random
import unicodedata
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from sectorgraph.core.models import RelationshipType, SectorNode, SectorRelationship


KNOWN_SYNERGIES: Dict[str, List[str]] = {
    "Creative Tech": [
        "Motion, Media & Sonic",
        "Gaming & Simulation",
        "Marketing & Branding",
        "Fashion & Identity",
    ],
    "Agriculture & Biotech": [
        "Food, Soil & Farming",
        "Sustainability & Impact",
        "Health & Hygiene",
        "Nutrition & Food Chain",
    ],
    "Banking & Finance": [
        "Mining & Resources",
        "Professional Services",
        "Tech Infrastructure",
        "Payroll Mining & Accounting",
    ],
    "Logistics & Packaging": [
        "Trade Systems",
        "Micro-Mesh Logistics",
        "Packaging & Materials",
        "Logistics & Operations",
    ],
    "AI, Logic & Grid": [
        "Tech Infrastructure",
        "Gaming & Simulation",
        "Creative Tech",
        "Analytics & Insights",
    ],
    "Mining & Resources": [
        "Banking & Finance",
        "Utilities & Energy",
        "Tech Infrastructure",
        "Sustainability & Impact",
    ],
    "Motion, Media & Sonic": [
        "Creative Tech",
        "Marketing & Branding",
        "Content Creation",
        "Voice & Audio",
    ],
    "Health & Hygiene": [
        "Agriculture & Biotech",
        "Food, Soil & Farming",
        "Professional Services",
        "Education & Youth",
    ],
}

DESCRIPTION_TEMPLATES = [
    "{src} provides infrastructure support to {dst}",
    "Strategic partnership between {src} and {dst}",
    "Data flow integration linking {src} with {dst}",
    "Cross-sector collaboration: {src} ↔ {dst}",
]


def clean_sector_name(name: str) -> str:
    """Strip emoji and other symbol characters, keeping letters, digits and punctuation."""
    kept = "".join(ch for ch in name if unicodedata.category(ch)[0] in "LNPZ")
    return " ".join(kept.split())


def relationship_type_for(strength: float) -> RelationshipType:
    if strength > 0.8:
        return RelationshipType.INTEGRATION
    if strength > 0.6:
        return RelationshipType.SYNERGY
    if strength > 0.4:
        return RelationshipType.COLLABORATION
    return RelationshipType.DEPENDENCY


@dataclass(frozen=True)
class SynergyScoring:
    """Random strength model; swap it to change how demo edges are drawn."""
    synergies: Dict[str, List[str]] = field(default_factory=lambda: dict(KNOWN_SYNERGIES))
    known_base: float = 0.8
    known_spread: float = 0.2
    tier_base: float = 0.4
    tier_spread: float = 0.3
    other_spread: float = 0.6

    def is_known_pair(self, a: str, b: str) -> bool:
        return b in self.synergies.get(a, []) or a in self.synergies.get(b, [])

    def strength(self, source: SectorNode, target: SectorNode, rng: random.Random) -> float:
        if self.is_known_pair(clean_sector_name(source.name), clean_sector_name(target.name)):
            return self.known_base + rng.random() * self.known_spread
        if source.tier == target.tier:
            return self.tier_base + rng.random() * self.tier_spread
        return rng.random() * self.other_spread


class SynergyGenerator:
    """Generates seeded demo relationships between every pair of sectors."""

    def __init__(
        self,
        scoring: Optional[SynergyScoring] = None,
        seed: Optional[int] = None,
        min_strength: float = 0.3,
        bidirectional_threshold: float = 0.7,
        rng: Optional[random.Random] = None,
    ):
        if not 0.0 <= min_strength <= 1.0:
            raise ValueError(f"min_strength must be within [0, 1], got {min_strength}")
        self.scoring = scoring or SynergyScoring()
        self.min_strength = min_strength
        self.bidirectional_threshold = bidirectional_threshold
        self.rng = rng or random.Random(seed)
        self.logger = logging.getLogger(__name__)

    def describe(self, source: SectorNode, target: SectorNode) -> str:
        template = self.rng.choice(DESCRIPTION_TEMPLATES)
        src = f"{source.emoji} {source.name}".strip()
        dst = f"{target.emoji} {target.name}".strip()
        return template.format(src=src, dst=dst)

    def relate(self, source: SectorNode, target: SectorNode) -> Optional[SectorRelationship]:
        """Draw one candidate edge; None when it falls at or below min_strength."""
        strength = self.scoring.strength(source, target, self.rng)
        if strength <= self.min_strength:
            return None

        return SectorRelationship(
            source_id=source.id,
            target_id=target.id,
            strength=strength,
            type=relationship_type_for(strength),
            description=self.describe(source, target),
            bidirectional=strength > self.bidirectional_threshold,
            weight=math.floor(strength * 10),
        )

    def generate(self, nodes: Sequence[SectorNode]) -> List[SectorRelationship]:
        relationships: List[SectorRelationship] = []

        for i in range(len(nodes)):
            for j in range(i + 1, len(nodes)):
                rel = self.relate(nodes[i], nodes[j])
                if rel is not None:
                    relationships.append(rel)

        self.logger.info(
            "Generated %d relationships across %d sectors",
            len(relationships), len(nodes),
        )
        return relationships
