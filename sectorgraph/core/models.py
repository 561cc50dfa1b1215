"""
Core Value Objects and Entities

Data structures for the sector relationship network:

Vertices:
- SectorNode: {id, name, emoji, tier, x, y, connections, color, metadata}

Edges:
- SectorRelationship (source -> target): {strength, type, description, bidirectional}

Derived:
- MatrixEntry: adjacency cell {strength, type, bidirectional}
- NetworkStats: aggregate snapshot recomputed on every write
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Any, Optional


# =============================================================================
# Constants
# =============================================================================

#: Monthly price assumed when a sector carries no pricing metadata.
DEFAULT_MONTHLY_PRICE: float = 79.99


# =============================================================================
# Enumerations
# =============================================================================

class Tier(str, Enum):
    """Sector category tier, ordered Basic < ... < Enterprise."""
    BASIC = "Basic"
    STANDARD = "Standard"
    PROFESSIONAL = "Professional"
    PREMIUM = "Premium"
    ENTERPRISE = "Enterprise"

    @property
    def rank(self) -> int:
        return _TIER_RANKS[self]

    # str would compare the names alphabetically
    def __lt__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: Any) -> "Tier":
        """Parse a tier name, falling back to BASIC for unknown values."""
        if isinstance(value, Tier):
            return value
        for tier in cls:
            if tier.value.lower() == str(value).lower():
                return tier
        return cls.BASIC

    @classmethod
    def from_monthly_price(cls, monthly: float) -> "Tier":
        if monthly >= 300:
            return cls.ENTERPRISE
        if monthly >= 200:
            return cls.PREMIUM
        if monthly >= 150:
            return cls.PROFESSIONAL
        if monthly >= 100:
            return cls.STANDARD
        return cls.BASIC


_TIER_RANKS = {
    Tier.BASIC: 1,
    Tier.STANDARD: 2,
    Tier.PROFESSIONAL: 3,
    Tier.PREMIUM: 4,
    Tier.ENTERPRISE: 5,
}


class RelationshipType(str, Enum):
    """Kind of link between two sectors."""
    INTEGRATION = "integration"
    SYNERGY = "synergy"
    DEPENDENCY = "dependency"
    COLLABORATION = "collaboration"


# =============================================================================
# Sector records (as served by GET /api/sectors)
# =============================================================================

@dataclass
class SectorPricing:
    monthly: float = DEFAULT_MONTHLY_PRICE
    annual: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"monthly": self.monthly}
        if self.annual is not None:
            result["annual"] = self.annual
        return result

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SectorPricing":
        data = data or {}
        monthly = data.get("monthly")
        annual = data.get("annual")
        return cls(
            monthly=float(monthly) if monthly is not None else DEFAULT_MONTHLY_PRICE,
            annual=float(annual) if annual is not None else None,
        )


@dataclass
class SectorMetadata:
    """
    Typed view of a sector's metadata blob.

    Only pricing is interpreted; every other key is preserved in ``extra``
    so nothing is lost on a round trip.
    """
    pricing: SectorPricing = field(default_factory=SectorPricing)
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"pricing": self.pricing.to_dict(), **self.extra}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SectorMetadata":
        data = dict(data or {})
        pricing = SectorPricing.from_dict(data.pop("pricing", None))
        return cls(pricing=pricing, extra=data)


@dataclass
class SectorRecord:
    """A sector as returned by the catalog API."""
    id: int
    name: str
    emoji: str = ""
    description: Optional[str] = None
    brand_count: int = 0
    subnode_count: int = 0
    metadata: SectorMetadata = field(default_factory=SectorMetadata)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "emoji": self.emoji,
            "description": self.description,
            "brand_count": self.brand_count,
            "subnode_count": self.subnode_count,
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SectorRecord":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            emoji=data.get("emoji") or "",
            description=data.get("description"),
            brand_count=int(data.get("brand_count", data.get("brandCount")) or 0),
            subnode_count=int(data.get("subnode_count", data.get("subnodeCount")) or 0),
            metadata=SectorMetadata.from_dict(data.get("metadata")),
        )


# =============================================================================
# Graph entities
# =============================================================================

@dataclass
class SectorNode:
    """
    A sector vertex in the relationship network.

    Attributes:
        x, y: layout position, only meaningful to renderers
        connections: number of edges touching this node, kept in sync by
            the relationship store
    """
    id: int
    name: str
    emoji: str = ""
    tier: Tier = Tier.BASIC
    x: float = 0.0
    y: float = 0.0
    connections: int = 0
    color: str = "#6B7280"
    metadata: SectorMetadata = field(default_factory=SectorMetadata)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "emoji": self.emoji,
            "tier": self.tier.value,
            "x": self.x,
            "y": self.y,
            "connections": self.connections,
            "color": self.color,
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SectorNode":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            emoji=data.get("emoji", ""),
            tier=Tier.parse(data.get("tier", Tier.BASIC)),
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            connections=int(data.get("connections", 0)),
            color=data.get("color", "#6B7280"),
            metadata=SectorMetadata.from_dict(data.get("metadata")),
        )


@dataclass
class SectorRelationship:
    """
    A weighted edge between two sectors.

    A bidirectional edge is stored once under ``"{source_id}-{target_id}"``
    but counts in both directions for the adjacency matrix.
    """
    source_id: int
    target_id: int
    strength: float
    type: RelationshipType = RelationshipType.COLLABORATION
    description: str = ""
    bidirectional: bool = False
    weight: Optional[int] = None

    @property
    def key(self) -> str:
        return relationship_key(self.source_id, self.target_id)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "source_id": self.source_id,
            "target_id": self.target_id,
            "strength": self.strength,
            "type": self.type.value,
            "description": self.description,
            "bidirectional": self.bidirectional,
        }
        if self.weight is not None:
            result["weight"] = self.weight
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SectorRelationship":
        weight = data.get("weight")
        return cls(
            source_id=int(data.get("source_id", data.get("sourceId"))),
            target_id=int(data.get("target_id", data.get("targetId"))),
            strength=float(data["strength"]),
            type=RelationshipType(data.get("type", RelationshipType.COLLABORATION.value)),
            description=data.get("description", ""),
            bidirectional=bool(data.get("bidirectional", False)),
            weight=int(weight) if weight is not None else None,
        )


def relationship_key(source_id: int, target_id: int) -> str:
    return f"{source_id}-{target_id}"


# =============================================================================
# Derived structures
# =============================================================================

@dataclass(frozen=True)
class MatrixEntry:
    strength: float
    type: RelationshipType
    bidirectional: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strength": self.strength,
            "type": self.type.value,
            "bidirectional": self.bidirectional,
        }


#: source_id -> target_id -> MatrixEntry
RelationshipMatrix = Dict[int, Dict[int, MatrixEntry]]


@dataclass
class NetworkStats:
    """Aggregate network snapshot. Density is a percentage."""
    total_connections: int = 0
    avg_connections: float = 0.0
    network_density: float = 0.0
    max_connections: int = 0
    isolated_nodes: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_connections": self.total_connections,
            "avg_connections": round(self.avg_connections, 4),
            "network_density": round(self.network_density, 4),
            "max_connections": self.max_connections,
            "isolated_nodes": self.isolated_nodes,
        }


@dataclass
class DependencyMap:
    """Nodes a sector depends on, and nodes depending on it."""
    dependencies: List[SectorNode] = field(default_factory=list)
    dependents: List[SectorNode] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dependencies": [n.to_dict() for n in self.dependencies],
            "dependents": [n.to_dict() for n in self.dependents],
        }
