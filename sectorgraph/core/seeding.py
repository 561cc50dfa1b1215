"""
Ecosystem Seeding

Turns sector records fetched from the catalog into positioned graph nodes.

Usage:
    from sectorgraph.core.seeding import build_nodes
    nodes = build_nodes(records)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .models import SectorNode, SectorRecord, Tier


NODE_PALETTE = [
    "#3B82F6",
    "#EF4444",
    "#10B981",
    "#F59E0B",
    "#8B5CF6",
    "#06B6D4",
    "#F97316",
    "#84CC16",
    "#EC4899",
    "#6366F1",
]


@dataclass
class LayoutConfig:
    """Circular layout used for the initial node positions."""
    radius: float = 200.0
    center_x: float = 300.0
    center_y: float = 300.0


def tier_from_pricing(monthly: float) -> Tier:
    return Tier.from_monthly_price(monthly)


def node_color(sector_name: str) -> str:
    """Stable palette color derived from the sum of the name's code points."""
    code_sum = sum(ord(ch) for ch in sector_name)
    return NODE_PALETTE[code_sum % len(NODE_PALETTE)]


def build_nodes(
    records: Iterable[SectorRecord],
    layout: Optional[LayoutConfig] = None,
) -> List[SectorNode]:
    """
    Create one node per sector record, spaced evenly on a circle.

    Connections start at zero; the relationship store recomputes them as
    edges are added.
    """
    layout = layout or LayoutConfig()
    records = list(records)
    count = len(records)
    nodes: List[SectorNode] = []

    for index, record in enumerate(records):
        angle = (index * 2 * math.pi) / count
        nodes.append(SectorNode(
            id=record.id,
            name=record.name,
            emoji=record.emoji,
            tier=tier_from_pricing(record.metadata.pricing.monthly),
            x=math.cos(angle) * layout.radius + layout.center_x,
            y=math.sin(angle) * layout.radius + layout.center_y,
            connections=0,
            color=node_color(record.name),
            metadata=record.metadata,
        ))

    return nodes
