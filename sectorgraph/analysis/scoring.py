"""
Presentation scoring strategies.

These weights and thresholds only shape dashboard rankings; they carry no
business meaning, so they live here as swappable objects rather than as
literals inside the analyzers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class InfluenceScoring:
    """
    Linear influence heuristic.

    influence = dependents * dependent_weight
              + connections * connection_weight
              + children * child_weight
    """
    dependent_weight: float = 2.0
    connection_weight: float = 1.0
    child_weight: float = 3.0

    def score(self, node: Any) -> float:
        return (
            node.dependent_count * self.dependent_weight
            + node.connections * self.connection_weight
            + len(node.children) * self.child_weight
        )


@dataclass(frozen=True)
class CriticalPathCriteria:
    """
    An edge is critical when it skips more than ``min_level_difference``
    hierarchy levels and is stronger than ``min_strength``.

    Only the ``candidate_limit`` strongest edges are considered.
    """
    min_level_difference: int = 1
    min_strength: float = 0.7
    candidate_limit: int = 15

    def is_critical(self, level_difference: int, strength: float) -> bool:
        return level_difference > self.min_level_difference and strength > self.min_strength
