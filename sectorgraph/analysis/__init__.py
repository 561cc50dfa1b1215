"""
Analysis Package

Network statistics, dependency hierarchy, matrix view and the scoring
strategies that drive the dashboard rankings.
"""

from .statistics import NetworkStatisticsCalculator, build_network_graph
from .scoring import InfluenceScoring, CriticalPathCriteria
from .hierarchy import (
    HierarchyAnalyzer,
    HierarchyNode,
    HierarchyStructure,
    HierarchyStats,
    TierGroup,
    InfluenceEntry,
    CriticalPath,
)
from .matrix import (
    MatrixAnalyzer,
    MatrixViewConfig,
    MatrixView,
    MatrixCell,
    relationship_color,
)

__all__ = [
    "NetworkStatisticsCalculator",
    "build_network_graph",
    "InfluenceScoring",
    "CriticalPathCriteria",
    "HierarchyAnalyzer",
    "HierarchyNode",
    "HierarchyStructure",
    "HierarchyStats",
    "TierGroup",
    "InfluenceEntry",
    "CriticalPath",
    "MatrixAnalyzer",
    "MatrixViewConfig",
    "MatrixView",
    "MatrixCell",
    "relationship_color",
]
