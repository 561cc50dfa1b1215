"""
Sector Graph

In-memory analytics for the HSOMNI9000 sector relationship network: a
relationship store with derived matrix and statistics, plus hierarchy,
influence, critical-path and matrix views for the dashboards.

Modules:
    core          -- sector records, nodes, relationships, seeding
    repositories  -- in-memory relationship store
    analysis      -- network statistics, hierarchy, matrix, scoring strategies
    generation    -- synthetic synergy relationships for demo data
    adapters      -- sector sources (API, JSON file) and console display
    services      -- session facade consumed by the dashboards
    config        -- settings and dependency injection container
"""

__version__ = "0.1.0"
