from .relationship_service import SectorRelationshipService, SectorSource

__all__ = [
    "SectorRelationshipService",
    "SectorSource",
]
