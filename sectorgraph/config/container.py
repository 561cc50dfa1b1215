"""
Dependency Injection Container

Wires the sector source, store, generator and analyzers into a service.
"""

from dataclasses import dataclass, field
from typing import Optional

from .settings import Settings

from sectorgraph.adapters.console_display import ConsoleDisplay
from sectorgraph.adapters.sector_source import JsonFileSectorSource, SectorApiClient
from sectorgraph.analysis import (
    CriticalPathCriteria,
    HierarchyAnalyzer,
    InfluenceScoring,
    MatrixAnalyzer,
)
from sectorgraph.generation import SynergyGenerator
from sectorgraph.repositories import InMemoryRelationshipStore
from sectorgraph.services import SectorRelationshipService, SectorSource


@dataclass
class Container:
    """
    Dependency injection container.

    One container means one relationship store; build a new container for
    an isolated session.
    """
    api_url: str = "http://localhost:5000"
    api_timeout: float = 10.0
    input_path: Optional[str] = None
    seed: Optional[int] = None
    min_strength: float = 0.3

    _store: Optional[InMemoryRelationshipStore] = field(default=None, repr=False)
    _service: Optional[SectorRelationshipService] = field(default=None, repr=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Container":
        """Create container from settings."""
        return cls(
            api_url=settings.api_url,
            api_timeout=settings.api_timeout,
            seed=settings.seed,
            min_strength=settings.min_strength,
        )

    def relationship_store(self) -> InMemoryRelationshipStore:
        """Get the relationship store singleton for this container."""
        if self._store is None:
            self._store = InMemoryRelationshipStore()
        return self._store

    def sector_source(self) -> SectorSource:
        if self.input_path:
            return JsonFileSectorSource(self.input_path)
        return SectorApiClient(self.api_url, timeout=self.api_timeout)

    def synergy_generator(self) -> SynergyGenerator:
        return SynergyGenerator(seed=self.seed, min_strength=self.min_strength)

    def relationship_service(self) -> SectorRelationshipService:
        if self._service is None:
            store = self.relationship_store()
            self._service = SectorRelationshipService(
                store=store,
                source=self.sector_source(),
                generator=self.synergy_generator(),
                hierarchy=HierarchyAnalyzer(
                    store,
                    scoring=InfluenceScoring(),
                    criteria=CriticalPathCriteria(),
                ),
                matrix=MatrixAnalyzer(store),
            )
        return self._service

    def display_service(self) -> ConsoleDisplay:
        """Get console display adapter."""
        return ConsoleDisplay()

    def close(self) -> None:
        """Release the session state."""
        if self._store is not None:
            self._store.clear()
        self._store = None
        self._service = None
