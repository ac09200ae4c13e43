from __future__ import annotations

from abc import ABC, abstractmethod


class IAttractionMapper(ABC):
    """Port for looking up the city an attraction is located in."""

    @abstractmethod
    def resolve(self, attraction_name: str) -> str | None:
        """Return the city identifier for an attraction, or None if unknown."""
