"""Domain layer: entities. No dependencies on outer layers."""

from contactbook.domain.entities import Contact

__all__ = ["Contact"]
