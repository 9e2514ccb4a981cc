"""
Contactbook core: clean-architecture layout.

- domain: entities (Contact). No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository).
- infrastructure: adapters (InMemoryContactRepository).
"""

from contactbook.application import DEFAULT_CONTACTS, ContactRepository, ContactService
from contactbook.domain import Contact
from contactbook.infrastructure import InMemoryContactRepository

__all__ = [
    "DEFAULT_CONTACTS",
    "Contact",
    "ContactRepository",
    "ContactService",
    "InMemoryContactRepository",
]
