"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class ContactRepository(Protocol):
    """Stores contacts in insertion order and answers substring queries."""

    def list_all(self) -> list[Contact]:
        """Return a copy of all contacts in insertion order."""
        ...

    def append(self, name: str, email: str) -> Contact:
        """Create a contact with a fresh id, store it last and return it."""
        ...

    def search(self, query: str) -> list[Contact]:
        """Return contacts whose name or email contains query (case-sensitive)."""
        ...
