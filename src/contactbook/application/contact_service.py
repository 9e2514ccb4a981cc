"""Contact list, creation, and search."""

import logging
from collections.abc import Iterable

from contactbook.application.ports import ContactRepository
from contactbook.domain import Contact

logger = logging.getLogger(__name__)

DEFAULT_CONTACTS: tuple[tuple[str, str], ...] = (
    ("John", "john@email.com"),
    ("Jane", "jane@email.com"),
)


class ContactService:
    """Use cases over a ContactRepository. Holds no state of its own."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def list_contacts(self) -> list[Contact]:
        """Return all contacts in creation order."""
        return self._repo.list_all()

    def create_contact(self, name: str, email: str) -> Contact:
        """Store a new contact. Name and email are taken as-is, empty allowed."""
        contact = self._repo.append(name, email)
        logger.info("Created contact %s", contact.id)
        return contact

    def search_contacts(self, query: str) -> list[Contact]:
        """Return contacts whose name or email contains query.

        Matching is case-sensitive and the query is not stripped, so an empty
        query returns every contact.
        """
        return self._repo.search(query)

    def seed(self, contacts: Iterable[tuple[str, str]] = DEFAULT_CONTACTS) -> None:
        """Append (name, email) pairs in order. Defaults to John and Jane."""
        for name, email in contacts:
            self._repo.append(name, email)
