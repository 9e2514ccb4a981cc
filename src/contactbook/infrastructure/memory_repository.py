"""In-memory implementation of ContactRepository (no DB)."""

import threading

from contactbook.domain import Contact


class InMemoryContactRepository:
    """Stores contacts in memory. Order preserved by insertion.
    Every operation runs under one lock; reads return copies so callers
    never hold the lock while rendering.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._contacts: list[Contact] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._contacts)

    def list_all(self) -> list[Contact]:
        with self._lock:
            return list(self._contacts)

    def append(self, name: str, email: str) -> Contact:
        contact = Contact(name=name, email=email)
        with self._lock:
            self._contacts.append(contact)
        return contact

    def search(self, query: str) -> list[Contact]:
        with self._lock:
            return [
                contact
                for contact in self._contacts
                if query in contact.name or query in contact.email
            ]
