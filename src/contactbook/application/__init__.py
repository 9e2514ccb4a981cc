"""Application layer: use cases and ports. Depends only on domain."""

from contactbook.application.contact_service import DEFAULT_CONTACTS, ContactService
from contactbook.application.ports import ContactRepository

__all__ = [
    "DEFAULT_CONTACTS",
    "ContactRepository",
    "ContactService",
]
