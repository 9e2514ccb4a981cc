"""Domain entities: Contact."""

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Contact:
    """
    A person in the contact list.
    Immutable once created; the id is assigned at construction.
    """

    name: str
    email: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "email": self.email}
