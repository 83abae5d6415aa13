from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, List, Mapping, Optional

from .errors import ContactNotFoundError, ContactValidationError
from .schemas import DEFAULT_CATEGORY, Contact

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "phone", "email")
EDITABLE_FIELDS = ("name", "phone", "email", "category")

SAMPLE_CONTACTS: List[Dict[str, object]] = [
    {
        "id": 1,
        "name": "John Doe",
        "phone": "+1-234-567-8900",
        "email": "john.doe@example.com",
        "category": "Work",
    },
    {
        "id": 2,
        "name": "Jane Smith",
        "phone": "+1-234-567-8901",
        "email": "jane.smith@example.com",
        "category": "Personal",
    },
    {
        "id": 3,
        "name": "Bob Wilson",
        "phone": "+1-234-567-8902",
        "email": "bob.wilson@example.com",
        "category": "Work",
    },
]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class ContactStore:
    """In-memory, insertion-ordered collection of contacts.

    Ids come from a counter that only moves forward, so an id is never
    handed out twice during the store's lifetime even after deletes.
    """

    def __init__(self, seed: Optional[Iterable[Mapping[str, object]]] = None) -> None:
        self._lock = asyncio.Lock()
        self._contacts: List[Contact] = []
        self._next_id = 1
        self._load(seed or [])

    def _load(self, seed: Iterable[Mapping[str, object]]) -> None:
        self._contacts = [Contact(**record) for record in seed]
        highest = max((contact.id for contact in self._contacts), default=0)
        self._next_id = highest + 1

    async def reset(self, seed: Optional[Iterable[Mapping[str, object]]] = None) -> None:
        async with self._lock:
            self._load(seed or [])
            logger.info(f"Contact store reset with {len(self._contacts)} contact(s)")

    @property
    def next_id(self) -> int:
        return self._next_id

    async def count(self) -> int:
        async with self._lock:
            return len(self._contacts)

    async def list_contacts(self) -> List[Contact]:
        async with self._lock:
            return [contact.model_copy() for contact in self._contacts]

    async def get_contact(self, contact_id: int) -> Contact:
        async with self._lock:
            return self._find(contact_id).model_copy()

    async def create_contact(
        self,
        name: Optional[str],
        phone: Optional[str],
        email: Optional[str],
        category: Optional[str] = None,
    ) -> Contact:
        if any(_is_blank(value) for value in (name, phone, email)):
            raise ContactValidationError()

        async with self._lock:
            contact = Contact(
                id=self._next_id,
                name=name,
                phone=phone,
                email=email,
                category=DEFAULT_CATEGORY if _is_blank(category) else category,
            )
            self._next_id += 1
            self._contacts.append(contact)
            logger.info(f"Created contact {contact.id} in category '{contact.category}'")
            return contact.model_copy()

    async def update_contact(self, contact_id: int, changes: Mapping[str, Optional[str]]) -> Contact:
        """Overwrite only the fields present in ``changes``.

        ``None`` values mean "not sent" and are skipped. An empty name, phone
        or email is rejected rather than silently ignored; an empty category
        falls back to the default category the same way create does.
        """
        updates = {
            key: value
            for key, value in changes.items()
            if key in EDITABLE_FIELDS and value is not None
        }
        if "category" in updates and _is_blank(updates["category"]):
            updates["category"] = DEFAULT_CATEGORY

        async with self._lock:
            contact = self._find(contact_id)
            blank_required = [key for key in REQUIRED_FIELDS if key in updates and _is_blank(updates[key])]
            if blank_required:
                raise ContactValidationError(
                    f"Field(s) cannot be empty: {', '.join(blank_required)}"
                )
            for key, value in updates.items():
                setattr(contact, key, value)
            logger.info(f"Updated contact {contact_id}: {', '.join(sorted(updates)) or 'no changes'}")
            return contact.model_copy()

    async def delete_contact(self, contact_id: int) -> Contact:
        async with self._lock:
            contact = self._find(contact_id)
            self._contacts.remove(contact)
            logger.info(f"Deleted contact {contact_id}")
            return contact

    async def list_categories(self) -> List[str]:
        async with self._lock:
            return list(dict.fromkeys(contact.category for contact in self._contacts))

    def _find(self, contact_id: int) -> Contact:
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        raise ContactNotFoundError(contact_id)
