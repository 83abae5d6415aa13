from __future__ import annotations


class ContactError(Exception):
    """Base class for contact store errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ContactValidationError(ContactError):
    status_code = 400

    def __init__(self, message: str = "Name, phone, and email are required"):
        super().__init__(message)


class ContactNotFoundError(ContactError):
    status_code = 404

    def __init__(self, contact_id: object = None, message: str = "Contact not found"):
        self.contact_id = contact_id
        super().__init__(message)
