from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_CATEGORY = "General"


class Contact(BaseModel):
    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    category: str = DEFAULT_CATEGORY


class ContactCreate(BaseModel):
    # Required fields are checked by the store so a missing field yields the
    # same 400 message as an empty one.
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    category: Optional[str] = None


class ContactUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    category: Optional[str] = None

    def changes(self) -> dict:
        """Fields the caller actually sent with a non-null value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    contacts: int
