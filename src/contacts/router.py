from __future__ import annotations

from typing import List

from fastapi import APIRouter, Body, Depends, Path, Request, status

from .errors import ContactNotFoundError
from .schemas import Contact, ContactCreate, ContactUpdate, MessageResponse
from .store import ContactStore

router = APIRouter(prefix="/api", tags=["Contacts"])


def get_store(request: Request) -> ContactStore:
    return request.app.state.store


def _parse_contact_id(raw: str) -> int:
    # An id that is not a number can never have been assigned.
    try:
        return int(raw)
    except ValueError:
        raise ContactNotFoundError(raw)


@router.get("", response_model=MessageResponse, summary="API banner")
async def api_root() -> MessageResponse:
    return MessageResponse(message="Contact Manager API")


@router.get("/contacts", response_model=List[Contact], summary="List all contacts")
async def list_contacts(store: ContactStore = Depends(get_store)) -> List[Contact]:
    return await store.list_contacts()


@router.get("/contacts/{contact_id}", response_model=Contact, summary="Get a contact")
async def get_contact(
    contact_id: str = Path(..., description="Contact identifier."),
    store: ContactStore = Depends(get_store),
) -> Contact:
    return await store.get_contact(_parse_contact_id(contact_id))


@router.post(
    "/contacts",
    status_code=status.HTTP_201_CREATED,
    response_model=Contact,
    summary="Create a contact",
)
async def create_contact(
    payload: ContactCreate = Body(...),
    store: ContactStore = Depends(get_store),
) -> Contact:
    return await store.create_contact(
        name=payload.name,
        phone=payload.phone,
        email=payload.email,
        category=payload.category,
    )


@router.put("/contacts/{contact_id}", response_model=Contact, summary="Update a contact")
async def update_contact(
    contact_id: str = Path(..., description="Contact identifier."),
    payload: ContactUpdate = Body(...),
    store: ContactStore = Depends(get_store),
) -> Contact:
    return await store.update_contact(_parse_contact_id(contact_id), payload.changes())


@router.delete("/contacts/{contact_id}", response_model=MessageResponse, summary="Delete a contact")
async def delete_contact(
    contact_id: str = Path(..., description="Contact identifier."),
    store: ContactStore = Depends(get_store),
) -> MessageResponse:
    await store.delete_contact(_parse_contact_id(contact_id))
    return MessageResponse(message="Contact deleted successfully")


@router.get("/categories", response_model=List[str], summary="List distinct categories")
async def list_categories(store: ContactStore = Depends(get_store)) -> List[str]:
    return await store.list_categories()
