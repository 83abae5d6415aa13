from __future__ import annotations

from fastapi import APIRouter, Depends

from ..contacts.router import get_store
from ..contacts.schemas import HealthResponse
from ..contacts.store import ContactStore

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(store: ContactStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(status="ok", contacts=await store.count())
