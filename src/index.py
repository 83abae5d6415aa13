from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .contacts import SAMPLE_CONTACTS, ContactStore
from .contacts import router as contacts_router
from .contacts.client import ContactsClient
from .middleware.error_handler import register_exception_handlers
from .middleware.request_logging import LoggingMiddleware
from .routes import frontend
from .routes.system import router as system_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ContactStore] = None,
    client: Optional[ContactsClient] = None,
) -> FastAPI:
    """Build the Contact Manager application.

    The store lives on ``app.state.store``; handlers reach it through the
    ``get_store`` dependency rather than a module global.
    """
    settings = settings or Settings.from_env()
    if store is None:
        store = ContactStore(SAMPLE_CONTACTS if settings.seed_contacts else None)

    app = FastAPI(title="Contact Manager API", version="1.0.0")
    app.state.settings = settings
    app.state.store = store

    register_exception_handlers(app)

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(system_router)
    app.include_router(contacts_router)

    if settings.enable_frontend:
        if client is None:
            client = ContactsClient(settings.contacts_api_url, timeout=settings.api_timeout)
        frontend.setup_app(app, client=client)

    logger.info(f"Contact Manager ready, next contact id is {store.next_id}")
    return app


app = create_app()
