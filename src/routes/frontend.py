"""
Server-rendered contact manager page.

The page never keeps its own copy of the contacts: every render fetches the
full list from the API, and every create/update/delete redirects back to the
page so the list is fetched again.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from fastapi import FastAPI, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..config import Settings
from ..contacts.client import ContactsClient, ContactsClientError
from ..contacts.views import (
    ALL_CATEGORIES,
    CATEGORY_CHOICES,
    category_filters,
    contact_count_label,
    empty_form,
    filter_by_category,
    group_by_category,
    validate_contact_form,
)

logger = logging.getLogger(__name__)

FRONTEND_ROOT = Path(__file__).resolve().parents[2] / "frontend"
TEMPLATES_DIR = FRONTEND_ROOT / "templates"
STATIC_DIR = FRONTEND_ROOT / "static"

FETCH_ERROR = "Error fetching contacts"
SAVE_ERROR = "Error saving contact"
DELETE_ERROR = "Error deleting contact"

templates: Optional[Jinja2Templates] = (
    Jinja2Templates(directory=str(TEMPLATES_DIR)) if TEMPLATES_DIR.exists() else None
)


def set_templates(new_templates: Jinja2Templates) -> None:
    global templates
    templates = new_templates


def _client(request: Request) -> ContactsClient:
    return request.app.state.contacts_client


def _redirect(message: str, category: str = ALL_CATEGORIES) -> RedirectResponse:
    params = {"message": message}
    if category and category != ALL_CATEGORIES:
        params["category"] = category
    return RedirectResponse(url=f"/?{urlencode(params)}", status_code=303)


def _render_page(
    request: Request,
    *,
    category: str = ALL_CATEGORIES,
    message: Optional[str] = None,
    show_form: bool = False,
    form: Optional[Dict[str, Any]] = None,
    editing_id: Optional[int] = None,
    status_code: int = 200,
) -> HTMLResponse:
    if templates is None:
        raise RuntimeError(f"Frontend templates not found in {TEMPLATES_DIR}")

    try:
        contacts = _client(request).list_contacts()
    except ContactsClientError as e:
        logger.error(f"Failed to fetch contacts for page render: {e.message}")
        contacts = []
        message = FETCH_ERROR

    selected = category or ALL_CATEGORIES
    visible = filter_by_category(contacts, selected)
    context = {
        "contacts": contacts,
        "count_label": contact_count_label(len(contacts)),
        "categories": category_filters(contacts),
        "selected_category": selected,
        "visible_contacts": visible,
        "grouped_contacts": group_by_category(visible) if selected == ALL_CATEGORIES else None,
        "show_form": show_form,
        "form": form or empty_form(),
        "editing_id": editing_id,
        "category_choices": CATEGORY_CHOICES,
        "message": message,
        "message_kind": "error" if message and ("Error" in message or "Please" in message) else "success",
    }
    return templates.TemplateResponse(request, "index.html", context, status_code=status_code)


def home(
    request: Request,
    category: str = Query(ALL_CATEGORIES),
    form: Optional[str] = Query(None),
    edit: Optional[str] = Query(None),
    message: Optional[str] = Query(None),
):
    if edit is not None:
        try:
            contact_id = int(edit)
            contact = _client(request).get_contact(contact_id)
        except ValueError:
            logger.warning(f"Ignoring non-numeric contact id '{edit}' for editing")
            return _render_page(request, category=category, message=FETCH_ERROR)
        except ContactsClientError as e:
            logger.warning(f"Could not load contact {edit} for editing: {e.message}")
            return _render_page(request, category=category, message=FETCH_ERROR)
        fields = {key: contact.get(key, "") for key in ("name", "phone", "email", "category")}
        return _render_page(
            request,
            category=category,
            message=message,
            show_form=True,
            form=fields,
            editing_id=contact_id,
        )

    return _render_page(request, category=category, message=message, show_form=form == "new")


def _form_data(name: str, phone: str, email: str, category: str) -> Dict[str, str]:
    return {
        "name": name.strip(),
        "phone": phone.strip(),
        "email": email.strip(),
        "category": category.strip() or "General",
    }


def create_contact(
    request: Request,
    name: str = Form(""),
    phone: str = Form(""),
    email: str = Form(""),
    category: str = Form("General"),
):
    data = _form_data(name, phone, email, category)
    problems = validate_contact_form(data)
    if problems:
        return _render_page(request, message=problems[0], show_form=True, form=data)

    try:
        _client(request).create_contact(data)
    except ContactsClientError as e:
        logger.error(f"Failed to create contact: {e.message}")
        return _render_page(request, message=SAVE_ERROR, show_form=True, form=data)
    return _redirect("Contact added successfully!")


def update_contact(
    request: Request,
    contact_id: int,
    name: str = Form(""),
    phone: str = Form(""),
    email: str = Form(""),
    category: str = Form("General"),
):
    data = _form_data(name, phone, email, category)
    problems = validate_contact_form(data)
    if problems:
        return _render_page(
            request, message=problems[0], show_form=True, form=data, editing_id=contact_id
        )

    try:
        _client(request).update_contact(contact_id, data)
    except ContactsClientError as e:
        logger.error(f"Failed to update contact {contact_id}: {e.message}")
        return _render_page(
            request, message=SAVE_ERROR, show_form=True, form=data, editing_id=contact_id
        )
    return _redirect("Contact updated successfully!")


def delete_contact(request: Request, contact_id: int, category: str = Form(ALL_CATEGORIES)):
    try:
        _client(request).delete_contact(contact_id)
    except ContactsClientError as e:
        logger.error(f"Failed to delete contact {contact_id}: {e.message}")
        return _render_page(request, category=category, message=DELETE_ERROR)
    return _redirect("Contact deleted successfully!", category=category)


def register_routes(app: FastAPI) -> None:
    # Sync handlers run in the threadpool; the client calls back into this app.
    app.add_api_route("/", home, methods=["GET"], response_class=HTMLResponse, include_in_schema=False)
    app.add_api_route("/contacts", create_contact, methods=["POST"], include_in_schema=False)
    app.add_api_route("/contacts/{contact_id}", update_contact, methods=["POST"], include_in_schema=False)
    app.add_api_route(
        "/contacts/{contact_id}/delete", delete_contact, methods=["POST"], include_in_schema=False
    )


def setup_app(app: FastAPI, client: Optional[ContactsClient] = None, api_url: Optional[str] = None) -> None:
    if client is None:
        client = ContactsClient(api_url or Settings().contacts_api_url)
    app.state.contacts_client = client
    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    register_routes(app)
    logger.info(f"Frontend enabled, contacts API at {client.base_url}")
