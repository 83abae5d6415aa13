"""
HTTP client the UI uses to talk to the contacts API.

Every call goes over HTTP so the page always reflects what the API returns;
nothing is cached between calls.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class ContactsClientError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ContactsClient:
    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 5.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def list_contacts(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/contacts")

    def get_contact(self, contact_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/contacts/{contact_id}")

    def create_contact(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/contacts", json=data)

    def update_contact(self, contact_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/contacts/{contact_id}", json=data)

    def delete_contact(self, contact_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/contacts/{contact_id}")

    def list_categories(self) -> List[str]:
        return self._request("GET", "/categories")

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ContactsClientError(f"Request to contacts API failed: {e}") from e

        if not response.ok:
            message = _error_message(response)
            logger.warning(f"{method} {url} -> {response.status_code}: {message}")
            raise ContactsClientError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise ContactsClientError(
                "Contacts API returned an invalid response", status_code=response.status_code
            ) from e


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        return str(body.get("message") or body.get("detail") or f"HTTP {response.status_code}")
    return f"HTTP {response.status_code}"
