from unittest.mock import MagicMock

import pytest
import requests

from src.contacts.client import ContactsClient, ContactsClientError


def _response(status_code=200, body=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def api(session):
    return ContactsClient("http://api.test/api/", session=session, timeout=2)


def test_list_contacts(api, session):
    session.request.return_value = _response(body=[{"id": 1}])
    assert api.list_contacts() == [{"id": 1}]
    session.request.assert_called_once_with("GET", "http://api.test/api/contacts", timeout=2)


def test_create_sends_json(api, session):
    session.request.return_value = _response(201, {"id": 4})
    data = {"name": "A", "phone": "1", "email": "a@a.com", "category": "General"}
    assert api.create_contact(data) == {"id": 4}
    session.request.assert_called_once_with(
        "POST", "http://api.test/api/contacts", timeout=2, json=data
    )


def test_update_and_delete_paths(api, session):
    session.request.return_value = _response(body={"message": "ok"})
    api.update_contact(3, {"name": "B"})
    api.delete_contact(3)
    calls = [c.args for c in session.request.call_args_list]
    assert calls == [
        ("PUT", "http://api.test/api/contacts/3"),
        ("DELETE", "http://api.test/api/contacts/3"),
    ]


def test_list_categories(api, session):
    session.request.return_value = _response(body=["Work"])
    assert api.list_categories() == ["Work"]


def test_error_response_carries_server_message(api, session):
    session.request.return_value = _response(404, {"message": "Contact not found"})
    with pytest.raises(ContactsClientError) as exc_info:
        api.get_contact(9)
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Contact not found"


def test_error_response_without_json(api, session):
    session.request.return_value = _response(502, ValueError("no json"), text="Bad Gateway")
    with pytest.raises(ContactsClientError) as exc_info:
        api.list_contacts()
    assert exc_info.value.message == "Bad Gateway"


def test_transport_failure_is_wrapped(api, session):
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(ContactsClientError) as exc_info:
        api.list_contacts()
    assert exc_info.value.status_code is None


def test_invalid_json_success_body(api, session):
    session.request.return_value = _response(200, ValueError("bad"))
    with pytest.raises(ContactsClientError):
        api.list_contacts()
