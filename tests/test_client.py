"""
Tests for the requests-based API client
"""
import json
from unittest.mock import MagicMock

import requests

from campus_marketplace_client import CampusMarketplaceAPI


def _response(status_code, payload=None, text=""):
    response = requests.Response()
    response.status_code = status_code
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    else:
        response._content = text.encode("utf-8")
    return response


def _client(response):
    session = MagicMock(spec=requests.Session)
    session.request.return_value = response
    return CampusMarketplaceAPI(base_url="http://api.test/api/", api_key="token", session=session), session


def test_send_message_posts_plain_text():
    created = {"id": 1, "fromUsername": "alice", "toUsername": "bob", "timestamp": "2026-03-01T09:00:00Z", "content": "hi"}
    api, session = _client(_response(200, created))

    message, error = api.send_message("alice", "bob", "hi")

    assert error is None
    assert message == created
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "http://api.test/api/messages/send"
    assert kwargs["params"] == {"fromUsername": "alice", "toUsername": "bob"}
    assert kwargs["data"] == b"hi"
    assert kwargs["headers"]["Content-Type"].startswith("text/plain")
    assert kwargs["headers"]["Authorization"] == "Bearer token"


def test_get_messages_between_users():
    api, session = _client(_response(200, []))

    messages, error = api.get_messages_between_users("alice", "bob")

    assert (messages, error) == ([], None)
    kwargs = session.request.call_args.kwargs
    assert kwargs["url"] == "http://api.test/api/messages/between"
    assert kwargs["params"] == {"username1": "alice", "username2": "bob"}


def test_http_error_is_returned_as_error_dict():
    api, _ = _client(_response(404, {"error": "not_found", "detail": "User mallory not found"}))

    messages, error = api.get_messages_between_users("alice", "mallory")

    assert messages == []
    assert error == {"status_code": 404, "message": "User mallory not found"}


def test_connection_error_is_returned_as_error_dict():
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = requests.ConnectionError("refused")
    api = CampusMarketplaceAPI(base_url="http://api.test/api", session=session)

    exists, error = api.user_exists("alice")

    assert exists is False
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_user_exists_quotes_username():
    api, session = _client(_response(200, True))

    exists, error = api.user_exists("a b/c")

    assert (exists, error) == (True, None)
    assert session.request.call_args.kwargs["url"] == "http://api.test/api/users/exists/a%20b%2Fc"


def test_register_user_sends_json():
    api, session = _client(_response(201, {"id": 3, "username": "erin", "email": None, "college": None}))

    user, error = api.register_user("erin", "pw")

    assert error is None
    assert user["username"] == "erin"
    assert session.request.call_args.kwargs["json"] == {
        "username": "erin", "password": "pw", "email": None, "college": None,
    }
