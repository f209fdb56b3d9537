"""
Tests for the message endpoints
"""
from datetime import datetime, timezone

from campus_marketplace_api.app.schemas.message import MessageRead


def _send(client, sender, recipient, content):
    return client.post(
        "/api/messages/send",
        params={"fromUsername": sender, "toUsername": recipient},
        content=content.encode("utf-8"),
        headers={"Content-Type": "text/plain"},
    )


def _between(client, first, second):
    return client.get("/api/messages/between", params={"username1": first, "username2": second})


def test_send_and_fetch_scenario(client, users):
    assert _between(client, "alice", "bob").json() == []

    before = datetime.now(timezone.utc)
    response = _send(client, "alice", "bob", "hi")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"id", "fromUsername", "toUsername", "timestamp", "content"}
    assert isinstance(body["id"], int)
    assert body["fromUsername"] == "alice"
    assert body["toUsername"] == "bob"
    assert body["content"] == "hi"
    assert MessageRead.model_validate(body).timestamp >= before

    conversation = _between(client, "alice", "bob")
    assert conversation.status_code == 200
    assert conversation.json() == [body]


def test_conversation_order_and_symmetry(client, users):
    sent = [
        _send(client, "alice", "bob", "first").json(),
        _send(client, "bob", "alice", "second").json(),
        _send(client, "alice", "bob", "third").json(),
    ]

    forward = _between(client, "alice", "bob").json()
    backward = _between(client, "bob", "alice").json()

    assert [m["content"] for m in forward] == ["first", "second", "third"]
    assert forward == sent
    assert backward == forward


def test_body_is_sent_verbatim(client, users):
    content = '  {"not": "json"}  \nsecond line ✓'
    response = _send(client, "alice", "bob", content)
    assert response.json()["content"] == content


def test_unknown_sender_returns_404(client, users, message_count):
    response = _send(client, "mallory", "bob", "hi")

    assert response.status_code == 404
    assert response.json() == {"error": "not_found", "detail": "Sender user mallory not found"}
    assert message_count() == 0


def test_unknown_recipient_returns_404(client, users):
    response = _send(client, "alice", "mallory", "hi")

    assert response.status_code == 404
    assert response.json()["detail"] == "Receiver user mallory not found"


def test_fetch_with_unknown_user_returns_404(client, users):
    response = _between(client, "alice", "mallory")

    assert response.status_code == 404
    assert response.json() == {"error": "not_found", "detail": "User mallory not found"}


def test_missing_query_parameter_returns_422(client, users):
    response = client.get("/api/messages/between", params={"username1": "alice"})

    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "validation_error"
    assert "username2" in body["detail"]


def test_blank_username_returns_422(client, users):
    response = _between(client, "alice", "   ")

    assert response.status_code == 422
    assert response.json() == {
        "error": "validation_error",
        "detail": "Parameter 'username2' must not be empty",
    }


def test_empty_body_returns_422(client, users, message_count):
    response = _send(client, "alice", "bob", "")

    assert response.status_code == 422
    assert response.json()["error"] == "validation_error"
    assert message_count() == 0


def test_non_utf8_body_returns_422(client, users, message_count):
    response = client.post(
        "/api/messages/send",
        params={"fromUsername": "alice", "toUsername": "bob"},
        content=b"\xff\xfe\xfa",
        headers={"Content-Type": "text/plain"},
    )

    assert response.status_code == 422
    assert response.json() == {"error": "validation_error", "detail": "Message body must be UTF-8 text"}
    assert message_count() == 0
