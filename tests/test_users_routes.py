"""Tests for the profile and address endpoints."""

from __future__ import annotations

from datetime import timedelta

import pytest
from flask_jwt_extended import create_access_token

from models import db
from models.address import Address
from models.user import User


def _auth_headers(app, user_id: int) -> dict[str, str]:
    with app.app_context():
        token = create_access_token(identity=str(user_id))
    return {"Authorization": f"Bearer {token}"}


def _register(client, payload: dict) -> dict:
    response = client.post("/auth/register", json=payload)
    assert response.status_code == 201
    return response.get_json()["data"]


@pytest.fixture()
def alice(client, registration_payload) -> dict:
    return _register(client, registration_payload)


@pytest.fixture()
def bob(client, registration_payload) -> dict:
    payload = dict(registration_payload, email="bob@x.com", firstName="Bob")
    return _register(client, payload)


def test_requires_token(client, alice):
    response = client.get("/users/profile")

    assert response.status_code == 401
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["message"]


def test_rejects_invalid_token(client, alice):
    response = client.get(
        "/users/profile", headers={"Authorization": "Bearer not-a-jwt"}
    )

    assert response.status_code == 401
    assert response.get_json()["success"] is False


def test_rejects_expired_token(app, client, alice):
    with app.app_context():
        token = create_access_token(
            identity=str(alice["id"]), expires_delta=timedelta(seconds=-1)
        )

    response = client.get("/users/profile", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.get_json()["message"] == "Token has expired"


def test_profile_returns_self(app, client, alice):
    response = client.get("/users/profile", headers=_auth_headers(app, alice["id"]))

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["id"] == alice["id"]
    assert "password_hash" not in data


def test_get_other_user(app, client, alice, bob):
    response = client.get(f"/users/{bob['id']}", headers=_auth_headers(app, alice["id"]))

    assert response.status_code == 200
    assert response.get_json()["data"]["email"] == "bob@x.com"


def test_get_missing_user_is_internal_error(app, client, alice):
    response = client.get("/users/9999", headers=_auth_headers(app, alice["id"]))

    assert response.status_code == 500
    assert response.get_json()["message"] == "User not found"


def test_update_self(app, client, alice):
    response = client.put(
        f"/users/{alice['id']}",
        json={"firstName": "Alicia", "isSeller": True},
        headers=_auth_headers(app, alice["id"]),
    )

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["firstName"] == "Alicia"
    assert data["isSeller"] is False


def test_update_other_user_forbidden(app, client, alice, bob):
    response = client.put(
        f"/users/{bob['id']}",
        json={"firstName": "Mallory"},
        headers=_auth_headers(app, alice["id"]),
    )

    assert response.status_code == 403
    assert response.get_json()["message"] == "Not authorized to update this user"
    with app.app_context():
        assert db.session.get(User, bob["id"]).first_name == "Bob"


def test_delete_self(app, client, alice):
    response = client.delete(f"/users/{alice['id']}", headers=_auth_headers(app, alice["id"]))

    assert response.status_code == 200
    assert response.get_json() == {"success": True, "message": "User deleted successfully"}
    with app.app_context():
        assert db.session.get(User, alice["id"]) is None
        assert Address.query.count() == 0


def test_delete_other_user_forbidden(app, client, alice, bob):
    response = client.delete(f"/users/{bob['id']}", headers=_auth_headers(app, alice["id"]))

    assert response.status_code == 403


def test_seller_status(app, client, alice):
    response = client.put(
        f"/users/{alice['id']}/seller-status",
        json={"isSellerStatus": True},
        headers=_auth_headers(app, alice["id"]),
    )

    assert response.status_code == 200
    assert response.get_json()["data"]["isSeller"] is True


@pytest.mark.parametrize("value", ["true", 1, None])
def test_seller_status_requires_boolean(app, client, alice, value):
    response = client.put(
        f"/users/{alice['id']}/seller-status",
        json={"isSellerStatus": value},
        headers=_auth_headers(app, alice["id"]),
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == "isSellerStatus must be a boolean value"


def test_add_address(app, client, alice, address_payload):
    response = client.post(
        f"/users/{alice['id']}/addresses",
        json=dict(address_payload, cityName="Second"),
        headers=_auth_headers(app, alice["id"]),
    )

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert [address["cityName"] for address in data["addresses"]] == ["A", "Second"]
    assert data["defaultAddress"]["id"] == alice["defaultAddress"]["id"]


def test_add_address_invalid_fields(app, client, alice):
    response = client.post(
        f"/users/{alice['id']}/addresses",
        json={"cityName": "Only city"},
        headers=_auth_headers(app, alice["id"]),
    )

    assert response.status_code == 500
    assert response.get_json()["success"] is False


def test_add_address_to_other_user_forbidden(app, client, alice, bob, address_payload):
    response = client.post(
        f"/users/{bob['id']}/addresses",
        json=address_payload,
        headers=_auth_headers(app, alice["id"]),
    )

    assert response.status_code == 403


def test_update_address(app, client, alice):
    address_id = alice["addresses"][0]["id"]

    response = client.put(
        f"/users/{alice['id']}/addresses/{address_id}",
        json={"addressText": "New text"},
        headers=_auth_headers(app, alice["id"]),
    )

    assert response.status_code == 200
    address = response.get_json()["data"]["addresses"][0]
    assert address["addressText"] == "New text"
    assert address["cityName"] == "A"


def test_update_foreign_address_fails(app, client, alice, bob):
    foreign_id = bob["addresses"][0]["id"]

    response = client.put(
        f"/users/{alice['id']}/addresses/{foreign_id}",
        json={"addressText": "Stolen"},
        headers=_auth_headers(app, alice["id"]),
    )

    assert response.status_code == 500
    assert response.get_json()["message"] == "Address not found for this user"


def test_set_default_address(app, client, alice, address_payload):
    headers = _auth_headers(app, alice["id"])
    added = client.post(
        f"/users/{alice['id']}/addresses",
        json=dict(address_payload, cityName="Second"),
        headers=headers,
    ).get_json()["data"]
    second_id = added["addresses"][-1]["id"]

    response = client.put(
        f"/users/{alice['id']}/addresses/{second_id}/default", headers=headers
    )

    assert response.status_code == 200
    assert response.get_json()["data"]["defaultAddress"]["id"] == second_id


def test_remove_default_address_reassigns(app, client, alice, address_payload):
    headers = _auth_headers(app, alice["id"])
    first_id = alice["defaultAddress"]["id"]
    client.post(
        f"/users/{alice['id']}/addresses",
        json=dict(address_payload, cityName="Second"),
        headers=headers,
    )

    response = client.delete(
        f"/users/{alice['id']}/addresses/{first_id}", headers=headers
    )

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert len(data["addresses"]) == 1
    assert data["defaultAddress"]["id"] == data["addresses"][0]["id"]
    assert data["defaultAddress"]["id"] != first_id


def test_remove_last_address_clears_default(app, client, alice):
    response = client.delete(
        f"/users/{alice['id']}/addresses/{alice['defaultAddress']['id']}",
        headers=_auth_headers(app, alice["id"]),
    )

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["addresses"] == []
    assert data["defaultAddress"] is None


def test_remove_address_of_other_user_forbidden(app, client, alice, bob):
    response = client.delete(
        f"/users/{bob['id']}/addresses/{bob['addresses'][0]['id']}",
        headers=_auth_headers(app, alice["id"]),
    )

    assert response.status_code == 403
    assert response.get_json()["message"] == "Not authorized to remove this address"
