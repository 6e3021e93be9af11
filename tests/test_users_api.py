"""HTTP contract of the /api/utenti routes."""

from conftest import OUT_OF_RANGE_ID, user_payload


def create_user(client, **overrides):
    response = client.post("/api/utenti/create-utente", json=user_payload(**overrides))
    assert response.status_code == 201
    return response.json()


def test_create_user_returns_created_record(client):
    body = create_user(client)
    assert isinstance(body["id"], int)
    assert body["email"] == "mario.rossi@example.com"
    assert body["role"] == "CLIENTE"
    assert "password" not in body


def test_created_ids_are_distinct(client):
    first = create_user(client, email="a@example.com")
    second = create_user(client, email="b@example.com")
    assert first["id"] != second["id"]


def test_create_duplicate_email_is_bad_request(client):
    create_user(client)
    response = client.post("/api/utenti/create-utente", json=user_payload())
    assert response.status_code == 400
    assert response.content == b""


def test_create_with_future_registration_date_is_bad_request(client, tomorrow):
    response = client.post(
        "/api/utenti/create-utente",
        json=user_payload(registration_date=tomorrow.isoformat()),
    )
    assert response.status_code == 400
    assert response.content == b""
    assert client.get("/api/utenti/get-utenti").json() == []


def test_create_with_unknown_subscription_is_bad_request(client):
    response = client.post("/api/utenti/create-utente", json=user_payload(subscription_id=99))
    assert response.status_code == 400


def test_list_users(client):
    create_user(client, email="a@example.com")
    create_user(client, email="b@example.com")
    response = client.get("/api/utenti/get-utenti")
    assert response.status_code == 200
    assert [u["email"] for u in response.json()] == ["a@example.com", "b@example.com"]


def test_find_user_by_id(client):
    created = create_user(client)
    response = client.get(f"/api/utenti/find-utente-by-id/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_find_unknown_user_is_not_found(client):
    response = client.get("/api/utenti/find-utente-by-id/404")
    assert response.status_code == 404
    assert response.content == b""


def test_delete_user(client):
    created = create_user(client)
    response = client.delete(f"/api/utenti/delete-utente/{created['id']}")
    assert response.status_code == 200
    assert response.text == f"Utente con ID '{created['id']}' eliminato con successo."
    assert client.get(f"/api/utenti/find-utente-by-id/{created['id']}").status_code == 404


def test_delete_unknown_user(client):
    response = client.delete("/api/utenti/delete-utente/77")
    assert response.status_code == 404
    assert response.text == "Utente con ID '77' non trovato."


def test_delete_user_removes_wishlist(client, today):
    user = create_user(client)
    wishlist = client.post(
        "/api/wishlists/create-wishlist",
        json={"creation_date": today.isoformat(), "owner_id": user["id"]},
    ).json()
    client.delete(f"/api/utenti/delete-utente/{user['id']}")
    assert client.get(f"/api/wishlists/find-wishlist-by-id/{wishlist['id']}").status_code == 404


def test_update_user_changes_only_given_fields(client):
    created = create_user(client)
    response = client.put(
        f"/api/utenti/update-utente/{created['id']}",
        json={"address": "Piazza Duomo 1", "role": "ADMIN"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["address"] == "Piazza Duomo 1"
    assert body["role"] == "ADMIN"
    assert body["first_name"] == created["first_name"]


def test_update_unknown_user_is_not_found(client):
    response = client.put("/api/utenti/update-utente/5", json={"address": "x"})
    assert response.status_code == 404
    assert response.content == b""


def test_update_with_invalid_email_reports_errors(client):
    created = create_user(client)
    response = client.put(f"/api/utenti/update-utente/{created['id']}", json={"email": "nope"})
    assert response.status_code == 400
    assert response.json() == {
        "detail": [{"field": "email", "message": "must be a valid e-mail address"}]
    }


def test_out_of_range_user_id_is_not_found(client):
    create_user(client)
    assert client.get(f"/api/utenti/find-utente-by-id/{OUT_OF_RANGE_ID}").status_code == 404
    deleted = client.delete(f"/api/utenti/delete-utente/{OUT_OF_RANGE_ID}")
    assert deleted.status_code == 404
    assert deleted.text == f"Utente con ID '{OUT_OF_RANGE_ID}' non trovato."
    updated = client.put(f"/api/utenti/update-utente/{OUT_OF_RANGE_ID}", json={"address": "x"})
    assert updated.status_code == 404
    assert len(client.get("/api/utenti/get-utenti").json()) == 1


def test_out_of_range_subscription_reference_is_bad_request(client):
    response = client.post(
        "/api/utenti/create-utente", json=user_payload(subscription_id=OUT_OF_RANGE_ID)
    )
    assert response.status_code == 400


def test_update_user_with_null_required_fields_reports_errors(client):
    created = create_user(client)
    response = client.put(
        f"/api/utenti/update-utente/{created['id']}",
        json={"first_name": None, "role": None},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == [
        {"field": "first_name", "message": "must not be blank"},
        {"field": "role", "message": "must not be null"},
    ]
    stored = client.get(f"/api/utenti/find-utente-by-id/{created['id']}").json()
    assert stored["first_name"] == created["first_name"]
