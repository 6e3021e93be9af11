"""HTTP contract of the /api/copieFumetto routes."""

from conftest import OUT_OF_RANGE_ID, comic_payload


def create_comic(client):
    return client.post("/api/fumetti/create-fumetto", json=comic_payload()).json()


def copy_payload(comic_id, **overrides):
    payload = {"condition": "NUOVO", "price": 4.5, "available": True, "comic_id": comic_id}
    payload.update(overrides)
    return payload


def create_copy(client, comic_id, **overrides):
    response = client.post(
        "/api/copieFumetto/create-copia-fumetto", json=copy_payload(comic_id, **overrides)
    )
    assert response.status_code == 201
    return response.json()


def test_copy_crud(client):
    comic = create_comic(client)
    copy = create_copy(client, comic["id"])
    assert copy["condition"] == "NUOVO"
    assert copy["comic_id"] == comic["id"]

    assert client.get("/api/copieFumetto/get-copie-fumetto").json() == [copy]

    updated = client.put(
        f"/api/copieFumetto/update-copia-fumetto/{copy['id']}",
        json={"condition": "USATO", "price": 2.0},
    )
    assert updated.status_code == 200
    assert updated.json()["condition"] == "USATO"
    assert updated.json()["price"] == 2.0
    assert updated.json()["available"] is True

    found = client.get(f"/api/copieFumetto/find-copia-fumetto-by-id/{copy['id']}")
    assert found.json() == updated.json()

    deleted = client.delete(f"/api/copieFumetto/delete-copia-fumetto/{copy['id']}")
    assert deleted.status_code == 200
    assert deleted.text == f"Copia fumetto con ID '{copy['id']}' eliminata con successo."
    assert client.get(f"/api/copieFumetto/find-copia-fumetto-by-id/{copy['id']}").status_code == 404


def test_copy_of_unknown_comic_is_bad_request(client):
    response = client.post("/api/copieFumetto/create-copia-fumetto", json=copy_payload(42))
    assert response.status_code == 400
    assert response.content == b""


def test_negative_price_is_bad_request(client):
    comic = create_comic(client)
    response = client.post(
        "/api/copieFumetto/create-copia-fumetto", json=copy_payload(comic["id"], price=-1)
    )
    assert response.status_code == 400


def test_deleting_comic_deletes_its_copies(client):
    comic = create_comic(client)
    copy = create_copy(client, comic["id"])
    client.delete(f"/api/fumetti/delete-fumetto/{comic['id']}")
    assert client.get(f"/api/copieFumetto/find-copia-fumetto-by-id/{copy['id']}").status_code == 404


def test_update_copy_with_null_fields_reports_errors(client):
    copy = create_copy(client, create_comic(client)["id"])
    response = client.put(
        f"/api/copieFumetto/update-copia-fumetto/{copy['id']}",
        json={"price": None, "available": None},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == [
        {"field": "price", "message": "must not be null"},
        {"field": "available", "message": "must not be null"},
    ]


def test_update_copy_to_unknown_comic_reports_errors(client):
    copy = create_copy(client, create_comic(client)["id"])
    response = client.put(
        f"/api/copieFumetto/update-copia-fumetto/{copy['id']}",
        json={"comic_id": OUT_OF_RANGE_ID},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == [
        {"field": "comic_id", "message": f"comic {OUT_OF_RANGE_ID} does not exist"}
    ]


def test_unknown_and_out_of_range_copy_ids(client):
    for copy_id in (7, OUT_OF_RANGE_ID):
        assert client.get(f"/api/copieFumetto/find-copia-fumetto-by-id/{copy_id}").status_code == 404
        deleted = client.delete(f"/api/copieFumetto/delete-copia-fumetto/{copy_id}")
        assert deleted.status_code == 404
        assert deleted.text == f"Copia fumetto con ID '{copy_id}' non trovata."
        response = client.put(
            f"/api/copieFumetto/update-copia-fumetto/{copy_id}", json={"price": 1.0}
        )
        assert response.status_code == 404
