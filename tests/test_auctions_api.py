"""HTTP contract of the /api/aste routes."""

import pytest

from conftest import OUT_OF_RANGE_ID, comic_payload, user_payload


@pytest.fixture
def copy_id(client):
    comic = client.post("/api/fumetti/create-fumetto", json=comic_payload()).json()
    copy = client.post(
        "/api/copieFumetto/create-copia-fumetto",
        json={"condition": "USATO", "price": 10.0, "comic_id": comic["id"]},
    ).json()
    return copy["id"]


def auction_payload(copy_id, **overrides):
    payload = {
        "start_date": "2024-05-01",
        "end_date": "2024-05-08",
        "current_offer": 12.5,
        "copy_id": copy_id,
    }
    payload.update(overrides)
    return payload


def create_auction(client, copy_id, **overrides):
    response = client.post("/api/aste/create-asta", json=auction_payload(copy_id, **overrides))
    assert response.status_code == 201
    return response.json()


def test_auction_crud(client, copy_id):
    auction = create_auction(client, copy_id)
    assert auction["status"] == "IN_CORSO"
    assert auction["best_bidder_id"] is None

    assert client.get("/api/aste/get-aste").json() == [auction]

    bidder = client.post("/api/utenti/create-utente", json=user_payload()).json()
    updated = client.put(
        f"/api/aste/update-asta/{auction['id']}",
        json={"current_offer": 20.0, "best_bidder_id": bidder["id"]},
    )
    assert updated.status_code == 200
    assert updated.json()["best_bidder_id"] == bidder["id"]
    assert updated.json()["end_date"] == "2024-05-08"

    found = client.get(f"/api/aste/find-asta-by-id/{auction['id']}")
    assert found.json() == updated.json()

    deleted = client.delete(f"/api/aste/delete-asta/{auction['id']}")
    assert deleted.status_code == 200
    assert deleted.text == f"Asta con ID '{auction['id']}' eliminata con successo."
    assert client.get(f"/api/aste/find-asta-by-id/{auction['id']}").status_code == 404


def test_end_before_start_is_bad_request(client, copy_id):
    response = client.post(
        "/api/aste/create-asta", json=auction_payload(copy_id, end_date="2024-04-30")
    )
    assert response.status_code == 400


def test_auction_of_unknown_copy_is_bad_request(client):
    response = client.post("/api/aste/create-asta", json=auction_payload(99))
    assert response.status_code == 400


def test_deleting_bidder_keeps_auction(client, copy_id):
    bidder = client.post("/api/utenti/create-utente", json=user_payload()).json()
    auction = create_auction(client, copy_id, best_bidder_id=bidder["id"])
    client.delete(f"/api/utenti/delete-utente/{bidder['id']}")
    stored = client.get(f"/api/aste/find-asta-by-id/{auction['id']}").json()
    assert stored["best_bidder_id"] is None


def test_deleting_copy_deletes_its_auctions(client, copy_id):
    auction = create_auction(client, copy_id)
    client.delete(f"/api/copieFumetto/delete-copia-fumetto/{copy_id}")
    assert client.get(f"/api/aste/find-asta-by-id/{auction['id']}").status_code == 404


def test_update_auction_with_null_fields_reports_errors(client, copy_id):
    auction = create_auction(client, copy_id)
    response = client.put(
        f"/api/aste/update-asta/{auction['id']}", json={"end_date": None, "status": None}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == [
        {"field": "end_date", "message": "must not be null"},
        {"field": "status", "message": "must not be null"},
    ]


def test_update_auction_with_end_before_start_reports_errors(client, copy_id):
    auction = create_auction(client, copy_id)
    response = client.put(
        f"/api/aste/update-asta/{auction['id']}", json={"start_date": "2024-06-01"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == [
        {"field": "end_date", "message": "must not be before start_date"}
    ]


def test_unknown_and_out_of_range_auction_ids(client):
    for auction_id in (3, OUT_OF_RANGE_ID):
        assert client.get(f"/api/aste/find-asta-by-id/{auction_id}").status_code == 404
        deleted = client.delete(f"/api/aste/delete-asta/{auction_id}")
        assert deleted.status_code == 404
        assert deleted.text == f"Asta con ID '{auction_id}' non trovata."
        response = client.put(f"/api/aste/update-asta/{auction_id}", json={"current_offer": 1.0})
        assert response.status_code == 404
