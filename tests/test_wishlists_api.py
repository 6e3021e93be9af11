"""HTTP contract of the /api/wishlists routes."""

from conftest import OUT_OF_RANGE_ID, comic_payload, user_payload


def create_comic(client, title):
    return client.post("/api/fumetti/create-fumetto", json=comic_payload(title=title)).json()


def create_wishlist(client, **fields):
    response = client.post("/api/wishlists/create-wishlist", json=fields)
    assert response.status_code == 201
    return response.json()


def test_wishlist_lifecycle(client, today):
    comic_a = create_comic(client, "A")
    comic_b = create_comic(client, "B")

    wishlist = create_wishlist(client, creation_date=today.isoformat())
    assert isinstance(wishlist["id"], int)
    assert wishlist["items"] == []
    wishlist_id = wishlist["id"]

    added = client.put(f"/api/wishlists/add-fumetto/{wishlist_id}/{comic_a['id']}")
    assert added.status_code == 200
    assert [c["id"] for c in added.json()["items"]] == [comic_a["id"]]

    again = client.put(f"/api/wishlists/add-fumetto/{wishlist_id}/{comic_a['id']}")
    assert [c["id"] for c in again.json()["items"]] == [comic_a["id"]]

    removed = client.put(f"/api/wishlists/remove-fumetto/{wishlist_id}/{comic_b['id']}")
    assert removed.status_code == 200
    assert [c["id"] for c in removed.json()["items"]] == [comic_a["id"]]

    deleted = client.delete(f"/api/wishlists/delete-wishlist/{wishlist_id}")
    assert deleted.status_code == 200
    assert str(wishlist_id) in deleted.text

    missing = client.get(f"/api/wishlists/find-wishlist-by-id/{wishlist_id}")
    assert missing.status_code == 404
    assert missing.content == b""


def test_future_creation_date_is_rejected(client, tomorrow):
    response = client.post(
        "/api/wishlists/create-wishlist", json={"creation_date": tomorrow.isoformat()}
    )
    assert response.status_code == 400
    assert response.content == b""
    assert client.get("/api/wishlists/get-wishlists").json() == []


def test_missing_creation_date_is_rejected_by_schema(client):
    response = client.post("/api/wishlists/create-wishlist", json={})
    assert response.status_code == 422


def test_create_with_items_collapses_duplicates(client, today):
    comic_a = create_comic(client, "A")
    comic_b = create_comic(client, "B")
    wishlist = create_wishlist(
        client,
        creation_date=today.isoformat(),
        item_ids=[comic_b["id"], comic_a["id"], comic_b["id"]],
    )
    assert [c["title"] for c in wishlist["items"]] == ["B", "A"]


def test_create_with_unknown_comic_is_bad_request(client, today):
    response = client.post(
        "/api/wishlists/create-wishlist",
        json={"creation_date": today.isoformat(), "item_ids": [123]},
    )
    assert response.status_code == 400


def test_owner_can_have_only_one_wishlist(client, today):
    user = client.post("/api/utenti/create-utente", json=user_payload()).json()
    first = create_wishlist(client, creation_date=today.isoformat(), owner_id=user["id"])
    assert first["owner_id"] == user["id"]

    response = client.post(
        "/api/wishlists/create-wishlist",
        json={"creation_date": today.isoformat(), "owner_id": user["id"]},
    )
    assert response.status_code == 400


def test_create_with_unknown_owner_is_bad_request(client, today):
    response = client.post(
        "/api/wishlists/create-wishlist",
        json={"creation_date": today.isoformat(), "owner_id": 42},
    )
    assert response.status_code == 400


def test_list_wishlists(client, today):
    first = create_wishlist(client, creation_date=today.isoformat())
    second = create_wishlist(client, creation_date="2024-03-01")
    response = client.get("/api/wishlists/get-wishlists")
    assert response.status_code == 200
    assert [w["id"] for w in response.json()] == [first["id"], second["id"]]


def test_update_wishlist_replaces_items_and_owner(client, today):
    comic_a = create_comic(client, "A")
    comic_b = create_comic(client, "B")
    user = client.post("/api/utenti/create-utente", json=user_payload()).json()
    wishlist = create_wishlist(client, creation_date=today.isoformat(), item_ids=[comic_a["id"]])

    response = client.put(
        f"/api/wishlists/update-wishlist/{wishlist['id']}",
        json={"owner_id": user["id"], "item_ids": [comic_b["id"]]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["owner_id"] == user["id"]
    assert [c["id"] for c in body["items"]] == [comic_b["id"]]
    assert body["creation_date"] == today.isoformat()


def test_update_wishlist_with_future_date_reports_errors(client, today, tomorrow):
    wishlist = create_wishlist(client, creation_date=today.isoformat())
    response = client.put(
        f"/api/wishlists/update-wishlist/{wishlist['id']}",
        json={"creation_date": tomorrow.isoformat()},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == [
        {"field": "creation_date", "message": "must not be in the future"}
    ]
    stored = client.get(f"/api/wishlists/find-wishlist-by-id/{wishlist['id']}").json()
    assert stored["creation_date"] == today.isoformat()


def test_update_unknown_wishlist(client, today):
    response = client.put(
        "/api/wishlists/update-wishlist/31", json={"creation_date": today.isoformat()}
    )
    assert response.status_code == 404
    assert response.content == b""


def test_delete_unknown_wishlist(client):
    response = client.delete("/api/wishlists/delete-wishlist/31")
    assert response.status_code == 404
    assert response.text == "Wishlist con ID '31' non trovato."


def test_add_item_to_unknown_wishlist_or_comic(client, today):
    comic = create_comic(client, "A")
    wishlist = create_wishlist(client, creation_date=today.isoformat())
    assert client.put(f"/api/wishlists/add-fumetto/999/{comic['id']}").status_code == 404
    assert client.put(f"/api/wishlists/add-fumetto/{wishlist['id']}/999").status_code == 404


def test_remove_unknown_comic_is_noop(client, today):
    wishlist = create_wishlist(client, creation_date=today.isoformat())
    response = client.put(f"/api/wishlists/remove-fumetto/{wishlist['id']}/999")
    assert response.status_code == 200
    assert response.json()["items"] == []


def test_update_wishlist_with_null_creation_date_reports_errors(client, today):
    wishlist = create_wishlist(client, creation_date=today.isoformat())
    response = client.put(
        f"/api/wishlists/update-wishlist/{wishlist['id']}", json={"creation_date": None}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == [
        {"field": "creation_date", "message": "must not be null"}
    ]


def test_out_of_range_ids_are_not_found(client, today):
    wishlist = create_wishlist(client, creation_date=today.isoformat())
    assert client.get(f"/api/wishlists/find-wishlist-by-id/{OUT_OF_RANGE_ID}").status_code == 404
    assert client.delete(f"/api/wishlists/delete-wishlist/{OUT_OF_RANGE_ID}").status_code == 404
    response = client.put(
        f"/api/wishlists/update-wishlist/{OUT_OF_RANGE_ID}",
        json={"creation_date": today.isoformat()},
    )
    assert response.status_code == 404
    assert client.put(f"/api/wishlists/add-fumetto/{wishlist['id']}/{OUT_OF_RANGE_ID}").status_code == 404
    removed = client.put(f"/api/wishlists/remove-fumetto/{wishlist['id']}/{OUT_OF_RANGE_ID}")
    assert removed.status_code == 200


def test_out_of_range_item_or_owner_is_bad_request(client, today):
    response = client.post(
        "/api/wishlists/create-wishlist",
        json={"creation_date": today.isoformat(), "item_ids": [OUT_OF_RANGE_ID]},
    )
    assert response.status_code == 400
    response = client.post(
        "/api/wishlists/create-wishlist",
        json={"creation_date": today.isoformat(), "owner_id": OUT_OF_RANGE_ID},
    )
    assert response.status_code == 400
