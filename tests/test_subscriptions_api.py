"""HTTP contract of the /api/abbonamenti routes."""

from conftest import OUT_OF_RANGE_ID, user_payload


def test_subscription_crud(client):
    created = client.post("/api/abbonamenti/create-abbonamento", json={"plan": "MENSILE"})
    assert created.status_code == 201
    subscription_id = created.json()["id"]

    assert client.get("/api/abbonamenti/get-abbonamenti").json() == [
        {"id": subscription_id, "plan": "MENSILE"}
    ]

    updated = client.put(
        f"/api/abbonamenti/update-abbonamento/{subscription_id}", json={"plan": "ANNUALE"}
    )
    assert updated.status_code == 200
    assert updated.json()["plan"] == "ANNUALE"

    found = client.get(f"/api/abbonamenti/find-abbonamento-by-id/{subscription_id}")
    assert found.json() == {"id": subscription_id, "plan": "ANNUALE"}

    deleted = client.delete(f"/api/abbonamenti/delete-abbonamento/{subscription_id}")
    assert deleted.status_code == 200
    assert deleted.text == f"Abbonamento con ID '{subscription_id}' eliminato con successo."
    assert client.get(f"/api/abbonamenti/find-abbonamento-by-id/{subscription_id}").status_code == 404


def test_unknown_plan_is_rejected_by_schema(client):
    response = client.post("/api/abbonamenti/create-abbonamento", json={"plan": "SETTIMANALE"})
    assert response.status_code == 422


def test_deleting_subscription_keeps_users(client):
    subscription_id = client.post(
        "/api/abbonamenti/create-abbonamento", json={"plan": "SEMESTRALE"}
    ).json()["id"]
    user = client.post(
        "/api/utenti/create-utente", json=user_payload(subscription_id=subscription_id)
    ).json()
    assert user["subscription_id"] == subscription_id

    client.delete(f"/api/abbonamenti/delete-abbonamento/{subscription_id}")

    reloaded = client.get(f"/api/utenti/find-utente-by-id/{user['id']}").json()
    assert reloaded["subscription_id"] is None


def test_delete_unknown_subscription(client):
    response = client.delete("/api/abbonamenti/delete-abbonamento/8")
    assert response.status_code == 404
    assert response.text == "Abbonamento con ID '8' non trovato."


def test_update_subscription_with_null_plan_reports_errors(client):
    created = client.post("/api/abbonamenti/create-abbonamento", json={"plan": "MENSILE"}).json()
    response = client.put(
        f"/api/abbonamenti/update-abbonamento/{created['id']}", json={"plan": None}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == [{"field": "plan", "message": "must not be null"}]


def test_out_of_range_subscription_id_is_not_found(client):
    base = "/api/abbonamenti"
    assert client.get(f"{base}/find-abbonamento-by-id/{OUT_OF_RANGE_ID}").status_code == 404
    assert client.delete(f"{base}/delete-abbonamento/{OUT_OF_RANGE_ID}").status_code == 404
    response = client.put(f"{base}/update-abbonamento/{OUT_OF_RANGE_ID}", json={"plan": "ANNUALE"})
    assert response.status_code == 404
