from sqlalchemy import event

from app.models.client import ClientSet


def test_listing_clients_requires_auth(client):
    assert client.get("/clients").status_code == 401


def test_no_clients_returns_empty_list(client, register):
    user = register()

    response = client.get("/clients", headers=user["headers"])

    assert response.status_code == 200
    assert response.json() == []


def test_create_client(client, register):
    user = register()

    response = client.post(
        "/clients", json={"name": "Alice", "email": "alice@example.com"}, headers=user["headers"]
    )

    assert response.status_code == 201
    body = response.json()
    assert isinstance(body["id"], int)
    assert body["userId"] == user["user_id"]
    assert body["name"] == "Alice"
    assert body["email"] == "alice@example.com"
    assert body["workouts"] == []


def test_blank_email_is_stored_as_null(client, register):
    user = register()
    body = client.post("/clients", json={"name": "Bob", "email": ""}, headers=user["headers"]).json()
    assert body["email"] is None


def test_create_client_requires_name(client, register):
    user = register()
    response = client.post("/clients", json={"email": "x@example.com"}, headers=user["headers"])
    assert response.status_code == 400


def test_assign_template_copies_exercises_and_sets(client, register, upper_body):
    user = register()
    template = client.post("/templates", json=upper_body, headers=user["headers"]).json()
    client_id = client.post("/clients", json={"name": "Alice"}, headers=user["headers"]).json()["id"]

    response = client.post(
        f"/clients/{client_id}/assign-template",
        json={"templateId": template["id"]},
        headers=user["headers"],
    )

    assert response.status_code == 201
    workout = response.json()
    assert workout["clientId"] == client_id
    assert workout["templateId"] == template["id"]
    assert workout["name"] == template["name"]
    assert workout["description"] == template["description"]
    mirrored = [
        (e["name"], e["muscleGroup"], e["difficultyLevel"], e["position"],
         [(s["setNumber"], s["weight"], s["reps"]) for s in e["sets"]])
        for e in workout["exercises"]
    ]
    expected = [
        (e["name"], e["muscleGroup"], e["difficultyLevel"], e["position"],
         [(s["setNumber"], s["weight"], s["reps"]) for s in e["sets"]])
        for e in template["exercises"]
    ]
    assert mirrored == expected

    listed = client.get("/clients", headers=user["headers"]).json()
    assert len(listed) == 1
    assert listed[0]["workouts"][0]["id"] == workout["id"]
    assert listed[0]["workouts"][0]["exercises"] == workout["exercises"]


def test_assignment_lists_newest_workout_first(client, register, upper_body):
    user = register()
    template = client.post("/templates", json=upper_body, headers=user["headers"]).json()
    client_id = client.post("/clients", json={"name": "Alice"}, headers=user["headers"]).json()["id"]
    first = client.post(
        f"/clients/{client_id}/assign-template", json={"templateId": template["id"]}, headers=user["headers"]
    ).json()
    second = client.post(
        f"/clients/{client_id}/assign-template", json={"templateId": template["id"]}, headers=user["headers"]
    ).json()

    body = client.get(f"/clients/{client_id}", headers=user["headers"]).json()

    assert [w["id"] for w in body["workouts"]] == [second["id"], first["id"]]


def test_assign_template_to_foreign_client_is_not_found(client, register, upper_body):
    owner = register()
    intruder = register()
    client_id = client.post("/clients", json={"name": "Alice"}, headers=owner["headers"]).json()["id"]
    template = client.post("/templates", json=upper_body, headers=intruder["headers"]).json()

    response = client.post(
        f"/clients/{client_id}/assign-template",
        json={"templateId": template["id"]},
        headers=intruder["headers"],
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Client not found"}


def test_assign_foreign_template_is_not_found(client, register, upper_body):
    owner = register()
    intruder = register()
    template = client.post("/templates", json=upper_body, headers=owner["headers"]).json()
    client_id = client.post("/clients", json={"name": "Eve"}, headers=intruder["headers"]).json()["id"]

    response = client.post(
        f"/clients/{client_id}/assign-template",
        json={"templateId": template["id"]},
        headers=intruder["headers"],
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Template not found"}
    assert client.get(f"/clients/{client_id}", headers=intruder["headers"]).json()["workouts"] == []


def test_assign_template_requires_template_id(client, register):
    user = register()
    client_id = client.post("/clients", json={"name": "Alice"}, headers=user["headers"]).json()["id"]

    response = client.post(f"/clients/{client_id}/assign-template", json={}, headers=user["headers"])

    assert response.status_code == 400


def test_clients_are_scoped_to_their_owner(client, register):
    owner = register()
    other = register()
    client_id = client.post("/clients", json={"name": "Alice"}, headers=owner["headers"]).json()["id"]

    assert client.get("/clients", headers=other["headers"]).json() == []
    assert client.get(f"/clients/{client_id}", headers=other["headers"]).status_code == 404
    assert client.delete(f"/clients/{client_id}", headers=other["headers"]).status_code == 404


def test_delete_client_cascades(client, register, upper_body):
    user = register()
    template = client.post("/templates", json=upper_body, headers=user["headers"]).json()
    client_id = client.post("/clients", json={"name": "Alice"}, headers=user["headers"]).json()["id"]
    workout = client.post(
        f"/clients/{client_id}/assign-template", json={"templateId": template["id"]}, headers=user["headers"]
    ).json()
    client.post(f"/clients/{client_id}/messages", json={"content": "hi"}, headers=user["headers"])

    assert client.delete(f"/clients/{client_id}", headers=user["headers"]).status_code == 204

    assert client.get(f"/clients/{client_id}", headers=user["headers"]).status_code == 404
    assert client.get(f"/client-workouts/{workout['id']}", headers=user["headers"]).status_code == 404
    assert client.get(f"/clients/{client_id}/messages", headers=user["headers"]).status_code == 404
    # the template is untouched
    assert client.get(f"/templates/{template['id']}", headers=user["headers"]).status_code == 200


def test_oversized_ids_are_bad_requests(client, register):
    user = register()
    huge = 99999999999999999999999

    assert client.get(f"/clients/{huge}", headers=user["headers"]).status_code == 400
    assert client.delete(f"/clients/{huge}", headers=user["headers"]).status_code == 400
    response = client.post(
        f"/clients/{huge}/assign-template", json={"templateId": 1}, headers=user["headers"]
    )
    assert response.status_code == 400

    client_id = client.post("/clients", json={"name": "Alice"}, headers=user["headers"]).json()["id"]
    response = client.post(
        f"/clients/{client_id}/assign-template", json={"templateId": huge}, headers=user["headers"]
    )
    assert response.status_code == 400
    assert response.json()["error"].startswith("templateId: ")


def test_failed_set_copy_rolls_back_whole_assignment(client, register, upper_body):
    user = register()
    template = client.post("/templates", json=upper_body, headers=user["headers"]).json()
    client_id = client.post("/clients", json={"name": "Alice"}, headers=user["headers"]).json()["id"]

    def fail_insert(mapper, connection, target):
        raise RuntimeError("set insert failed")

    event.listen(ClientSet, "before_insert", fail_insert)
    try:
        response = client.post(
            f"/clients/{client_id}/assign-template",
            json={"templateId": template["id"]},
            headers=user["headers"],
        )
    finally:
        event.remove(ClientSet, "before_insert", fail_insert)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to assign template"}
    assert client.get(f"/clients/{client_id}", headers=user["headers"]).json()["workouts"] == []
