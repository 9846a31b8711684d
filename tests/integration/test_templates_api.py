def _h(user: str):
    return {"x-auth-request-user": user, "x-auth-request-email": f"{user}@example.com"}


def _create(client, user="alice", **overrides):
    payload = {"name": "Classic", "body": "Dear team,"}
    payload.update(overrides)
    r = client.post("/templates/", json=payload, headers=_h(user))
    assert r.status_code == 201, r.text
    return r.json()["template"]


def test_create_user_and_system_templates(client):
    own = _create(client)
    system = _create(client, name="Shared", isSystem=True)
    assert own["userId"] == "alice" and own["isSystem"] is False
    assert system["userId"] is None and system["isSystem"] is True


def test_list_shows_system_and_own_templates_only(client):
    system = _create(client, "alice", name="Shared", isSystem=True)
    mine = _create(client, "alice", name="Mine")
    theirs = _create(client, "bob", name="Theirs")

    r = client.get("/templates/", headers=_h("bob"))
    assert r.status_code == 200
    ids = {t["id"] for t in r.json()["templates"]}
    assert ids == {system["id"], theirs["id"]}
    assert mine["id"] not in ids


def test_update_template_access(client):
    mine = _create(client, "alice")
    r = client.patch(f"/templates/{mine['id']}", json={"name": "Hijacked"}, headers=_h("bob"))
    assert r.status_code == 404
    assert r.json() == {"code": "NOT_FOUND", "message": "Template not found or not accessible."}

    r = client.patch(f"/templates/{mine['id']}", json={"description": "Short and direct"}, headers=_h("alice"))
    assert r.status_code == 200
    template = r.json()["template"]
    assert template["description"] == "Short and direct"
    assert template["name"] == "Classic"


def test_update_missing_template(client):
    r = client.patch("/templates/nope", json={"name": "x"}, headers=_h("alice"))
    assert r.status_code == 404


def test_templates_require_identity(client):
    assert client.get("/templates/").status_code == 401
    assert client.post("/templates/", json={"name": "n", "body": "b"}).status_code == 401


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
