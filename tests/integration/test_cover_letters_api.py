def _h(user: str):
    return {"x-auth-request-user": user, "x-auth-request-email": f"{user}@example.com"}


def _create(client, user="alice", **overrides):
    payload = {
        "title": "SWE Application",
        "jobTitle": "Software Engineer",
        "companyName": "Acme",
        "content": "Dear hiring manager,",
    }
    payload.update(overrides)
    r = client.post("/cover-letters/", json=payload, headers=_h(user))
    assert r.status_code == 201, r.text
    return r.json()["coverLetter"]


def test_create_returns_camel_case_envelope(client):
    letter = _create(client)
    assert letter["userId"] == "alice"
    assert letter["jobTitle"] == "Software Engineer"
    assert letter["companyName"] == "Acme"
    assert letter["id"]
    assert "createdAt" in letter and "updatedAt" in letter


def test_create_without_identity_is_unauthorized(client):
    r = client.post("/cover-letters/", json={"title": "T", "jobTitle": "J", "content": "C"})
    assert r.status_code == 401
    assert r.json() == {
        "code": "UNAUTHORIZED",
        "message": "You must be signed in to perform this action.",
    }


def test_create_validates_required_fields(client):
    r = client.post("/cover-letters/", json={"title": "", "jobTitle": "J", "content": "C"}, headers=_h("alice"))
    assert r.status_code == 422
    r = client.post("/cover-letters/", json={"title": "T", "jobTitle": "J"}, headers=_h("alice"))
    assert r.status_code == 422


def test_other_user_update_is_not_found_and_owner_update_merges(client):
    letter = _create(client, title="SWE Application")

    r = client.patch(f"/cover-letters/{letter['id']}", json={"status": "submitted"}, headers=_h("bob"))
    assert r.status_code == 404
    assert r.json()["code"] == "NOT_FOUND"

    r = client.patch(f"/cover-letters/{letter['id']}", json={"status": "submitted"}, headers=_h("alice"))
    assert r.status_code == 200, r.text
    updated = r.json()["coverLetter"]
    assert updated["status"] == "submitted"
    assert updated["title"] == "SWE Application"


def test_empty_patch_is_a_no_op(client):
    letter = _create(client)
    r = client.patch(f"/cover-letters/{letter['id']}", json={}, headers=_h("alice"))
    assert r.status_code == 200
    assert r.json()["coverLetter"]["updatedAt"] == letter["updatedAt"]


def test_list_is_scoped_to_caller(client):
    mine = _create(client, "alice")
    _create(client, "bob")
    r = client.get("/cover-letters/", headers=_h("alice"))
    assert r.status_code == 200
    assert [c["id"] for c in r.json()["coverLetters"]] == [mine["id"]]


def test_get_single_cover_letter(client):
    letter = _create(client)
    assert client.get(f"/cover-letters/{letter['id']}", headers=_h("alice")).json()["coverLetter"]["id"] == letter["id"]
    assert client.get(f"/cover-letters/{letter['id']}", headers=_h("bob")).status_code == 404


def test_delete_returns_record_and_removes_it(client):
    letter = _create(client)
    assert client.delete(f"/cover-letters/{letter['id']}", headers=_h("bob")).status_code == 404

    r = client.delete(f"/cover-letters/{letter['id']}", headers=_h("alice"))
    assert r.status_code == 200
    assert r.json()["coverLetter"]["id"] == letter["id"]
    assert client.delete(f"/cover-letters/{letter['id']}", headers=_h("alice")).status_code == 404


def test_explicit_id_round_trips(client):
    letter = _create(client, id="client-chosen-id")
    assert letter["id"] == "client-chosen-id"


def test_forwarded_user_header_is_accepted(client):
    r = client.get("/cover-letters/", headers={"x-forwarded-user": "carol"})
    assert r.status_code == 200
    assert r.json() == {"coverLetters": []}


def test_null_optional_field_is_rejected(client):
    letter = _create(client)
    r = client.patch(f"/cover-letters/{letter['id']}", json={"companyName": None}, headers=_h("alice"))
    assert r.status_code == 422
    r = client.post("/cover-letters/", json={"title": "T", "jobTitle": "J", "content": "C", "tone": None}, headers=_h("alice"))
    assert r.status_code == 422


def test_empty_explicit_id_is_rejected(client):
    r = client.post("/cover-letters/", json={"id": "", "title": "T", "jobTitle": "J", "content": "C"}, headers=_h("alice"))
    assert r.status_code == 422


def test_timestamps_carry_utc_offset(client):
    letter = _create(client)
    for key in ("createdAt", "updatedAt"):
        assert letter[key].endswith(("+00:00", "Z")), letter[key]
