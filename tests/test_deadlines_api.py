from tests.helpers import auth_headers, register


def create(client, headers, **fields):
    body = {"title": "Essay", "dueDate": "2026-11-01"}
    body.update(fields)
    res = client.post("/api/deadlines", json=body, headers=headers)
    assert res.status_code == 201, res.text
    return res.json()


def test_create_fills_defaults(client, user_a, headers_a):
    deadline = create(client, headers_a, title="  Essay  ")

    assert deadline["title"] == "Essay"
    assert deadline["userId"] == user_a["user"]["id"]
    assert deadline["description"] == ""
    assert deadline["courseId"] is None
    assert deadline["dueDate"] == "2026-11-01T00:00:00.000Z"
    assert deadline["priority"] == "medium"
    assert deadline["completed"] is False
    assert deadline["createdAt"].endswith("Z")


def test_create_requires_title_and_due_date(client, headers_a):
    res = client.post("/api/deadlines", json={"title": "Essay"}, headers=headers_a)
    assert res.status_code == 400
    assert res.json() == {"error": "Title and due date are required"}


def test_create_rejects_unparseable_due_date(client, headers_a):
    res = client.post("/api/deadlines", json={"title": "Essay", "dueDate": "next tuesday"}, headers=headers_a)
    assert res.status_code == 400


def test_create_rejects_unknown_priority(client, headers_a):
    res = client.post("/api/deadlines", json={"title": "Essay", "dueDate": "2026-11-01", "priority": "urgent"}, headers=headers_a)
    assert res.status_code == 400


def test_deadlines_require_a_token(client):
    assert client.get("/api/deadlines").status_code == 401
    assert client.post("/api/deadlines", json={"title": "x", "dueDate": "2026-11-01"}).status_code == 401


def test_list_only_shows_own_deadlines(client, headers_a, headers_b):
    mine = create(client, headers_a)

    assert [d["id"] for d in client.get("/api/deadlines", headers=headers_a).json()] == [mine["id"]]
    assert client.get("/api/deadlines", headers=headers_b).json() == []


def test_update_merges_fields(client, headers_a):
    deadline = create(client, headers_a, description="draft")
    res = client.put(f"/api/deadlines/{deadline['id']}", json={"completed": True, "priority": "high"}, headers=headers_a)

    assert res.status_code == 200
    updated = res.json()
    assert updated["completed"] is True
    assert updated["priority"] == "high"
    assert updated["description"] == "draft"
    assert updated["id"] == deadline["id"]
    assert updated["userId"] == deadline["userId"]
    assert updated["updatedAt"] is not None


def test_update_cannot_change_owner_or_id(client, user_b, headers_a):
    deadline = create(client, headers_a)
    res = client.put(
        f"/api/deadlines/{deadline['id']}",
        json={"id": "forged", "userId": user_b["user"]["id"], "title": "Renamed"},
        headers=headers_a,
    )
    assert res.status_code == 200
    assert res.json()["id"] == deadline["id"]
    assert res.json()["userId"] == deadline["userId"]
    assert res.json()["title"] == "Renamed"


def test_other_users_get_not_found_on_update_and_delete(client, headers_a, headers_b):
    deadline = create(client, headers_a)

    update = client.put(f"/api/deadlines/{deadline['id']}", json={"completed": True}, headers=headers_b)
    delete = client.delete(f"/api/deadlines/{deadline['id']}", headers=headers_b)
    missing = client.delete("/api/deadlines/does-not-exist", headers=headers_b)

    assert update.status_code == delete.status_code == missing.status_code == 404
    assert update.json() == delete.json() == missing.json() == {"error": "Deadline not found"}
    assert client.get("/api/deadlines", headers=headers_a).json()[0]["completed"] is False


def test_delete_removes_deadline(client, headers_a):
    deadline = create(client, headers_a)
    res = client.delete(f"/api/deadlines/{deadline['id']}", headers=headers_a)

    assert res.status_code == 204
    assert res.content == b""
    assert client.get("/api/deadlines", headers=headers_a).json() == []


def test_second_user_starts_empty_while_first_keeps_insertion_order(client):
    a = register(client, "ada@example.com")
    headers_a = auth_headers(a["token"])
    titles = ["Essay", "Lab report", "Exam"]
    for title, due in zip(titles, ["2026-12-01", "2026-11-01", "2026-10-20"]):
        create(client, headers_a, title=title, dueDate=due)

    register(client, "brian@example.com")
    login = client.post("/api/auth/login", json={"email": "brian@example.com", "password": "Str0ng!Pass"})
    headers_b = auth_headers(login.json()["token"])

    assert client.get("/api/deadlines", headers=headers_b).json() == []
    assert [d["title"] for d in client.get("/api/deadlines", headers=headers_a).json()] == titles
