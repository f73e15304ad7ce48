"""
Shared helpers for the API tests.
"""

STRONG_PASSWORD = "Str0ng!Pass"


def register(client, email="ada@example.com", name="Ada Lovelace", password=STRONG_PASSWORD):
    res = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
    assert res.status_code == 201, res.text
    return res.json()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
