def _register(client, **overrides):
    payload = {
        "first_name": "Dana",
        "last_name": "Ng",
        "email": "Dana@Example.com",
        "password": "hunter22",
        "confirm_password": "hunter22",
    }
    payload.update(overrides)
    return client.post("/auth/register", json=payload)


def test_register_login_me(client):
    r = _register(client)
    assert r.status_code == 200
    profile = r.json()["profile"]
    assert profile["email"] == "dana@example.com"
    assert profile["full_name"] == "Dana Ng"
    assert profile["display_name"] == "Dana"
    assert profile["role"] == "member"

    r = client.post("/auth/login", json={"email": "dana@example.com", "password": "hunter22"})
    assert r.status_code == 200
    headers = {"Authorization": f"Bearer {r.json()['access_token']}"}
    assert client.get("/auth/me", headers=headers).json()["id"] == profile["id"]


def test_register_rules(client):
    assert _register(client, confirm_password="nope").status_code == 422
    assert _register(client, password="abc", confirm_password="abc").status_code == 422
    assert _register(client, first_name=" ").status_code == 422
    assert _register(client).status_code == 200
    assert _register(client).status_code == 400


def test_bad_login_and_token(client):
    _register(client)
    assert client.post("/auth/login", json={"email": "dana@example.com", "password": "wrong"}).status_code == 401
    assert client.get("/auth/me", headers={"Authorization": "Bearer garbage"}).status_code == 401


def test_dashboard_snapshot(client, alice, bob, reserve):
    reserve(bob, broadcast_invite=True)
    mine = reserve(alice, name="Mine", start_date="2025-09-01", end_date="2025-09-02")
    theirs = client.get("/reservations/", headers=alice.headers).json()[0]
    client.post(f"/reservations/{theirs['id']}/join-requests", json={"rooms_needed": 1}, headers=alice.headers)
    client.post("/lists/groceries", json={"title": "Coffee"}, headers=alice.headers)

    snap = client.get("/dashboard", headers=alice.headers).json()
    assert snap["profile"]["email"] == "alice@example.com"
    assert snap["settings"]["total_rooms"] == 5
    assert [r["id"] for r in snap["reservations"]] == [theirs["id"], mine["id"]]
    assert [g["title"] for g in snap["groceries"]] == ["Coffee"]
    assert snap["todos"] == []
    assert snap["my_join_requests"] == [{"reservation_id": theirs["id"], "status": "pending"}]
    assert len(snap["invites"]) == 1


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["app"] == "SunEscape"
