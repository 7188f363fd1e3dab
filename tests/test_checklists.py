def test_groceries_newest_first_and_toggle(client, alice):
    client.post("/lists/groceries", json={"title": "Milk"}, headers=alice.headers)
    item = client.post("/lists/groceries", json={"title": "Eggs", "owner": "Tom"}, headers=alice.headers).json()
    assert item["completed"] is False
    assert item["owner"] == "Tom"

    r = client.get("/lists/groceries", headers=alice.headers)
    assert [i["title"] for i in r.json()] == ["Eggs", "Milk"]

    toggled = client.post(f"/lists/groceries/{item['id']}/toggle", headers=alice.headers).json()
    assert toggled["completed"] is True
    toggled = client.post(f"/lists/groceries/{item['id']}/toggle", headers=alice.headers).json()
    assert toggled["completed"] is False


def test_lists_are_separate(client, alice):
    client.post("/lists/todos", json={"title": "Fix gate"}, headers=alice.headers)
    assert client.get("/lists/groceries", headers=alice.headers).json() == []
    assert [t["title"] for t in client.get("/lists/todos", headers=alice.headers).json()] == ["Fix gate"]


def test_title_required(client, alice):
    assert client.post("/lists/todos", json={"title": "  "}, headers=alice.headers).status_code == 400


def test_unknown_list(client, alice):
    assert client.get("/lists/chores", headers=alice.headers).status_code == 404


def test_only_creator_or_admin_changes_item(client, alice, bob, admin):
    item = client.post("/lists/todos", json={"title": "Sweep porch"}, headers=alice.headers).json()
    assert client.post(f"/lists/todos/{item['id']}/toggle", headers=bob.headers).status_code == 403
    assert client.delete(f"/lists/todos/{item['id']}", headers=bob.headers).status_code == 403
    assert client.post(f"/lists/todos/{item['id']}/toggle", headers=admin.headers).status_code == 200
    assert client.delete(f"/lists/todos/{item['id']}", headers=admin.headers).json() == {"ok": True}
    assert client.get("/lists/todos", headers=alice.headers).json() == []
