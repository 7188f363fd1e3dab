from sunescape.models.invite import InviteResponse
from sunescape.models.reservation import Reservation


def _broadcast(reserve, member, **overrides):
    return reserve(member, broadcast_invite=True, invite_note="Come along!", **overrides)


def test_invite_hidden_from_creator_and_shown_to_others(client, alice, bob, reserve):
    res = _broadcast(reserve, alice)
    assert client.get("/invites/", headers=alice.headers).json() == []

    inbox = client.get("/invites/", headers=bob.headers).json()
    assert len(inbox) == 1
    inv = inbox[0]
    assert inv["reservation_id"] == res["id"]
    assert inv["message"] == "Come along!"
    assert inv["start_date"] == "2025-06-01"
    assert inv["end_date"] == "2025-06-03"
    assert inv["creator_email"] == "alice@example.com"
    assert inv["accept_count"] == 0


def test_no_invite_without_broadcast_flag(client, alice, bob, reserve):
    reserve(alice)
    assert client.get("/invites/", headers=bob.headers).json() == []


def test_accept_books_same_dates_for_responder(client, alice, bob, carol, reserve, db):
    _broadcast(reserve, alice)
    invite_id = client.get("/invites/", headers=bob.headers).json()[0]["id"]

    r = client.post(f"/invites/{invite_id}/accept", json={"rooms": 2}, headers=bob.headers)
    assert r.status_code == 200
    booked = r.json()
    assert booked["name"] == "Bob"
    assert booked["created_by"] == bob.id
    assert booked["rooms"] == 2
    assert (booked["start_date"], booked["end_date"]) == ("2025-06-01", "2025-06-03")
    assert db.query(Reservation).count() == 2

    # Answered: gone from Bob's inbox, counted in Carol's
    assert client.get("/invites/", headers=bob.headers).json() == []
    assert client.get("/invites/", headers=carol.headers).json()[0]["accept_count"] == 1


def test_accept_respects_capacity(client, alice, bob, reserve):
    _broadcast(reserve, alice)
    invite_id = client.get("/invites/", headers=bob.headers).json()[0]["id"]
    r = client.post(f"/invites/{invite_id}/accept", json={"rooms": 9}, headers=bob.headers)
    assert r.status_code == 400
    assert r.json()["detail"] == "Rooms must be between 1 and 5."
    # Still pending after a rejected accept
    assert len(client.get("/invites/", headers=bob.headers).json()) == 1


def test_second_response_overwrites(client, alice, bob, reserve, db):
    _broadcast(reserve, alice)
    invite_id = client.get("/invites/", headers=bob.headers).json()[0]["id"]

    r = client.post(f"/invites/{invite_id}/decline", headers=bob.headers)
    assert r.status_code == 200
    assert r.json()["status"] == "declined"
    assert r.json()["rooms_count"] == 0

    client.post(f"/invites/{invite_id}/accept", json={"rooms": 1}, headers=bob.headers)
    rows = db.query(InviteResponse).filter(InviteResponse.invite_id == invite_id).all()
    assert len(rows) == 1
    assert rows[0].status.value == "accepted"
    assert rows[0].rooms_count == 1


def test_creator_cannot_respond(client, alice, bob, reserve):
    _broadcast(reserve, alice)
    invite_id = client.get("/invites/", headers=bob.headers).json()[0]["id"]
    assert client.post(f"/invites/{invite_id}/decline", headers=alice.headers).status_code == 400
    assert client.post("/invites/999/decline", headers=bob.headers).status_code == 404


def test_broadcast_emails_everyone_but_creator(client, alice, bob, carol, reserve, sent_emails):
    _broadcast(reserve, alice)
    invite_mail = [m for m in sent_emails if m["subject"] == "Alice invited you to stay at SunEscape"]
    assert sorted(m["to"] for m in invite_mail) == ["bob@example.com", "carol@example.com"]
    assert "Come along!" in invite_mail[0]["html"]


def test_editing_never_broadcasts(client, alice, bob, reserve, sent_emails):
    res = reserve(alice)
    payload = {"name": "Trip", "start_date": "2025-06-01", "end_date": "2025-06-04", "rooms": 1, "broadcast_invite": True}
    assert client.put(f"/reservations/{res['id']}", json=payload, headers=alice.headers).status_code == 200
    assert client.get("/invites/", headers=bob.headers).json() == []
    assert sent_emails == []


def test_repeat_accept_does_not_book_twice(client, alice, bob, reserve, db):
    _broadcast(reserve, alice)
    invite_id = client.get("/invites/", headers=bob.headers).json()[0]["id"]

    assert client.post(f"/invites/{invite_id}/accept", json={"rooms": 2}, headers=bob.headers).status_code == 200
    r = client.post(f"/invites/{invite_id}/accept", json={"rooms": 1}, headers=bob.headers)
    assert r.status_code == 409
    assert db.query(Reservation).filter(Reservation.created_by == bob.id).count() == 1

    day = client.get("/calendar/day/2025-06-02", headers=bob.headers).json()
    assert day["availability"]["used"] == 3


def test_decline_after_accept_is_rejected(client, alice, bob, carol, reserve, db):
    _broadcast(reserve, alice)
    invite_id = client.get("/invites/", headers=bob.headers).json()[0]["id"]
    client.post(f"/invites/{invite_id}/accept", json={"rooms": 2}, headers=bob.headers)

    r = client.post(f"/invites/{invite_id}/decline", headers=bob.headers)
    assert r.status_code == 409
    row = db.query(InviteResponse).filter(InviteResponse.invite_id == invite_id).one()
    assert (row.status.value, row.rooms_count) == ("accepted", 2)
    assert db.query(Reservation).filter(Reservation.created_by == bob.id).count() == 1
    assert client.get("/invites/", headers=carol.headers).json()[0]["accept_count"] == 1
