from sunescape.models.join_request import JoinRequest
from sunescape.models.ledger import ReservationGuest
from sunescape.models.profile import Profile
from sunescape.services.join_requests import submit_join_request
from sunescape.services.result import ErrorKind


def _request(client, member, reservation_id, rooms=2, message="need space"):
    return client.post(
        f"/reservations/{reservation_id}/join-requests",
        json={"rooms_needed": rooms, "message": message},
        headers=member.headers,
    )


def test_approve_creates_exactly_one_guest(client, alice, bob, reserve, db):
    res = reserve(alice)
    r = _request(client, bob, res["id"])
    assert r.status_code == 200
    jr = r.json()
    assert jr["status"] == "pending"
    assert jr["message"] == "need space"

    pending = client.get(f"/reservations/{res['id']}/join-requests", headers=alice.headers).json()
    assert [p["requester_name"] for p in pending] == ["Bob"]

    r = client.post(f"/join-requests/{jr['id']}/approve", headers=alice.headers)
    assert r.status_code == 200
    assert r.json()["user_id"] == bob.id
    assert r.json()["count"] == 2
    assert r.json()["name"] == "Bob"

    guests = db.query(ReservationGuest).filter(ReservationGuest.reservation_id == res["id"]).all()
    assert len(guests) == 1
    assert (guests[0].user_id, guests[0].count) == (bob.id, 2)
    assert db.query(JoinRequest).first().status.value == "approved"

    # Decided: no longer pending, cannot be approved twice
    assert client.get(f"/reservations/{res['id']}/join-requests", headers=alice.headers).json() == []
    assert client.post(f"/join-requests/{jr['id']}/approve", headers=alice.headers).status_code == 400
    assert db.query(ReservationGuest).count() == 1


def test_duplicate_request_is_a_conflict(client, alice, bob, reserve, db):
    res = reserve(alice)
    assert _request(client, bob, res["id"]).status_code == 200
    r = _request(client, bob, res["id"], rooms=1)
    assert r.status_code == 409
    assert r.json()["detail"] == "You already sent a request for this reservation."
    assert db.query(JoinRequest).count() == 1


def test_owner_cannot_request_own_reservation(client, alice, reserve):
    res = reserve(alice)
    assert _request(client, alice, res["id"]).status_code == 400


def test_deny_creates_no_guest(client, alice, bob, reserve, db):
    res = reserve(alice)
    jr = _request(client, bob, res["id"]).json()
    r = client.post(f"/join-requests/{jr['id']}/deny", headers=alice.headers)
    assert r.status_code == 200
    assert r.json()["status"] == "denied"
    assert db.query(ReservationGuest).count() == 0


def test_only_owner_or_admin_decides(client, alice, bob, carol, admin, reserve):
    res = reserve(alice)
    jr = _request(client, bob, res["id"]).json()
    assert client.get(f"/reservations/{res['id']}/join-requests", headers=carol.headers).status_code == 403
    assert client.post(f"/join-requests/{jr['id']}/approve", headers=carol.headers).status_code == 403
    assert client.post(f"/join-requests/{jr['id']}/approve", headers=bob.headers).status_code == 403
    assert client.post(f"/join-requests/{jr['id']}/approve", headers=admin.headers).status_code == 200


def test_my_requests_flag_already_requested(client, alice, bob, reserve):
    res = reserve(alice)
    _request(client, bob, res["id"])
    mine = client.get("/join-requests/mine", headers=bob.headers).json()
    assert mine == [{"reservation_id": res["id"], "status": "pending"}]
    assert client.get("/join-requests/mine", headers=alice.headers).json() == []


def test_emails_go_to_owner_then_requester(client, alice, bob, carol, reserve, sent_emails):
    res = reserve(alice, name="Beach week")
    jr = _request(client, bob, res["id"]).json()
    assert [(m["to"], m["subject"]) for m in sent_emails] == [
        ("alice@example.com", "Bob wants to join your SunEscape reservation"),
    ]
    client.post(f"/join-requests/{jr['id']}/approve", headers=alice.headers)
    assert sent_emails[-1]["to"] == "bob@example.com"
    assert sent_emails[-1]["subject"] == 'Your request to join "Beach week" was approved!'


def test_denied_email_subject(client, alice, bob, reserve, sent_emails):
    res = reserve(alice, name="Beach week")
    jr = _request(client, bob, res["id"]).json()
    client.post(f"/join-requests/{jr['id']}/deny", headers=alice.headers)
    assert sent_emails[-1]["to"] == "bob@example.com"
    assert sent_emails[-1]["subject"] == 'Update on your request to join "Beach week"'


def test_rooms_needed_must_be_positive(client, alice, bob, reserve, db):
    res = reserve(alice)
    assert _request(client, bob, res["id"], rooms=0).status_code == 422

    requester = db.query(Profile).filter(Profile.id == bob.id).first()
    result = submit_join_request(db, requester, res["id"], rooms_needed=0)
    assert not result.ok
    assert result.kind == ErrorKind.validation
    assert db.query(JoinRequest).count() == 0
