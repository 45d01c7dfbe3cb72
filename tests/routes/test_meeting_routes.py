from app.models import Attendance, Meeting


def _meeting_payload(**overrides):
    payload = {
        "name": "Budget Review",
        "date": "2030-03-14",
        "startTime": "18:00",
        "endTime": "19:30",
        "notes": "Bring receipts",
        "type": "FULL_BODY",
    }
    payload.update(overrides)
    return payload


def test_eboard_creates_meeting_with_pending_attendees(
    eboard_client, member_user, other_member
):
    response = eboard_client.post(
        "/api/meeting",
        json=_meeting_payload(attendeeIds=[member_user.id, other_member.id, member_user.id]),
    )

    assert response.status_code == 201
    body = response.get_json()
    assert body["type"] == "FULL_BODY"
    assert sorted(row["userId"] for row in body["attendance"]) == sorted(
        [member_user.id, other_member.id]
    )
    assert {row["status"] for row in body["attendance"]} == {"PENDING"}


def test_member_cannot_create_meeting(member_client):
    response = member_client.post("/api/meeting", json=_meeting_payload())
    assert response.status_code == 403
    assert Meeting.query.count() == 0


def test_create_meeting_validation(eboard_client):
    missing = eboard_client.post("/api/meeting", json={"name": "Only a name"})
    assert missing.status_code == 400
    assert "date" in missing.get_json()["error"]

    unknown_attendee = eboard_client.post(
        "/api/meeting", json=_meeting_payload(attendeeIds=["nobody"])
    )
    assert unknown_attendee.status_code == 404


def test_get_update_and_delete_meeting(
    eboard_client, member_user, make_meeting, make_attendance
):
    meeting = make_meeting()
    make_attendance(member_user, meeting)

    fetched = eboard_client.get(f"/api/meeting/{meeting.id}")
    assert fetched.status_code == 200
    assert fetched.get_json()["name"] == "General Meeting"

    updated = eboard_client.put(
        f"/api/meeting/{meeting.id}", json={"name": "Renamed", "type": "FULL_BODY"}
    )
    assert updated.status_code == 200
    assert updated.get_json()["name"] == "Renamed"
    assert updated.get_json()["type"] == "FULL_BODY"

    users = eboard_client.get(f"/api/meeting/{meeting.id}/users")
    assert [user["userId"] for user in users.get_json()] == [member_user.id]

    deleted = eboard_client.delete(f"/api/meeting/{meeting.id}")
    assert deleted.status_code == 204
    assert Attendance.query.count() == 0
    assert eboard_client.get(f"/api/meeting/{meeting.id}").status_code == 404


def test_members_can_browse_meetings(member_client, make_meeting):
    first = make_meeting(hours_from_now=24, name="First")
    make_meeting(hours_from_now=24, name="Second")

    listed = member_client.get("/api/meeting")
    assert listed.status_code == 200
    assert len(listed.get_json()) == 2

    grouped = member_client.get("/api/meeting/by-date").get_json()
    assert sorted(m["name"] for m in grouped[first.date]) == ["First", "Second"]


def test_unknown_meeting_is_not_found(member_client):
    assert member_client.get("/api/meeting/missing").status_code == 404


def test_attendee_ids_must_be_a_list(eboard_client, member_user):
    for attendee_ids in (5, member_user.id):
        response = eboard_client.post(
            "/api/meeting", json=_meeting_payload(attendeeIds=attendee_ids)
        )
        assert response.status_code == 400
        assert response.get_json()["error"] == "attendeeIds must be a list of user ids"
    assert Meeting.query.count() == 0
