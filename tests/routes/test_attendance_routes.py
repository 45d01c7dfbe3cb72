from app.extensions import db
from app.models import AbsenceRequest, Attendance
from app.models.enums import AttendanceStatus, MeetingType
from app.services.security import generate_auth_token


def test_remaining_absences_requires_login(client, member_user):
    response = client.get(f"/api/attendance/user/{member_user.id}/remaining-absences")
    assert response.status_code == 401
    assert response.get_json() == {"error": "Unauthorized"}


def test_member_reads_own_remaining_absences(
    member_client, member_user, make_meeting, make_attendance
):
    make_attendance(member_user, make_meeting(hours_from_now=-48), AttendanceStatus.UNEXCUSED_ABSENCE)
    make_attendance(
        member_user,
        make_meeting(hours_from_now=-24, meeting_type=MeetingType.FULL_BODY),
        AttendanceStatus.UNEXCUSED_ABSENCE,
    )

    response = member_client.get(f"/api/attendance/user/{member_user.id}/remaining-absences")

    assert response.status_code == 200
    assert response.get_json() == {
        "regular": {"used": 1, "allowed": 3, "remaining": 2},
        "fullBody": {"used": 1, "allowed": 1, "remaining": 0},
    }


def test_member_cannot_read_other_members_absences(member_client, other_member):
    response = member_client.get(f"/api/attendance/user/{other_member.id}/remaining-absences")
    assert response.status_code == 403


def test_eboard_reads_any_members_absences(eboard_client, member_user):
    response = eboard_client.get(f"/api/attendance/user/{member_user.id}/remaining-absences")
    assert response.status_code == 200
    assert response.get_json()["regular"]["remaining"] == 3


def test_bearer_token_authenticates(app, client, member_user):
    token = generate_auth_token(member_user.auth_id)
    response = client.get(
        f"/api/attendance/user/{member_user.id}",
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 200
    assert response.get_json() == []


def test_bad_bearer_token_is_unauthorized(client, member_user):
    response = client.get(
        f"/api/attendance/user/{member_user.id}",
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == 401


def test_create_request_close_to_meeting_is_late(
    member_client, member_user, make_meeting, make_attendance
):
    attendance = make_attendance(member_user, make_meeting(hours_from_now=6))

    response = member_client.post(
        f"/api/attendance/{attendance.id}/requests",
        json={"reason": "Lab exam", "attendanceMode": "ONLINE"},
    )

    assert response.status_code == 201
    body = response.get_json()
    assert body["isLate"] is True
    assert body["attendanceId"] == attendance.id
    assert body["timeAdjustment"] is None


def test_create_request_well_ahead_is_not_late(
    member_client, member_user, make_meeting, make_attendance
):
    attendance = make_attendance(member_user, make_meeting(hours_from_now=48))

    response = member_client.post(
        f"/api/attendance/{attendance.id}/requests",
        json={
            "reason": "Interview",
            "attendanceMode": "IN_PERSON",
            "timeAdjustment": "ARRIVING_LATE",
        },
    )

    assert response.status_code == 201
    assert response.get_json()["isLate"] is False


def test_create_request_validation(member_client, member_user, make_meeting, make_attendance):
    attendance = make_attendance(member_user, make_meeting())

    missing = member_client.post(
        f"/api/attendance/{attendance.id}/requests", json={"attendanceMode": "ONLINE"}
    )
    assert missing.status_code == 400

    bad_mode = member_client.post(
        f"/api/attendance/{attendance.id}/requests",
        json={"reason": "Trip", "attendanceMode": "TELEPATHY"},
    )
    assert bad_mode.status_code == 400

    not_json = member_client.post(
        f"/api/attendance/{attendance.id}/requests", data="reason=Trip"
    )
    assert not_json.status_code == 400


def test_create_request_for_unknown_attendance(member_client):
    response = member_client.post(
        "/api/attendance/missing/requests",
        json={"reason": "Trip", "attendanceMode": "ONLINE"},
    )
    assert response.status_code == 404


def test_create_request_for_someone_else_is_forbidden(
    member_client, other_member, make_meeting, make_attendance
):
    attendance = make_attendance(other_member, make_meeting())
    response = member_client.post(
        f"/api/attendance/{attendance.id}/requests",
        json={"reason": "Trip", "attendanceMode": "ONLINE"},
    )
    assert response.status_code == 403


def test_corrupt_meeting_schedule_is_server_error(
    member_client, member_user, make_meeting, make_attendance
):
    meeting = make_meeting()
    meeting.start_time = "after lunch"
    db.session.commit()
    attendance = make_attendance(member_user, meeting)

    response = member_client.post(
        f"/api/attendance/{attendance.id}/requests",
        json={"reason": "Trip", "attendanceMode": "ONLINE"},
    )

    assert response.status_code == 500
    assert "after lunch" in response.get_json()["error"]
    assert AbsenceRequest.query.count() == 0


def _file_request(client, attendance):
    response = client.post(
        f"/api/attendance/{attendance.id}/requests",
        json={"reason": "Conference", "attendanceMode": "ONLINE"},
    )
    assert response.status_code == 201
    return response.get_json()["requestId"]


def test_eboard_approves_request_through_status_update(
    member_client, eboard_client, member_user, make_meeting, make_attendance
):
    attendance = make_attendance(member_user, make_meeting())
    request_id = _file_request(member_client, attendance)

    response = eboard_client.put(
        "/api/attendance/status",
        json={"requestId": request_id, "status": "EXCUSED_ABSENCE"},
    )

    assert response.status_code == 200
    assert response.get_json()["status"] == "EXCUSED_ABSENCE"
    assert db.session.get(Attendance, attendance.id).status == "EXCUSED_ABSENCE"


def test_status_update_rejects_unknown_status(
    member_client, eboard_client, member_user, make_meeting, make_attendance
):
    attendance = make_attendance(member_user, make_meeting())
    request_id = _file_request(member_client, attendance)

    response = eboard_client.put(
        "/api/attendance/status", json={"requestId": request_id, "status": "APPROVED"}
    )

    assert response.status_code == 400
    assert "Invalid attendance status" in response.get_json()["error"]


def test_status_update_requires_fields_and_eboard(member_client, eboard_client):
    assert eboard_client.put("/api/attendance/status", json={"status": "PRESENT"}).status_code == 400
    assert (
        eboard_client.put(
            "/api/attendance/status", json={"requestId": "missing", "status": "PRESENT"}
        ).status_code
        == 404
    )
    assert (
        member_client.put(
            "/api/attendance/status", json={"requestId": "x", "status": "PRESENT"}
        ).status_code
        == 403
    )


def test_check_in_upserts(eboard_client, member_user, make_meeting):
    meeting = make_meeting()
    payload = {"userId": member_user.id, "meetingId": meeting.id, "status": "PENDING"}

    first = eboard_client.post("/api/attendance/check-in", json=payload)
    second = eboard_client.post(
        "/api/attendance/check-in", json={**payload, "status": "PRESENT"}
    )

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.get_json()["attendanceId"] == first.get_json()["attendanceId"]
    assert second.get_json()["status"] == "PRESENT"
    assert Attendance.query.filter_by(meeting_id=meeting.id).count() == 1


def test_check_in_by_email(eboard_client, member_user, make_meeting, make_attendance):
    attendance = make_attendance(member_user, make_meeting())

    response = eboard_client.post(
        "/api/attendance/check-in",
        json={"email": member_user.email, "attendanceId": attendance.id, "status": "PRESENT"},
    )

    assert response.status_code == 200
    assert response.get_json()["status"] == "PRESENT"


def test_patch_and_delete_attendance(eboard_client, member_user, make_meeting, make_attendance):
    attendance = make_attendance(member_user, make_meeting())

    bad = eboard_client.patch(f"/api/attendance/{attendance.id}", json={"status": "LATE"})
    assert bad.status_code == 400

    ok = eboard_client.patch(f"/api/attendance/{attendance.id}", json={"status": "PRESENT"})
    assert ok.status_code == 200
    assert ok.get_json()["status"] == "PRESENT"

    deleted = eboard_client.delete(f"/api/attendance/{attendance.id}")
    assert deleted.status_code == 204
    assert eboard_client.delete(f"/api/attendance/{attendance.id}").status_code == 404


def test_create_attendance(eboard_client, member_user, make_meeting):
    meeting = make_meeting()
    response = eboard_client.post(
        "/api/attendance",
        json={"userId": member_user.id, "meetingId": meeting.id, "status": "PRESENT"},
    )
    assert response.status_code == 201

    duplicate = eboard_client.post(
        "/api/attendance",
        json={"userId": member_user.id, "meetingId": meeting.id, "status": "PENDING"},
    )
    assert duplicate.status_code == 400


def test_user_request_listing_includes_status(
    member_client, member_user, make_meeting, make_attendance
):
    attendance = make_attendance(member_user, make_meeting())
    request_id = _file_request(member_client, attendance)

    response = member_client.get(f"/api/attendance/user/requests/{member_user.id}")

    assert response.status_code == 200
    body = response.get_json()
    assert [item["requestId"] for item in body] == [request_id]
    assert body[0]["attendanceStatus"] == "PENDING"
    assert body[0]["attendance"]["meeting"]["meetingId"] == attendance.meeting_id


def test_blank_status_is_an_invalid_status(
    member_client, eboard_client, member_user, make_meeting, make_attendance
):
    attendance = make_attendance(member_user, make_meeting())
    request_id = _file_request(member_client, attendance)

    patched = eboard_client.patch(f"/api/attendance/{attendance.id}", json={"status": ""})
    assert patched.status_code == 400
    assert patched.get_json()["error"] == "Invalid attendance status: "

    resolved = eboard_client.put(
        "/api/attendance/status", json={"requestId": request_id, "status": ""}
    )
    assert resolved.status_code == 400
    assert resolved.get_json()["error"] == "Invalid attendance status: "
    assert db.session.get(Attendance, attendance.id).status == "PENDING"


def test_check_in_by_email_ignores_case(eboard_client, member_user, make_meeting, make_attendance):
    attendance = make_attendance(member_user, make_meeting())

    response = eboard_client.post(
        "/api/attendance/check-in",
        json={"email": "Member@EXAMPLE.com", "attendanceId": attendance.id, "status": "PRESENT"},
    )

    assert response.status_code == 200
    assert response.get_json()["status"] == "PRESENT"
