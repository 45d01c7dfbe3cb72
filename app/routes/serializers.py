def _timestamp(value):
    return value.isoformat() if value is not None else None


def role_json(role):
    return {"roleId": role.id, "roleType": role.role_type}


def user_json(user):
    return {
        "userId": user.id,
        "authId": user.auth_id,
        "email": user.email,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "nuid": user.nuid,
        "role": role_json(user.role) if user.role else None,
    }


def user_name_json(user):
    return {"userId": user.id, "firstName": user.first_name, "lastName": user.last_name}


def meeting_json(meeting, include_attendance=False):
    data = {
        "meetingId": meeting.id,
        "name": meeting.name,
        "date": meeting.date,
        "startTime": meeting.start_time,
        "endTime": meeting.end_time,
        "notes": meeting.notes,
        "type": meeting.type,
    }
    if include_attendance:
        data["attendance"] = [
            attendance_json(row, include_user=True) for row in meeting.attendance
        ]
    return data


def request_json(absence_request, include_attendance=False):
    data = {
        "requestId": absence_request.id,
        "attendanceId": absence_request.attendance_id,
        "reason": absence_request.reason,
        "attendanceMode": absence_request.attendance_mode,
        "timeAdjustment": absence_request.time_adjustment,
        "isLate": absence_request.is_late,
        "createdAt": _timestamp(absence_request.created_at),
    }
    if include_attendance:
        data["attendance"] = attendance_json(
            absence_request.attendance, include_user=True, include_meeting=True
        )
    return data


def attendance_json(
    attendance, include_user=False, include_meeting=False, include_request=False
):
    data = {
        "attendanceId": attendance.id,
        "userId": attendance.user_id,
        "meetingId": attendance.meeting_id,
        "status": attendance.status,
    }
    if include_user:
        data["user"] = user_json(attendance.user)
    if include_meeting:
        data["meeting"] = meeting_json(attendance.meeting) if attendance.meeting else None
    if include_request:
        data["request"] = (
            request_json(attendance.request) if attendance.request else None
        )
    return data


def voting_event_json(event, include_records=True):
    data = {
        "votingEventId": event.id,
        "meetingId": event.meeting_id,
        "name": event.name,
        "voteType": event.vote_type,
        "createdAt": _timestamp(event.created_at),
        "updatedAt": _timestamp(event.updated_at),
        "deletedAt": _timestamp(event.deleted_at),
        "updatedBy": event.updated_by,
        "meeting": meeting_json(event.meeting) if event.meeting else None,
    }
    if include_records:
        data["votingRecords"] = [
            voting_record_json(record, include_event=False)
            for record in event.voting_records
        ]
    return data


def voting_record_json(record, include_event=True):
    data = {
        "votingRecordId": record.id,
        "votingEventId": record.voting_event_id,
        "userId": record.user_id,
        "result": record.result,
        "createdAt": _timestamp(record.created_at),
        "updatedBy": record.updated_by,
    }
    if include_event:
        data["votingEvent"] = voting_event_json(record.voting_event, include_records=False)
    return data
