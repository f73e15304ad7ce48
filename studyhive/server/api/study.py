# studyhive/server/api/study.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, status

from studyhive.server.api.deadlines import serialize_deadline
from studyhive.server.api.deps import (
    get_current_user_id,
    get_deadlines,
    get_study_sessions,
    server_errors,
)
from studyhive.server.core.errors import ValidationError
from studyhive.server.core.owned import OwnedCollection
from studyhive.server.core.stats import session_xp, study_data
from studyhive.server.core.timeutil import utc_now


router = APIRouter(prefix="/api")


class StudySessionRequest(BaseModel):
    courseId: str | None = None
    duration: int | str | None = None
    notes: str | None = None


def serialize_session(record: dict) -> dict:
    return {
        "id": record["id"],
        "userId": record["user_id"],
        "courseId": record["course_id"],
        "duration": record["duration"],
        "notes": record.get("notes") or "",
        "xpEarned": record.get("xp_earned") or 0,
        "date": record["date"],
    }


def parse_duration(value: int | str) -> int:
    try:
        minutes = int(str(value).strip())
    except ValueError:
        raise ValidationError("Duration must be a whole number of minutes")
    if minutes <= 0:
        raise ValidationError("Duration must be a positive number of minutes")
    return minutes


# -------------------------------
# Study Sessions
# -------------------------------

@router.get("/study-sessions")
def list_study_sessions(
    user_id: str = Depends(get_current_user_id),
    sessions: OwnedCollection = Depends(get_study_sessions),
):
    with server_errors("Get study sessions"):
        return [serialize_session(s) for s in sessions.list(user_id)]


@router.post("/study-sessions", status_code=status.HTTP_201_CREATED)
def create_study_session(
    req: StudySessionRequest,
    user_id: str = Depends(get_current_user_id),
    sessions: OwnedCollection = Depends(get_study_sessions),
):
    with server_errors("Create study session"):
        if not req.courseId or req.duration in (None, "", 0):
            raise ValidationError("Course and duration are required")

        duration = parse_duration(req.duration)
        record = sessions.create(user_id, {
            "course_id": req.courseId,
            "duration": duration,
            "notes": req.notes.strip() if req.notes else "",
            "xp_earned": session_xp(duration),
            "date": utc_now(),
        })
        return serialize_session(record)


# -------------------------------
# Aggregates
# -------------------------------

@router.get("/study-data")
def get_study_data(
    user_id: str = Depends(get_current_user_id),
    sessions: OwnedCollection = Depends(get_study_sessions),
    deadlines: OwnedCollection = Depends(get_deadlines),
):
    with server_errors("Get study data"):
        return study_data(
            [serialize_session(s) for s in sessions.list(user_id)],
            [serialize_deadline(d) for d in deadlines.list(user_id)],
        )
