# studyhive/server/api/courses.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, status

from studyhive.server.api.deps import get_current_user_id, get_courses, server_errors
from studyhive.server.core.errors import ValidationError
from studyhive.server.core.owned import OwnedCollection
from studyhive.server.core.timeutil import utc_now


router = APIRouter(prefix="/api/courses")

DEFAULT_COLOR = "#3b82f6"


class CreateCourseRequest(BaseModel):
    name: str | None = None
    color: str | None = None
    description: str | None = None


def serialize_course(record: dict) -> dict:
    return {
        "id": record["id"],
        "userId": record["user_id"],
        "name": record["name"],
        "color": record.get("color") or DEFAULT_COLOR,
        "description": record.get("description") or "",
        "progress": record.get("progress") or 0,
        "createdAt": record["created_at"],
    }


@router.get("")
def list_courses(
    user_id: str = Depends(get_current_user_id),
    courses: OwnedCollection = Depends(get_courses),
):
    with server_errors("Get courses"):
        return [serialize_course(c) for c in courses.list(user_id)]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_course(
    req: CreateCourseRequest,
    user_id: str = Depends(get_current_user_id),
    courses: OwnedCollection = Depends(get_courses),
):
    with server_errors("Create course"):
        if not req.name:
            raise ValidationError("Course name is required")

        record = courses.create(user_id, {
            "name": req.name.strip(),
            "color": req.color or DEFAULT_COLOR,
            "description": req.description.strip() if req.description else "",
            "progress": 0,
            "created_at": utc_now(),
        })
        return serialize_course(record)
