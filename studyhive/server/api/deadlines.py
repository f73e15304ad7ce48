# studyhive/server/api/deadlines.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, Response, status

from studyhive.server.api.deps import get_current_user_id, get_deadlines, server_errors
from studyhive.server.core.errors import ValidationError
from studyhive.server.core.owned import OwnedCollection
from studyhive.server.core.timeutil import parse_iso, to_iso, utc_now


router = APIRouter(prefix="/api/deadlines")

PRIORITIES = ("low", "medium", "high")


class DeadlineCreateRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    courseId: str | None = None
    dueDate: str | None = None
    priority: str | None = None


class DeadlineUpdateRequest(BaseModel):
    """
    Partial update; only the fields present in the body are applied.
    """
    title: str | None = None
    description: str | None = None
    courseId: str | None = None
    dueDate: str | None = None
    priority: str | None = None
    completed: bool | None = None


def serialize_deadline(record: dict) -> dict:
    return {
        "id": record["id"],
        "userId": record["user_id"],
        "title": record["title"],
        "description": record.get("description") or "",
        "courseId": record.get("course_id"),
        "dueDate": record["due_date"],
        "priority": record.get("priority") or "medium",
        "completed": bool(record.get("completed")),
        "createdAt": record["created_at"],
        "updatedAt": record.get("updated_at"),
    }


def normalize_due_date(value: str) -> str:
    try:
        return to_iso(parse_iso(value))
    except ValueError:
        raise ValidationError("Due date must be a valid date")


def check_priority(value: str) -> str:
    if value not in PRIORITIES:
        raise ValidationError("Priority must be one of: low, medium, high")
    return value


@router.get("")
def list_deadlines(
    user_id: str = Depends(get_current_user_id),
    deadlines: OwnedCollection = Depends(get_deadlines),
):
    with server_errors("Get deadlines"):
        return [serialize_deadline(d) for d in deadlines.list(user_id)]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_deadline(
    req: DeadlineCreateRequest,
    user_id: str = Depends(get_current_user_id),
    deadlines: OwnedCollection = Depends(get_deadlines),
):
    with server_errors("Create deadline"):
        if not req.title or not req.dueDate:
            raise ValidationError("Title and due date are required")

        record = deadlines.create(user_id, {
            "title": req.title.strip(),
            "description": req.description.strip() if req.description else "",
            "course_id": req.courseId or None,
            "due_date": normalize_due_date(req.dueDate),
            "priority": check_priority(req.priority) if req.priority else "medium",
            "completed": False,
            "created_at": utc_now(),
            "updated_at": None,
        })
        return serialize_deadline(record)


@router.put("/{deadline_id}")
def update_deadline(
    deadline_id: str,
    req: DeadlineUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    deadlines: OwnedCollection = Depends(get_deadlines),
):
    with server_errors("Update deadline"):
        provided = req.model_dump(exclude_unset=True)
        changes = {}
        if "title" in provided and provided["title"] is not None:
            changes["title"] = provided["title"].strip()
        if "description" in provided:
            changes["description"] = (provided["description"] or "").strip()
        if "courseId" in provided:
            changes["course_id"] = provided["courseId"] or None
        if provided.get("dueDate"):
            changes["due_date"] = normalize_due_date(provided["dueDate"])
        if provided.get("priority"):
            changes["priority"] = check_priority(provided["priority"])
        if provided.get("completed") is not None:
            changes["completed"] = provided["completed"]

        return serialize_deadline(deadlines.update(deadline_id, user_id, changes))


@router.delete("/{deadline_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_deadline(
    deadline_id: str,
    user_id: str = Depends(get_current_user_id),
    deadlines: OwnedCollection = Depends(get_deadlines),
):
    with server_errors("Delete deadline"):
        deadlines.delete(deadline_id, user_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
