# studyhive/app/services/state.py

import logging
import uuid
from copy import deepcopy

from studyhive.app.services import api as default_api
from studyhive.server.core.stats import session_xp, study_data
from studyhive.server.core.timeutil import parse_iso, utc_now


logger = logging.getLogger(__name__)


EMPTY_STUDY_DATA = {
    "totalXP": 0,
    "studyStreak": 0,
    "hoursStudied": "0.0",
    "goalsCompleted": 0,
}

# Shown when the user asks for demo data instead of a live backend.
SAMPLE_COURSES = [
    {"id": "1", "name": "Mathematics", "color": "#3b82f6", "description": "Advanced calculus and algebra", "progress": 75},
    {"id": "2", "name": "Physics", "color": "#ef4444", "description": "Classical mechanics and thermodynamics", "progress": 45},
    {"id": "3", "name": "Computer Science", "color": "#10b981", "description": "Data structures and algorithms", "progress": 90},
]

SAMPLE_DEADLINES = [
    {"id": "1", "title": "Calculus Final Exam", "description": "Comprehensive exam covering all topics from calculus I and II", "courseId": None, "dueDate": "2025-12-15T00:00:00.000Z", "priority": "high", "completed": False},
    {"id": "2", "title": "Physics Lab Report", "description": "Write up the pendulum experiment with detailed analysis", "courseId": None, "dueDate": "2025-11-20T00:00:00.000Z", "priority": "medium", "completed": False},
    {"id": "3", "title": "Programming Assignment", "description": "Implement binary search tree with full documentation", "courseId": None, "dueDate": "2024-12-05T00:00:00.000Z", "priority": "low", "completed": True},
]

SAMPLE_STUDY_SESSIONS = [
    {"id": "1", "courseId": "1", "duration": 120, "notes": "Reviewed derivatives and integrals", "xpEarned": 120, "date": "2024-01-08T00:00:00.000Z"},
    {"id": "2", "courseId": "2", "duration": 90, "notes": "Studied Newton's laws", "xpEarned": 90, "date": "2024-01-07T00:00:00.000Z"},
    {"id": "3", "courseId": "3", "duration": 180, "notes": "Implemented sorting algorithms", "xpEarned": 180, "date": "2024-01-06T00:00:00.000Z"},
]


def _local_id():
    return f"local-{uuid.uuid4()}"


def _due_key(deadline):
    try:
        return parse_iso(deadline["dueDate"])
    except (KeyError, TypeError, ValueError):
        return parse_iso("9999-12-31")


class StudyState:
    """
    Client-side mirror of one user's courses, deadlines and study sessions.

    The server is the source of truth. Mutations are applied locally first
    so the UI updates immediately, then sent to the server; the server's
    record replaces the local placeholder on success and the previous
    state is restored on failure (the ApiError is re-raised).

    Courses can only be created on the server; updating and deleting a
    course is local to this mirror.
    """

    def __init__(self, token: str, api=default_api):
        self.token = token
        self.api = api
        self.courses: list[dict] = []
        self.deadlines: list[dict] = []
        self.study_sessions: list[dict] = []
        self.study_data: dict = dict(EMPTY_STUDY_DATA)
        self.loading = False

    # -------------------------------
    # Loading
    # -------------------------------

    def refresh(self):
        self.loading = True
        try:
            courses = self.api.list_courses(self.token)
            deadlines = self.api.list_deadlines(self.token)
            sessions = self.api.list_study_sessions(self.token)
        finally:
            self.loading = False

        self.courses = courses
        self.deadlines = sorted(deadlines, key=_due_key)
        self.study_sessions = sessions
        self.recalculate()

    def load_sample_data(self):
        self.courses = deepcopy(SAMPLE_COURSES)
        self.deadlines = sorted(deepcopy(SAMPLE_DEADLINES), key=_due_key)
        self.study_sessions = deepcopy(SAMPLE_STUDY_SESSIONS)
        self.recalculate()

    def clear(self):
        self.courses = []
        self.deadlines = []
        self.study_sessions = []
        self.study_data = dict(EMPTY_STUDY_DATA)

    def recalculate(self):
        self.study_data = study_data(self.study_sessions, self.deadlines)

    def _snapshot(self):
        return deepcopy((self.courses, self.deadlines, self.study_sessions))

    def _restore(self, snapshot):
        self.courses, self.deadlines, self.study_sessions = snapshot
        self.recalculate()

    def _replace(self, items, local_id, record):
        return [record if item["id"] == local_id else item for item in items]

    # -------------------------------
    # Courses
    # -------------------------------

    def add_course(self, name, color="#3b82f6", description=""):
        snapshot = self._snapshot()
        placeholder = {
            "id": _local_id(),
            "name": name,
            "color": color,
            "description": description or "",
            "progress": 0,
        }
        self.courses = [placeholder, *self.courses]
        try:
            record = self.api.create_course(self.token, {
                "name": name,
                "color": color,
                "description": description,
            })
        except Exception:
            logger.exception("Error adding course")
            self._restore(snapshot)
            raise
        self.courses = self._replace(self.courses, placeholder["id"], record)
        return record

    def update_course(self, course_id, updates):
        self.courses = [
            {**course, **updates, "id": course["id"]} if course["id"] == course_id else course
            for course in self.courses
        ]

    def delete_course(self, course_id):
        self.courses = [c for c in self.courses if c["id"] != course_id]

    # -------------------------------
    # Deadlines
    # -------------------------------

    def add_deadline(self, title, due_date, description="", course_id=None, priority="medium"):
        snapshot = self._snapshot()
        payload = {
            "title": title,
            "description": description,
            "courseId": course_id,
            "dueDate": due_date,
            "priority": priority,
        }
        placeholder = {**payload, "id": _local_id(), "completed": False}
        self.deadlines = sorted([*self.deadlines, placeholder], key=_due_key)
        try:
            record = self.api.create_deadline(self.token, payload)
        except Exception:
            logger.exception("Error adding deadline")
            self._restore(snapshot)
            raise
        self.deadlines = sorted(self._replace(self.deadlines, placeholder["id"], record), key=_due_key)
        return record

    def update_deadline(self, deadline_id, updates):
        snapshot = self._snapshot()
        self.deadlines = sorted(
            [
                {**d, **updates, "id": d["id"]} if d["id"] == deadline_id else d
                for d in self.deadlines
            ],
            key=_due_key,
        )
        self.recalculate()
        try:
            record = self.api.update_deadline(self.token, deadline_id, updates)
        except Exception:
            logger.exception("Error updating deadline")
            self._restore(snapshot)
            raise
        self.deadlines = sorted(self._replace(self.deadlines, deadline_id, record), key=_due_key)
        self.recalculate()
        return record

    def toggle_deadline(self, deadline_id):
        for deadline in self.deadlines:
            if deadline["id"] == deadline_id:
                return self.update_deadline(deadline_id, {"completed": not deadline["completed"]})
        raise KeyError(deadline_id)

    def delete_deadline(self, deadline_id):
        snapshot = self._snapshot()
        self.deadlines = [d for d in self.deadlines if d["id"] != deadline_id]
        self.recalculate()
        try:
            self.api.delete_deadline(self.token, deadline_id)
        except Exception:
            logger.exception("Error deleting deadline")
            self._restore(snapshot)
            raise

    def upcoming_deadlines(self, limit=3):
        return [d for d in self.deadlines if not d["completed"]][:limit]

    # -------------------------------
    # Study Sessions
    # -------------------------------

    def add_study_session(self, course_id, duration, notes=""):
        snapshot = self._snapshot()
        placeholder = {
            "id": _local_id(),
            "courseId": course_id,
            "duration": duration,
            "notes": notes or "",
            "xpEarned": session_xp(duration),
            "date": utc_now(),
        }
        self.study_sessions = [placeholder, *self.study_sessions]
        self.recalculate()
        try:
            record = self.api.create_study_session(self.token, {
                "courseId": course_id,
                "duration": duration,
                "notes": notes,
            })
        except Exception:
            logger.exception("Error adding study session")
            self._restore(snapshot)
            raise
        self.study_sessions = self._replace(self.study_sessions, placeholder["id"], record)
        self.recalculate()
        return record

    # -------------------------------
    # Derived values
    # -------------------------------

    def overall_progress(self):
        if not self.courses:
            return 0
        return round(sum(c.get("progress") or 0 for c in self.courses) / len(self.courses))

    def achievements(self):
        data = self.study_data
        return [
            {"name": "First Steps", "description": "Complete your first study session", "earned": data["totalXP"] > 0},
            {"name": "Streak Master", "description": "Maintain a 7-day study streak", "earned": data["studyStreak"] >= 7},
            {"name": "Goal Crusher", "description": "Complete 5 deadlines", "earned": data["goalsCompleted"] >= 5},
            {"name": "Time Warrior", "description": "Study for 10 hours", "earned": float(data["hoursStudied"]) >= 10},
        ]
