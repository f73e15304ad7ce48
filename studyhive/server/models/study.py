# studyhive/server/models/study.py

from sqlalchemy import Column, Integer, String, Text, Boolean
from . import Base


# Timestamps are ISO-8601 strings so that both stores hand out identical records.
# seq only orders rows by insertion; records are addressed by id.

class Deadline(Base):
    __tablename__ = "deadlines"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False)
    user_id = Column(String, index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, default="")
    course_id = Column(String, nullable=True)
    due_date = Column(String, nullable=False)
    priority = Column(String, default="medium")
    completed = Column(Boolean, default=False)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=True)


class Course(Base):
    __tablename__ = "courses"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False)
    user_id = Column(String, index=True, nullable=False)
    name = Column(String, nullable=False)
    color = Column(String, default="#3b82f6")
    description = Column(Text, default="")
    progress = Column(Integer, default=0)
    created_at = Column(String, nullable=False)


class StudySession(Base):
    __tablename__ = "study_sessions"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False)
    user_id = Column(String, index=True, nullable=False)
    course_id = Column(String, nullable=False)
    duration = Column(Integer, nullable=False)
    notes = Column(Text, default="")
    xp_earned = Column(Integer, default=0)
    date = Column(String, nullable=False)
