# studyhive/server/models/__init__.py

from sqlalchemy.orm import declarative_base


Base = declarative_base()

from .user import User  # noqa: E402,F401
from .study import Deadline, Course, StudySession  # noqa: E402,F401
