# studyhive/server/core/store.py

import secrets
import string
from copy import deepcopy
from datetime import datetime, timezone
from threading import Lock

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from studyhive.server.models import User, Deadline, Course, StudySession


_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_id() -> str:
    """
    Millisecond timestamp followed by a 9-character random base36 suffix.
    The fixed-width prefix keeps ids sortable by creation time.
    """
    millis = int(datetime.now(timezone.utc).timestamp() * 1000)
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{millis}{suffix}"


# -------------------------------
# Repository interface
# -------------------------------

class Repository:
    """
    Storage for one record type. Records are plain dicts with snake_case
    keys; every record has an 'id' and owned records a 'user_id'.
    Implementations hand out copies, never their internal state.
    """

    def find_by_id(self, record_id: str) -> dict | None:
        raise NotImplementedError

    def find_by_owner(self, owner_id: str) -> list[dict]:
        raise NotImplementedError

    def find_first(self, **criteria) -> dict | None:
        raise NotImplementedError

    def insert(self, record: dict) -> dict:
        raise NotImplementedError

    def insert_unique(self, record: dict, **criteria) -> dict | None:
        """
        Inserts the record unless one matching every criterion already exists.
        Check and insert are a single step; returns None when a match exists.
        """
        raise NotImplementedError

    def update(self, record_id: str, changes: dict) -> dict | None:
        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError


class MemoryRepository(Repository):
    """
    List-backed repository. Insertion order is the listing order.
    """

    def __init__(self):
        self._records: list[dict] = []
        self._lock = Lock()

    def find_by_id(self, record_id):
        with self._lock:
            for record in self._records:
                if record["id"] == record_id:
                    return deepcopy(record)
        return None

    def find_by_owner(self, owner_id):
        with self._lock:
            return [deepcopy(r) for r in self._records if r.get("user_id") == owner_id]

    def find_first(self, **criteria):
        with self._lock:
            for record in self._records:
                if all(record.get(k) == v for k, v in criteria.items()):
                    return deepcopy(record)
        return None

    def insert(self, record):
        with self._lock:
            self._records.append(deepcopy(record))
        return deepcopy(record)

    def insert_unique(self, record, **criteria):
        with self._lock:
            for existing in self._records:
                if all(existing.get(k) == v for k, v in criteria.items()):
                    return None
            self._records.append(deepcopy(record))
        return deepcopy(record)

    def update(self, record_id, changes):
        with self._lock:
            for index, record in enumerate(self._records):
                if record["id"] == record_id:
                    merged = {**record, **deepcopy(changes)}
                    self._records[index] = merged
                    return deepcopy(merged)
        return None

    def delete(self, record_id):
        with self._lock:
            for index, record in enumerate(self._records):
                if record["id"] == record_id:
                    del self._records[index]
                    return True
        return False

    def count(self):
        with self._lock:
            return len(self._records)


class SqlRepository(Repository):
    """
    Repository over one SQLAlchemy model. A session is opened per call.
    """

    def __init__(self, session_factory: sessionmaker, model):
        self.session_factory = session_factory
        self.model = model
        self.columns = [c.name for c in model.__table__.columns if c.name != "seq"]

    def _to_dict(self, row) -> dict:
        return {name: getattr(row, name) for name in self.columns}

    def find_by_id(self, record_id):
        with self.session_factory() as db:
            row = db.query(self.model).filter_by(id=record_id).first()
            return self._to_dict(row) if row else None

    def find_by_owner(self, owner_id):
        with self.session_factory() as db:
            rows = (
                db.query(self.model)
                .filter_by(user_id=owner_id)
                .order_by(self.model.seq.asc())
                .all()
            )
            return [self._to_dict(row) for row in rows]

    def find_first(self, **criteria):
        with self.session_factory() as db:
            row = db.query(self.model).filter_by(**criteria).first()
            return self._to_dict(row) if row else None

    def insert(self, record):
        with self.session_factory() as db:
            row = self.model(**{k: v for k, v in record.items() if k in self.columns})
            db.add(row)
            db.commit()
            return self._to_dict(row)

    def insert_unique(self, record, **criteria):
        """
        The criteria columns must carry a unique constraint; it decides
        between concurrent inserts that both passed the lookup.
        """
        with self.session_factory() as db:
            if db.query(self.model).filter_by(**criteria).first() is not None:
                return None
            row = self.model(**{k: v for k, v in record.items() if k in self.columns})
            db.add(row)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                return None
            return self._to_dict(row)

    def update(self, record_id, changes):
        with self.session_factory() as db:
            row = db.query(self.model).filter_by(id=record_id).first()
            if row is None:
                return None
            for key, value in changes.items():
                if key in self.columns:
                    setattr(row, key, value)
            db.commit()
            return self._to_dict(row)

    def delete(self, record_id):
        with self.session_factory() as db:
            deleted = db.query(self.model).filter_by(id=record_id).delete()
            db.commit()
            return deleted > 0

    def count(self):
        with self.session_factory() as db:
            return db.query(self.model).count()


# -------------------------------
# Store bundles
# -------------------------------

class Store:
    """
    The four collections the API works with.
    """

    def __init__(self, users: Repository, deadlines: Repository,
                 courses: Repository, study_sessions: Repository):
        self.users = users
        self.deadlines = deadlines
        self.courses = courses
        self.study_sessions = study_sessions

    def counts(self) -> dict:
        return {
            "users": self.users.count(),
            "deadlines": self.deadlines.count(),
            "courses": self.courses.count(),
            "studySessions": self.study_sessions.count(),
        }


def memory_store() -> Store:
    return Store(MemoryRepository(), MemoryRepository(), MemoryRepository(), MemoryRepository())


def sql_store(session_factory: sessionmaker) -> Store:
    return Store(
        SqlRepository(session_factory, User),
        SqlRepository(session_factory, Deadline),
        SqlRepository(session_factory, Course),
        SqlRepository(session_factory, StudySession),
    )
