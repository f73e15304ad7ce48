# studyhive/server/core/owned.py

from studyhive.server.core.errors import NotFoundError
from studyhive.server.core.store import Repository, new_id
from studyhive.server.core.timeutil import utc_now


class OwnedCollection:
    """
    Records that belong to exactly one user.

    Every lookup matches on (id, owner). A record owned by someone else is
    reported exactly like a missing one.
    """

    PROTECTED_FIELDS = ("id", "user_id")

    def __init__(self, repository: Repository, label: str):
        self.repository = repository
        self.label = label

    def list(self, owner_id: str) -> list[dict]:
        return self.repository.find_by_owner(owner_id)

    def create(self, owner_id: str, fields: dict) -> dict:
        record = {**fields, "id": new_id(), "user_id": owner_id}
        return self.repository.insert(record)

    def get(self, record_id: str, owner_id: str) -> dict:
        record = self.repository.find_by_id(record_id)
        if record is None or record.get("user_id") != owner_id:
            raise NotFoundError(f"{self.label} not found")
        return record

    def update(self, record_id: str, owner_id: str, changes: dict) -> dict:
        self.get(record_id, owner_id)
        changes = {k: v for k, v in changes.items() if k not in self.PROTECTED_FIELDS}
        changes["updated_at"] = utc_now()
        updated = self.repository.update(record_id, changes)
        if updated is None:
            # deleted between the ownership check and the write
            raise NotFoundError(f"{self.label} not found")
        return updated

    def delete(self, record_id: str, owner_id: str) -> None:
        self.get(record_id, owner_id)
        if not self.repository.delete(record_id):
            raise NotFoundError(f"{self.label} not found")
