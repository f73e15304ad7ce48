import pytest

from studyhive.server.core.errors import NotFoundError
from studyhive.server.core.owned import OwnedCollection
from studyhive.server.core.store import memory_store, new_id, sql_store
from studyhive.server.database import build_store, create_session_factory


def deadline_fields(title="Essay"):
    return {
        "title": title,
        "description": "",
        "course_id": None,
        "due_date": "2026-11-01T00:00:00.000Z",
        "priority": "medium",
        "completed": False,
        "created_at": "2026-10-16T09:00:00.000Z",
        "updated_at": None,
    }


@pytest.fixture(params=["memory", "sql"])
def any_store(request):
    if request.param == "memory":
        return memory_store()
    return sql_store(create_session_factory("sqlite://"))


def test_ids_are_unique_and_sortable():
    ids = [new_id() for _ in range(500)]
    assert len(set(ids)) == len(ids)
    assert all(len(i) == 22 for i in ids)
    assert ids[0][:13] <= ids[-1][:13]


def test_build_store_defaults_to_memory():
    store = build_store(None)
    assert store.counts() == {"users": 0, "deadlines": 0, "courses": 0, "studySessions": 0}


def test_repository_round_trip(any_store):
    repo = any_store.deadlines
    record = repo.insert({**deadline_fields(), "id": "d1", "user_id": "u1"})
    assert record["title"] == "Essay"
    assert repo.find_by_id("d1")["user_id"] == "u1"
    assert repo.find_by_id("missing") is None
    assert repo.count() == 1

    updated = repo.update("d1", {"completed": True})
    assert updated["completed"] is True
    assert repo.find_by_id("d1")["completed"] is True
    assert repo.update("missing", {"completed": True}) is None

    assert repo.delete("d1") is True
    assert repo.delete("d1") is False
    assert repo.count() == 0


def test_find_by_owner_keeps_insertion_order(any_store):
    collection = OwnedCollection(any_store.deadlines, "Deadline")
    created = [collection.create("u1", deadline_fields(f"task {i}")) for i in range(3)]
    collection.create("u2", deadline_fields("other"))

    titles = [d["title"] for d in collection.list("u1")]
    assert titles == ["task 0", "task 1", "task 2"]
    assert [d["id"] for d in collection.list("u1")] == [d["id"] for d in created]


def test_find_first_matches_all_criteria(any_store):
    any_store.users.insert({
        "id": "u1", "name": "Ada", "email": "ada@example.com",
        "password": "hash", "created_at": "2026-10-16T09:00:00.000Z",
    })
    assert any_store.users.find_first(email="ada@example.com")["id"] == "u1"
    assert any_store.users.find_first(email="nobody@example.com") is None


def test_memory_repository_hands_out_copies():
    store = memory_store()
    store.deadlines.insert({**deadline_fields(), "id": "d1", "user_id": "u1"})
    leaked = store.deadlines.find_by_id("d1")
    leaked["title"] = "changed"
    assert store.deadlines.find_by_id("d1")["title"] == "Essay"


def test_owned_collection_hides_other_owners_records(any_store):
    collection = OwnedCollection(any_store.deadlines, "Deadline")
    record = collection.create("u1", deadline_fields())

    with pytest.raises(NotFoundError) as exc:
        collection.get(record["id"], "u2")
    assert exc.value.message == "Deadline not found"
    with pytest.raises(NotFoundError):
        collection.update(record["id"], "u2", {"title": "hijacked"})
    with pytest.raises(NotFoundError):
        collection.delete(record["id"], "u2")

    assert collection.get(record["id"], "u1")["title"] == "Essay"


def test_owned_update_preserves_id_and_owner(any_store):
    collection = OwnedCollection(any_store.deadlines, "Deadline")
    record = collection.create("u1", deadline_fields())

    updated = collection.update(record["id"], "u1", {"id": "other", "user_id": "u2", "title": "Renamed"})
    assert updated["id"] == record["id"]
    assert updated["user_id"] == "u1"
    assert updated["title"] == "Renamed"
    assert updated["updated_at"] is not None


def user_fields(user_id, email="ada@example.com"):
    return {
        "id": user_id, "name": "Ada", "email": email,
        "password": "hash", "created_at": "2026-10-16T09:00:00.000Z",
    }


def test_insert_unique_skips_existing_match(any_store):
    first = any_store.users.insert_unique(user_fields("u1"), email="ada@example.com")
    second = any_store.users.insert_unique(user_fields("u2"), email="ada@example.com")

    assert first["id"] == "u1"
    assert second is None
    assert any_store.users.count() == 1


def test_sql_insert_unique_falls_back_on_the_unique_constraint():
    store = sql_store(create_session_factory("sqlite://"))
    store.users.insert(user_fields("u1"))

    # the lookup misses, as it does when another request inserts in between
    assert store.users.insert_unique(user_fields("u2"), email="someone-else@example.com") is None
    assert store.users.count() == 1
    assert store.users.find_first(email="ada@example.com")["id"] == "u1"
