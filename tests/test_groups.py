import pytest

from studyhive.app.services.groups import StudyGroups


def test_join_and_leave_room():
    groups = StudyGroups()
    room = groups.join("2")
    assert room["name"] == "CS Algorithm Practice"
    assert groups.active_room is room
    groups.leave()
    assert groups.active_room is None


def test_join_unknown_room():
    with pytest.raises(KeyError):
        StudyGroups().join("99")


def test_send_appends_trimmed_message():
    groups = StudyGroups()
    before = len(groups.messages)
    message = groups.send("  anyone done chapter 5?  ")
    assert message["user"] == "You"
    assert message["message"] == "anyone done chapter 5?"
    assert len(groups.messages) == before + 1


def test_blank_messages_are_ignored():
    groups = StudyGroups()
    before = len(groups.messages)
    assert groups.send("   ") is None
    assert len(groups.messages) == before
