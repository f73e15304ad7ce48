# studyhive/app/services/groups.py

import uuid
from datetime import datetime, timedelta


STUDY_ROOMS = [
    {
        "id": "1",
        "name": "Calculus Study Group",
        "subject": "Advanced Mathematics",
        "participants": 5,
        "maxParticipants": 8,
        "isActive": True,
        "host": "Sarah Chen",
        "xpReward": 50,
    },
    {
        "id": "2",
        "name": "CS Algorithm Practice",
        "subject": "Computer Science",
        "participants": 3,
        "maxParticipants": 6,
        "isActive": True,
        "host": "Mike Johnson",
        "xpReward": 75,
    },
    {
        "id": "3",
        "name": "Physics Problem Solving",
        "subject": "Physics",
        "participants": 4,
        "maxParticipants": 10,
        "isActive": False,
        "host": "Emily Davis",
        "xpReward": 60,
    },
]


def _seed_messages():
    now = datetime.now()
    return [
        {"id": "1", "user": "Sarah Chen", "message": "Hey everyone! Ready for the study session?", "timestamp": now - timedelta(minutes=5)},
        {"id": "2", "user": "Mike Johnson", "message": "Just finished the flashcards for Chapter 5!", "timestamp": now - timedelta(minutes=3)},
    ]


class StudyGroups:
    """
    Mocked study rooms and chat. Nothing leaves the client.
    """

    def __init__(self):
        self.rooms = [dict(room) for room in STUDY_ROOMS]
        self.messages = _seed_messages()
        self.active_room = None

    def join(self, room_id: str):
        for room in self.rooms:
            if room["id"] == room_id:
                self.active_room = room
                return room
        raise KeyError(room_id)

    def leave(self):
        self.active_room = None

    def send(self, text: str, user: str = "You"):
        text = text.strip()
        if not text:
            return None
        message = {"id": str(uuid.uuid4()), "user": user, "message": text, "timestamp": datetime.now()}
        self.messages.append(message)
        return message
