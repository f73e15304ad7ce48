import json

import pytest

from studyhive.app.services.generator import (
    SUMMARY_PROMPT,
    FlashcardDeck,
    GenerationError,
    build_cheat_sheet,
    build_flashcards,
    cheat_sheet_markdown,
    parse_definitions,
)


class FakeReply:
    def __init__(self, content):
        self.content = content


class FakeModel:
    def __init__(self, content):
        self.content = content
        self.calls = []

    def invoke(self, messages):
        self.calls.append(messages)
        return FakeReply(self.content)


def definitions_json(count):
    return json.dumps({"definitions": [
        {"term": f"Term {i}", "definition": f"Meaning {i}"} for i in range(count)
    ]})


def test_prompt_is_followed_by_the_notes():
    model = FakeModel(definitions_json(1))
    build_cheat_sheet("  Photosynthesis turns light into sugar.  ", model)

    (message,) = model.calls[0]
    assert message.content == SUMMARY_PROMPT + "Photosynthesis turns light into sugar."


def test_cheat_sheet_is_capped_at_ten():
    sheet = build_cheat_sheet("notes", FakeModel(definitions_json(14)))
    assert len(sheet) == 10
    assert sheet[0] == {"term": "Term 0", "definition": "Meaning 0"}


def test_flashcards_use_first_eight_definitions():
    cards = build_flashcards("notes", FakeModel(definitions_json(10)))
    assert len(cards) == 8
    assert cards[0] == {"id": "1", "front": "Meaning 0", "back": "Term 0", "difficulty": "easy"}


def test_fenced_reply_is_accepted():
    reply = "```json\n" + definitions_json(2) + "\n```"
    assert len(parse_definitions(reply)) == 2


def test_incomplete_items_are_dropped():
    reply = json.dumps({"definitions": [{"term": "A"}, {"term": "B", "definition": "b"}, "junk"]})
    assert parse_definitions(reply) == [{"term": "B", "definition": "b"}]


@pytest.mark.parametrize("reply", ["not json", "[]", '{"definitions": "nope"}', '{"definitions": []}'])
def test_malformed_replies_raise(reply):
    with pytest.raises(GenerationError):
        parse_definitions(reply)


def test_empty_notes_never_reach_the_model():
    model = FakeModel(definitions_json(1))
    with pytest.raises(GenerationError):
        build_flashcards("   ", model)
    assert model.calls == []


def test_cheat_sheet_markdown():
    assert cheat_sheet_markdown([{"term": "Cell", "definition": "Unit of life"}]) == "- **Cell**: Unit of life"


def test_deck_navigation_resets_flip():
    deck = FlashcardDeck([{"id": "1"}, {"id": "2"}])
    deck.flip()
    assert deck.flipped
    deck.next()
    assert deck.current["id"] == "2"
    assert not deck.flipped
    deck.next()
    assert deck.index == 1
    deck.previous()
    deck.previous()
    assert deck.index == 0


def test_empty_deck_has_no_current_card():
    assert FlashcardDeck([]).current is None
