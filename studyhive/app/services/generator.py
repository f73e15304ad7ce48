# studyhive/app/services/generator.py

import json
import logging
import re

from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from studyhive.app.config import LLM_MODEL


logger = logging.getLogger(__name__)

MAX_DEFINITIONS = 10
MAX_FLASHCARDS = 8

SUMMARY_PROMPT = (
    "Task: You are given a block of text. Summarize its content into a JSON object with a maximum of "
    f"{MAX_DEFINITIONS} array items, each representing one distinct definition or concept. "
    "No explanation or your thought process needed in your response. Just the JSON output. "
    'Output Format: {"definitions": [{"term": "string", "definition": "string"}]} '
    "Input Text to Summarize: "
)

_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


class GenerationError(Exception):
    pass


def get_model():
    return ChatOpenAI(model=LLM_MODEL, temperature=0.3)


def parse_definitions(content: str) -> list[dict]:
    """
    Reads {"definitions": [{"term", "definition"}, ...]} out of a model reply,
    tolerating a fenced code block around it.
    """
    text = content.strip()
    fenced = _FENCE.match(text)
    if fenced:
        text = fenced.group(1)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GenerationError("The model did not return valid JSON") from e

    items = data.get("definitions") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise GenerationError("The model reply has no 'definitions' list")

    definitions = []
    for item in items:
        if not isinstance(item, dict):
            continue
        term = str(item.get("term", "")).strip()
        definition = str(item.get("definition", "")).strip()
        if term and definition:
            definitions.append({"term": term, "definition": definition})

    if not definitions:
        raise GenerationError("The model reply contained no definitions")
    return definitions[:MAX_DEFINITIONS]


def generate_definitions(notes: str, model=None) -> list[dict]:
    if not notes or not notes.strip():
        raise GenerationError("Paste some notes first")

    model = model or get_model()
    response = model.invoke([HumanMessage(content=SUMMARY_PROMPT + notes.strip())])
    logger.info("Definitions generated")
    return parse_definitions(response.content)


def build_cheat_sheet(notes: str, model=None) -> list[dict]:
    return generate_definitions(notes, model)


def build_flashcards(notes: str, model=None) -> list[dict]:
    definitions = generate_definitions(notes, model)[:MAX_FLASHCARDS]
    return [
        {"id": str(i + 1), "front": d["definition"], "back": d["term"], "difficulty": "easy"}
        for i, d in enumerate(definitions)
    ]


def cheat_sheet_markdown(definitions: list[dict]) -> str:
    return "\n".join(f"- **{d['term']}**: {d['definition']}" for d in definitions)


class FlashcardDeck:
    """
    Cursor over a list of flashcards. Moving to another card turns it face up.
    """

    def __init__(self, cards: list[dict]):
        self.cards = cards
        self.index = 0
        self.flipped = False

    @property
    def current(self):
        return self.cards[self.index] if self.cards else None

    def flip(self):
        self.flipped = not self.flipped

    def next(self):
        if self.index < len(self.cards) - 1:
            self.index += 1
            self.flipped = False

    def previous(self):
        if self.index > 0:
            self.index -= 1
            self.flipped = False
