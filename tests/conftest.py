"""Shared fixtures and fakes for the puzzle tests."""

import threading
from collections import Counter

import pytest

from core.schemas import Direction, SentenceContent, VocabularyItem


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: runs many random move sequences")


class FakeContentSource:
    """
    In-memory stand-in for the store + generator pair.

    Counts calls per item id. `gate` (a threading.Event) blocks the store
    lookup until set, to hold a resolution in flight.
    """

    def __init__(self, stored=None, fail_store=False, fail_generate=False, gate=None):
        self.stored = dict(stored or {})
        self.fail_store = fail_store
        self.fail_generate = fail_generate
        self.gate = gate
        self.fetch_calls = Counter()
        self.generate_calls = Counter()
        self.generate_args = {}
        self._lock = threading.Lock()

    def fetch_stored(self, item_id, direction):
        with self._lock:
            self.fetch_calls[item_id] += 1
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.fail_store:
            raise ConnectionError("store unreachable")
        return self.stored.get(item_id)

    def generate_and_persist(self, item_id, word, direction, context=None, hint=None):
        with self._lock:
            self.generate_calls[item_id] += 1
            self.generate_args[item_id] = (word, direction, context, hint)
        if self.fail_generate:
            raise RuntimeError("generation failed")
        content = SentenceContent(
            sentence_text=f"Ik zie {word} _____.",
            missing_or_error_word=word,
        )
        self.stored[item_id] = content
        return content


@pytest.fixture
def vocabulary():
    words = [
        ("boek", "livre"),
        ("fiets", "vélo"),
        ("huis", "maison"),
        ("water", "eau"),
        ("tafel", "table"),
        ("stoel", "chaise"),
    ]
    return [
        VocabularyItem(id=f"item-{i}", source_text=nl, target_text=fr, lesson_context="thuis")
        for i, (nl, fr) in enumerate(words)
    ]


@pytest.fixture
def dutch():
    return Direction.DUTCH_TO_FRENCH


@pytest.fixture
def make_source():
    """Factory for FakeContentSource instances."""
    return FakeContentSource
