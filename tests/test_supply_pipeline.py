"""Tests for the sentence supply pipeline."""

import threading

import pytest

from core.schemas import Direction, ExerciseKind, SentenceContent
from core.supply import SentenceSupply

NL = Direction.DUTCH_TO_FRENCH


class TestResolve:
    def setup_method(self):
        self.supply = None

    def teardown_method(self):
        if self.supply is not None:
            self.supply.shutdown(wait=True)

    def _supply(self, items, source, kind=ExerciseKind.REORDER_SENTENCE, **kwargs):
        self.supply = SentenceSupply(items, NL, kind, source, **kwargs)
        return self.supply

    def test_stored_content_returned(self, vocabulary, make_source):
        stored = SentenceContent(sentence_text="Ik lees een _____.", missing_or_error_word="boek")
        source = make_source(stored={"item-0": stored})
        supply = self._supply(vocabulary, source)

        assert supply.resolve(0) is stored
        assert source.generate_calls["item-0"] == 0

    def test_resolved_index_returns_same_object_without_new_calls(self, vocabulary, make_source):
        source = make_source()
        supply = self._supply(vocabulary, source)

        first = supply.resolve(0)
        second = supply.resolve(0)

        assert first is second
        assert source.fetch_calls["item-0"] == 1
        assert source.generate_calls["item-0"] == 1

    def test_generation_used_when_store_is_empty(self, vocabulary, make_source):
        source = make_source()
        supply = self._supply(vocabulary, source, prefetch_depth=0)

        content = supply.resolve(1)

        assert content.missing_or_error_word == "fiets"
        assert source.generate_args["item-1"] == ("fiets", NL, "thuis", "vélo")

    def test_concurrent_callers_share_one_resolution(self, vocabulary, make_source):
        gate = threading.Event()
        source = make_source(gate=gate)
        supply = self._supply(vocabulary, source, prefetch_depth=0)

        first = supply.request(0)
        second = supply.request(0)
        assert first is second
        assert supply.is_in_flight(0)

        results = []
        waiter = threading.Thread(target=lambda: results.append(supply.resolve(0, prefetch=False)))
        waiter.start()

        gate.set()
        content = first.result(timeout=5)
        waiter.join(timeout=5)

        assert results == [content]
        assert results[0] is content
        assert source.fetch_calls["item-0"] == 1
        assert supply.is_resolved(0)
        assert not supply.is_in_flight(0)

    def test_fallback_when_store_and_generator_fail(self, vocabulary, make_source):
        source = make_source(fail_store=True, fail_generate=True)
        supply = self._supply(vocabulary, source, prefetch_depth=0)

        content = supply.resolve(2)

        assert content.is_fallback
        assert content.missing_or_error_word == "huis"
        assert "_____" in content.sentence_text

    def test_find_error_fallback_is_renderable(self, vocabulary, make_source):
        source = make_source(fail_store=True, fail_generate=True)
        supply = self._supply(vocabulary, source, kind=ExerciseKind.FIND_ERROR, prefetch_depth=0)

        content = supply.resolve(0)

        assert content.is_fallback
        assert "boek" in content.sentence_text
        assert content.correct_text == content.sentence_text

    def test_out_of_range(self, vocabulary, make_source):
        supply = self._supply(vocabulary, make_source())
        with pytest.raises(IndexError):
            supply.resolve(len(vocabulary))
        with pytest.raises(IndexError):
            supply.request(-1)


class TestPrefetch:
    def setup_method(self):
        self.supply = None

    def teardown_method(self):
        if self.supply is not None:
            self.supply.shutdown(wait=True)

    def test_next_three_indices_started(self, vocabulary, make_source):
        source = make_source()
        self.supply = SentenceSupply(vocabulary, NL, ExerciseKind.REORDER_SENTENCE, source)

        self.supply.resolve(0)

        for index in (1, 2, 3):
            assert self.supply.is_in_flight(index) or self.supply.is_resolved(index)
        assert not self.supply.is_in_flight(4)
        assert not self.supply.is_resolved(4)

    def test_prefetched_content_is_reused(self, vocabulary, make_source):
        source = make_source()
        self.supply = SentenceSupply(vocabulary, NL, ExerciseKind.REORDER_SENTENCE, source)

        self.supply.resolve(0)
        prefetched = self.supply.request(1).result(timeout=5)

        assert self.supply.resolve(1) is prefetched
        assert source.fetch_calls["item-1"] == 1

    def test_prefetch_stops_at_end_of_session(self, vocabulary, make_source):
        source = make_source()
        self.supply = SentenceSupply(vocabulary, NL, ExerciseKind.REORDER_SENTENCE, source)

        last = len(vocabulary) - 1
        self.supply.resolve(last)
        self.supply.prefetch(last)

        assert self.supply.is_resolved(last)
        assert len(source.fetch_calls) == 1

    def test_prefetch_after_shutdown_is_ignored(self, vocabulary, make_source):
        source = make_source()
        supply = SentenceSupply(vocabulary, NL, ExerciseKind.REORDER_SENTENCE, source)
        supply.shutdown(wait=True)

        supply.prefetch(0)

        assert not supply.is_in_flight(1)
