"""Tests for session navigation and submission."""

from contextlib import nullcontext
from types import SimpleNamespace

import pytest

from app import session_controller
from core.schemas import Direction, ExerciseKind
from core.supply import SentenceSupply

NL = Direction.DUTCH_TO_FRENCH


@pytest.fixture
def session(monkeypatch, vocabulary, make_source):
    """A running reorder session over the shared vocabulary, without Streamlit."""
    source = make_source()
    supply = SentenceSupply(vocabulary, NL, ExerciseKind.REORDER_SENTENCE, source)
    state = SimpleNamespace(
        user_id="tester",
        supply=supply,
        session_items=vocabulary,
        session_position=0,
        session_results={},
        exercise_kind=ExerciseKind.REORDER_SENTENCE,
        direction=NL,
        activity=None,
        session_finished=False,
    )
    fake_st = SimpleNamespace(
        session_state=state,
        spinner=lambda *args, **kwargs: nullcontext(),
        error=lambda *args, **kwargs: None,
    )
    monkeypatch.setattr(session_controller, "st", fake_st)

    recorded = []
    monkeypatch.setattr(
        session_controller.attempts,
        "record_attempt_in_background",
        lambda *args, **kwargs: recorded.append(args),
    )

    yield SimpleNamespace(state=state, source=source, recorded=recorded)
    supply.shutdown(wait=True)


class TestNavigation:
    def test_returning_to_a_sentence_deals_a_new_puzzle(self, session):
        session_controller.load_current_item()
        first = session.state.activity
        first.puzzle.use_hint()
        assert first.puzzle.hints_used == 1

        session_controller.go_next()
        session_controller.go_previous()

        again = session.state.activity
        assert again is not first
        assert again.puzzle is not first.puzzle
        assert again.puzzle.hints_used == 0
        assert again.puzzle.hints_remaining == first.puzzle.hints_remaining + 1
        assert not set(again.puzzle.state.tokens) & set(first.puzzle.state.tokens)

    def test_returning_reuses_the_resolved_sentence(self, session):
        session_controller.load_current_item()
        first = session.state.activity

        session_controller.go_next()
        session_controller.go_previous()

        assert session.state.activity.content is first.content
        assert session.source.fetch_calls["item-0"] == 1
        assert session.source.generate_calls["item-0"] == 1

    def test_previous_at_start_stays_put(self, session):
        session_controller.load_current_item()
        first = session.state.activity

        session_controller.go_previous()

        assert session.state.session_position == 0
        assert session.state.activity is first

    def test_next_at_end_finishes_session(self, session):
        session.state.session_position = len(session.state.session_items) - 1
        session_controller.load_current_item()

        session_controller.go_next()

        assert session.state.session_finished
        assert session.state.activity is None


class TestSubmit:
    def test_result_survives_navigation(self, session):
        session_controller.load_current_item()
        result = session_controller.submit_current()

        assert session.state.activity.submitted
        assert session_controller.submit_current() is None
        assert len(session.recorded) == 1

        session_controller.go_next()
        session_controller.go_previous()

        assert session.state.session_results[0] is result
        assert not session.state.activity.submitted

    def test_first_submission_counts(self, session):
        session_controller.load_current_item()
        first = session_controller.submit_current()

        session_controller.go_next()
        session_controller.go_previous()
        second = session_controller.submit_current()

        assert second is not None
        assert session.state.session_results[0] is first
        assert len(session.recorded) == 2

    def test_attempt_carries_kind_and_direction(self, session):
        session_controller.load_current_item()
        result = session_controller.submit_current()

        user_id, item_id, kind, direction, answer, correct, was_correct = session.recorded[0]
        assert (user_id, item_id) == ("tester", "item-0")
        assert kind == "reorder_sentence"
        assert direction == "dutch_to_french"
        assert was_correct is result.was_correct
        assert correct == result.correct_answer
