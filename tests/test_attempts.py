"""Tests for the attempt log, against an in-memory SQLite engine."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from core import attempts
from core.attempts.database import get_database_url


def _memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


class TestRecordAttempt:
    def setup_method(self):
        attempts.set_engine(_memory_engine())
        attempts.init_db()

    def teardown_method(self):
        attempts.set_engine(None)

    def test_record_and_read_back(self):
        row_id = attempts.record_attempt(
            "learner", "item-1", "reorder_sentence", "dutch_to_french",
            "ik ga naar huis", "Ik ga naar huis.", True,
        )

        recent = attempts.get_recent_attempts("learner")
        assert [r["id"] for r in recent] == [row_id]
        assert recent[0]["was_correct"] is True
        assert recent[0]["exercise_kind"] == "reorder_sentence"

    def test_enum_values_stored_as_strings(self):
        from core.schemas import Direction, ExerciseKind

        attempts.record_attempt(
            "learner", "item-2", ExerciseKind.FIND_ERROR, Direction.FRENCH_TO_DUTCH,
            "je suis", "je suis", True,
        )
        recent = attempts.get_recent_attempts("learner")
        assert recent[0]["exercise_kind"] == "find_error"
        assert recent[0]["direction"] == "french_to_dutch"

    def test_scoped_per_user(self):
        attempts.record_attempt("a", "item-1", "find_error", "dutch_to_french", "x", "y", False)
        assert attempts.get_recent_attempts("b") == []

    def test_background_recording(self):
        future = attempts.record_attempt_in_background(
            "learner", "item-3", "find_error", "dutch_to_french", "x", "y", False,
        )
        row_id = future.result(timeout=5)
        assert attempts.get_recent_attempts("learner")[0]["id"] == row_id

    def test_init_db_is_idempotent(self):
        attempts.init_db()
        attempts.init_db()


class TestBackgroundFailure:
    def teardown_method(self):
        attempts.set_engine(None)

    def test_failure_is_reported_on_the_future(self):
        # No tables on this engine
        attempts.set_engine(_memory_engine())

        future = attempts.record_attempt_in_background(
            "learner", "item-1", "find_error", "dutch_to_french", "x", "y", False,
        )
        error = future.exception(timeout=5)

        assert error is not None


class TestDatabaseUrl:
    def test_missing_url(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(ValueError):
            get_database_url()

    def test_test_mode_switches_database(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host/learning_db")
        monkeypatch.setenv("TEST_MODE", "true")
        assert get_database_url() == "postgresql://u:p@host/test_learning_db"

    def test_production_url(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host/learning_db")
        monkeypatch.setenv("TEST_MODE", "false")
        assert get_database_url() == "postgresql://u:p@host/learning_db"
