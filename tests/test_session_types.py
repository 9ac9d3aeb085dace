"""Tests for session scoring."""

from app.session_types import SubmissionResult, session_accuracy, session_score


def _result(correct):
    return SubmissionResult(item_id="i", was_correct=correct, user_answer="a", correct_answer="b")


class TestScore:
    def test_one_point_per_correct_submission(self):
        results = {0: _result(True), 1: _result(False), 2: _result(True)}
        assert session_score(results) == 2
        assert round(session_accuracy(results), 1) == 66.7

    def test_empty_session(self):
        assert session_score({}) == 0
        assert session_accuracy({}) == 0.0
