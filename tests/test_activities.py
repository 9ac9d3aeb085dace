"""Tests for the activity interface and registry."""

import random

from app.activities import AbstractActivity, FindErrorActivity, ReorderActivity
from app.activity_registry import ACTIVITY_SPECS, get_activity_spec
from app.session_types import SubmissionResult
from core.schemas import Direction, ExerciseKind, SentenceContent, VocabularyItem

NL = Direction.DUTCH_TO_FRENCH
ITEM = VocabularyItem(id="item-0", source_text="boek", target_text="livre")
BLANK = SentenceContent(sentence_text="Ik lees een _____.", missing_or_error_word="boek")


class PlainActivity(AbstractActivity):
    kind = ExerciseKind.REORDER_SENTENCE

    def render_prompt(self, key_prefix):
        pass

    def render_solution(self, key_prefix):
        pass


class TestAbstractActivity:
    def test_prompt_and_solution_are_the_whole_interface(self):
        activity = PlainActivity(ITEM, BLANK, NL, rng=random.Random(1))

        assert activity.correct_answer == "Ik lees een boek"
        assert activity.puzzle.kind == ExerciseKind.REORDER_SENTENCE

    def test_submitted_follows_result(self):
        activity = PlainActivity(ITEM, BLANK, NL, rng=random.Random(1))
        assert not activity.submitted

        activity.result = SubmissionResult(
            item_id=ITEM.id, was_correct=False, user_answer="", correct_answer=activity.correct_answer
        )
        assert activity.submitted


class TestRegistry:
    def test_every_kind_registered(self):
        assert set(ACTIVITY_SPECS) == set(ExerciseKind)
        assert get_activity_spec("reorder_sentence").activity_factory is ReorderActivity
        assert get_activity_spec(ExerciseKind.FIND_ERROR).activity_factory is FindErrorActivity

    def test_find_error_factory_builds_pools(self):
        content = SentenceContent(
            sentence_text="Ik heb gegaan.",
            missing_or_error_word="heb",
            correct_text="Ik ben gegaan.",
        )
        activity = get_activity_spec(ExerciseKind.FIND_ERROR).activity_factory(ITEM, content, NL)

        assert activity.kind == ExerciseKind.FIND_ERROR
        assert activity.correct_answer == "Ik ben gegaan."
