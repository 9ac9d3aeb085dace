"""
Pydantic models for vocabulary items and sentence-exercise content.

These models define the structure of MongoDB documents and support
AI generation with structured outputs.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Direction(str, Enum):
    """Exercise direction. The first language is the language of the sentence."""
    DUTCH_TO_FRENCH = "dutch_to_french"
    FRENCH_TO_DUTCH = "french_to_dutch"

    @property
    def sentence_language(self) -> str:
        return "nl" if self is Direction.DUTCH_TO_FRENCH else "fr"

    @property
    def speech_locale(self) -> str:
        """Locale handed to the audio collaborator when reading a sentence aloud."""
        return "nl-NL" if self is Direction.DUTCH_TO_FRENCH else "fr-FR"

    @property
    def translation_locale(self) -> str:
        return "fr-FR" if self is Direction.DUTCH_TO_FRENCH else "nl-NL"

    @property
    def label(self) -> str:
        return "Dutch → French" if self is Direction.DUTCH_TO_FRENCH else "French → Dutch"


class ExerciseKind(str, Enum):
    """Sentence exercise modes backed by the puzzle engine."""
    REORDER_SENTENCE = "reorder_sentence"
    FIND_ERROR = "find_error"


# ---- Vocabulary ----

class VocabularyItem(BaseModel):
    """
    One word of the active exercise set.

    source_text is the Dutch form, target_text the French form.
    """
    id: str
    source_text: str
    target_text: str
    lesson_context: Optional[str] = None

    class Config:
        frozen = True

    def word_for(self, direction: Direction) -> str:
        """The word as it appears in sentences for this direction."""
        if direction == Direction.DUTCH_TO_FRENCH:
            return self.source_text
        return self.target_text

    def hint_for(self, direction: Direction) -> Optional[str]:
        """Translation hint passed to the generator (French meaning of a Dutch word)."""
        if direction == Direction.DUTCH_TO_FRENCH:
            return self.target_text
        return None


# ---- Sentence Content ----

class SentenceContent(BaseModel):
    """
    Resolved content for one vocabulary item.

    For reorder exercises sentence_text holds a blank (_____) for
    missing_or_error_word. For find-error exercises sentence_text is the
    sentence containing the mistake and correct_text its corrected form.
    """
    sentence_text: str
    missing_or_error_word: str
    correct_text: Optional[str] = None
    explanation: Optional[str] = None
    translation: Optional[str] = None
    error_type: Optional[str] = None
    is_fallback: bool = False

    class Config:
        frozen = True


class StoredSentence(BaseModel):
    """A generated sentence as persisted in the MongoDB sentences collection."""
    item_id: str
    direction: Direction
    exercise_kind: ExerciseKind
    content: SentenceContent
    model_used: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        use_enum_values = True  # Store enum values as strings in MongoDB


# ---- AI Generation Response Models ----

class AIFillInTheBlank(BaseModel):
    """
    Structured output for reorder exercises.

    The LLM writes a short sentence using the word, with the word replaced by _____.
    """
    sentence: str = Field(..., description="Sentence with _____ in place of the word")
    missing_word: str = Field(..., description="The word that fills the blank, as used in the sentence")
    translation: Optional[str] = Field(None, description="Translation of the complete sentence")


class AIErrorSentence(BaseModel):
    """
    Structured output for find-error exercises.

    Both sentences must differ only by a single learner-typical mistake.
    """
    sentence_with_error: str = Field(..., description="Sentence containing one grammatical mistake")
    sentence_correct: str = Field(..., description="The same sentence without the mistake")
    error_type: Optional[str] = Field(None, description="Kind of mistake (word order, article, conjugation...)")
    explanation: Optional[str] = Field(None, description="Short explanation of the mistake")
    translation: Optional[str] = Field(None, description="Translation of the correct sentence")
