"""
SQLAlchemy ORM model for the exercise attempt log.

One row per submitted puzzle. Rows are append-only.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class QuizAttempt(Base):
    """A single submitted answer to a sentence exercise."""
    __tablename__ = 'quiz_attempts'

    # Primary key
    id = Column(Integer, primary_key=True, autoincrement=True)

    # User scope and item identifiers
    user_id = Column(String(255), nullable=False, index=True)
    item_id = Column(String(255), nullable=False, index=True)
    exercise_kind = Column(String(50), nullable=False)  # reorder_sentence | find_error
    direction = Column(String(50), nullable=False)      # dutch_to_french | french_to_dutch

    # Answer
    user_answer = Column(Text, nullable=False)
    correct_answer = Column(Text, nullable=False)
    was_correct = Column(Boolean, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<QuizAttempt({self.user_id}, {self.item_id}, {self.exercise_kind}, {self.was_correct})>"
