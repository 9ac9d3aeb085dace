"""
Sentence service: persisted store first, generator second.

One SentenceService serves one exercise kind. It is the ContentSource
handed to the supply pipeline.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from core import generation, lexicon_repo
from core.schemas import Direction, ExerciseKind, SentenceContent, StoredSentence

logger = logging.getLogger(__name__)


GENERATORS: dict[ExerciseKind, Callable[..., SentenceContent]] = {
    ExerciseKind.REORDER_SENTENCE: generation.generate_fill_in_the_blank,
    ExerciseKind.FIND_ERROR: generation.generate_error_sentence,
}


class SentenceService:
    """
    Store + generator facade for one exercise kind.

    Collaborators are injectable so the supply pipeline can be exercised
    without MongoDB or OpenAI.
    """

    def __init__(
        self,
        kind: ExerciseKind,
        fetch: Optional[Callable[[str, Direction, ExerciseKind], Optional[SentenceContent]]] = None,
        save: Optional[Callable[[StoredSentence], object]] = None,
        generate: Optional[Callable[..., SentenceContent]] = None,
        model: Optional[str] = None
    ):
        self.kind = ExerciseKind(kind)
        self._fetch = fetch or lexicon_repo.fetch_stored_sentence
        self._save = save or lexicon_repo.save_sentence
        self._generate = generate or GENERATORS[self.kind]
        self.model = model
        self._preloaded: dict[tuple[str, Direction], SentenceContent] = {}

    def preload(self, item_ids: list[str], direction: Direction) -> int:
        """
        Batch-load stored sentences for a session's words.

        Returns:
            Number of items that already have a stored sentence
        """
        direction = Direction(direction)
        found = lexicon_repo.fetch_stored_sentences(item_ids, direction, self.kind)
        for item_id, content in found.items():
            self._preloaded[(item_id, direction)] = content
        logger.info("[SUPPLY] Preloaded %d/%d stored sentences", len(found), len(item_ids))
        return len(found)

    def fetch_stored(self, item_id: str, direction: Direction) -> Optional[SentenceContent]:
        direction = Direction(direction)
        content = self._preloaded.get((item_id, direction))
        if content is not None:
            return content
        return self._fetch(item_id, direction, self.kind)

    def generate_and_persist(
        self,
        item_id: str,
        word: str,
        direction: Direction,
        context: Optional[str] = None,
        hint: Optional[str] = None
    ) -> SentenceContent:
        """
        Generate content for a word and store it before returning it.

        Raises whatever the generator or the store raises; the supply
        pipeline turns that into a fallback sentence.
        """
        direction = Direction(direction)
        content = self._generate(word, direction, context=context, hint=hint, model=self.model)

        self._save(StoredSentence(
            item_id=item_id,
            direction=direction,
            exercise_kind=self.kind,
            content=content,
            model_used=self.model or generation.get_model(),
        ))
        return content
