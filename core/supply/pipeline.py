"""
Sentence Supply Pipeline

Resolves sentence content per vocabulary-item index, lazily and in the
background, for one exercise session.

Resolution order for an index:
1. Session cache (returned as-is, no outbound call)
2. In-flight resolution for the same index (shared Future)
3. Persisted store, then the generation service
4. Fixed fallback sentence when both fail

Requesting index i also starts i+1 .. i+3 in the background.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Protocol, Sequence

from core.schemas import Direction, ExerciseKind, SentenceContent, VocabularyItem
from core.supply.fallback import fallback_content

logger = logging.getLogger(__name__)

PREFETCH_DEPTH = 3   # Indices started ahead of the requested one
MAX_WORKERS = 4      # Concurrent outbound resolutions


class ContentSource(Protocol):
    """Persisted store plus generation service for one exercise kind."""

    def fetch_stored(self, item_id: str, direction: Direction) -> Optional[SentenceContent]:
        ...

    def generate_and_persist(
        self,
        item_id: str,
        word: str,
        direction: Direction,
        context: Optional[str] = None,
        hint: Optional[str] = None
    ) -> SentenceContent:
        ...


class SentenceSupply:
    """
    Per-session sentence cache with request de-duplication and prefetch.

    At most one resolution per index is ever in flight; concurrent callers
    for the same index wait on the same Future. The cache is write-once
    per index and nothing is cancelled when the user navigates away.
    """

    def __init__(
        self,
        items: Sequence[VocabularyItem],
        direction: Direction,
        kind: ExerciseKind,
        source: ContentSource,
        prefetch_depth: int = PREFETCH_DEPTH,
        max_workers: int = MAX_WORKERS,
        executor: Optional[ThreadPoolExecutor] = None
    ):
        self.items = list(items)
        self.direction = Direction(direction)
        self.kind = ExerciseKind(kind)
        self.prefetch_depth = prefetch_depth
        self._source = source
        self._cache: dict[int, SentenceContent] = {}
        self._inflight: dict[int, Future] = {}
        self._lock = threading.Lock()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="sentence-supply"
        )

    def __len__(self) -> int:
        return len(self.items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise IndexError(f"No vocabulary item at index {index} (session has {len(self.items)})")

    # ---- Cache ----

    def cached(self, index: int) -> Optional[SentenceContent]:
        with self._lock:
            return self._cache.get(index)

    def is_resolved(self, index: int) -> bool:
        return self.cached(index) is not None

    def is_in_flight(self, index: int) -> bool:
        with self._lock:
            return index in self._inflight

    # ---- Resolution ----

    def request(self, index: int) -> Future:
        """
        Start (or join) the resolution of `index` without blocking.

        Returns:
            Future resolving to the SentenceContent for the index
        """
        self._check_index(index)
        with self._lock:
            content = self._cache.get(index)
            if content is not None:
                done: Future = Future()
                done.set_result(content)
                return done

            future = self._inflight.get(index)
            if future is None:
                future = self._executor.submit(self._resolve_now, index)
                self._inflight[index] = future
            return future

    def resolve(self, index: int, prefetch: bool = True) -> SentenceContent:
        """
        Content for `index`, waiting for it if necessary.

        Resolved indices return the cached object synchronously.
        """
        content = self.cached(index)
        if content is None:
            content = self.request(index).result()
        if prefetch:
            self.prefetch(index)
        return content

    def prefetch(self, index: int) -> None:
        """Fire-and-forget resolution of the next few indices."""
        last = min(len(self.items), index + 1 + self.prefetch_depth)
        for ahead in range(index + 1, last):
            if self.is_resolved(ahead):
                continue
            try:
                self.request(ahead)
            except RuntimeError:
                # Executor already shut down
                logger.debug("[SUPPLY] Prefetch of index %d skipped", ahead)

    def _resolve_now(self, index: int) -> SentenceContent:
        item = self.items[index]
        word = item.word_for(self.direction)
        content: Optional[SentenceContent] = None

        try:
            content = self._source.fetch_stored(item.id, self.direction)
        except Exception:
            logger.warning("[SUPPLY] Store lookup failed for item %s", item.id, exc_info=True)

        if content is None:
            try:
                content = self._source.generate_and_persist(
                    item.id,
                    word,
                    self.direction,
                    item.lesson_context,
                    hint=item.hint_for(self.direction),
                )
            except Exception:
                logger.warning("[SUPPLY] Generation failed for item %s (%s)", item.id, word, exc_info=True)

        if content is None:
            logger.info("[SUPPLY] Using fallback sentence for item %s", item.id)
            content = fallback_content(word, self.direction, self.kind, index)

        with self._lock:
            cached = self._cache.setdefault(index, content)
            self._inflight.pop(index, None)
        return cached

    def shutdown(self, wait: bool = False) -> None:
        """Release the worker threads (only when the executor is ours)."""
        if self._owns_executor:
            self._executor.shutdown(wait=wait)
