"""
MongoDB repository for vocabulary items and generated sentences.

Vocabulary documents live in the `vocabulary` collection; generated
exercise sentences are persisted in `sentences`, keyed by item id,
direction and exercise kind.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pymongo import DESCENDING, MongoClient
from pymongo.collection import Collection

from core.schemas import (
    Direction,
    ExerciseKind,
    SentenceContent,
    StoredSentence,
    VocabularyItem,
)

# Load environment
load_dotenv()

logger = logging.getLogger(__name__)

# Configuration
DB_NAME = "dutch_puzzles"
VOCABULARY_COLLECTION = "vocabulary"
SENTENCES_COLLECTION = "sentences"

# Global connection pool (reused across requests)
_client: Optional[MongoClient] = None
_collections: dict[str, Collection] = {}


# ---- Connection Management ----

def get_client() -> MongoClient:
    """
    Get the shared MongoDB client.

    Uses a persistent connection pool that's reused across requests
    to avoid the cold start on every query.
    """
    global _client

    if _client is not None:
        return _client

    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise ValueError("MONGO_URI not found in environment variables")

    _client = MongoClient(
        mongo_uri,
        maxPoolSize=10,  # Connection pool size
        minPoolSize=1,   # Keep at least 1 connection alive
        maxIdleTimeMS=60000  # Keep connections alive for 60 seconds
    )
    return _client


def get_collection(name: str = VOCABULARY_COLLECTION) -> Collection:
    """
    Get a MongoDB collection of the puzzle database.

    Args:
        name: Collection name (vocabulary or sentences)

    Returns:
        MongoDB collection object
    """
    collection = _collections.get(name)
    if collection is None:
        collection = get_client()[DB_NAME][name]
        _collections[name] = collection
    return collection


# ---- Document Mapping ----

def vocabulary_item_from_doc(doc: dict) -> VocabularyItem:
    """Map a vocabulary document onto a VocabularyItem."""
    item_id = doc.get("item_id") or str(doc["_id"])
    return VocabularyItem(
        id=item_id,
        source_text=doc["dutch_text"],
        target_text=doc["french_text"],
        lesson_context=doc.get("lesson_context"),
    )


def sentence_query(item_id: str, direction: Direction, kind: ExerciseKind) -> dict:
    return {
        "item_id": item_id,
        "direction": Direction(direction).value,
        "exercise_kind": ExerciseKind(kind).value,
    }


def sentence_content_from_doc(doc: dict) -> SentenceContent:
    """Map a stored sentence document onto its SentenceContent."""
    return SentenceContent(**doc["content"])


# ---- Vocabulary ----

def get_vocabulary_items(
    lesson_id: Optional[str] = None,
    limit: Optional[int] = None
) -> list[VocabularyItem]:
    """
    Get the vocabulary items of an exercise set, in insertion order.

    Args:
        lesson_id: If provided, only return words of this lesson
        limit: Maximum number of items

    Returns:
        List of VocabularyItem
    """
    collection = get_collection(VOCABULARY_COLLECTION)

    query = {}
    if lesson_id:
        query["lesson_id"] = lesson_id

    cursor = collection.find(query).sort("_id", 1)
    if limit:
        cursor = cursor.limit(limit)

    return [vocabulary_item_from_doc(doc) for doc in cursor]


def get_lesson_ids() -> list[str]:
    """Sorted list of lesson ids present in the vocabulary (for UI filters)."""
    collection = get_collection(VOCABULARY_COLLECTION)
    return sorted(lesson for lesson in collection.distinct("lesson_id") if lesson)


# ---- Sentences ----

def fetch_stored_sentence(
    item_id: str,
    direction: Direction,
    kind: ExerciseKind
) -> Optional[SentenceContent]:
    """
    Get the most recently stored sentence for an item.

    Returns:
        SentenceContent, or None if nothing has been generated yet
    """
    collection = get_collection(SENTENCES_COLLECTION)
    doc = collection.find_one(
        sentence_query(item_id, direction, kind),
        sort=[("created_at", DESCENDING)]
    )
    if doc is None:
        return None
    return sentence_content_from_doc(doc)


def fetch_stored_sentences(
    item_ids: list[str],
    direction: Direction,
    kind: ExerciseKind
) -> dict[str, SentenceContent]:
    """
    Batch lookup of stored sentences for the words of a session.

    Returns:
        Dict of item_id -> most recent SentenceContent (items without a
        stored sentence are absent)
    """
    if not item_ids:
        return {}

    collection = get_collection(SENTENCES_COLLECTION)
    query = {
        "item_id": {"$in": list(item_ids)},
        "direction": Direction(direction).value,
        "exercise_kind": ExerciseKind(kind).value,
    }

    found: dict[str, SentenceContent] = {}
    for doc in collection.find(query).sort("created_at", DESCENDING):
        # Newest first, so the first document per item wins
        if doc["item_id"] not in found:
            found[doc["item_id"]] = sentence_content_from_doc(doc)
    return found


def save_sentence(sentence: StoredSentence) -> str:
    """
    Persist a generated sentence.

    Returns:
        The inserted document id as a string
    """
    collection = get_collection(SENTENCES_COLLECTION)
    result = collection.insert_one(sentence.model_dump())
    logger.debug("[SUPPLY] Stored sentence for item %s (%s)", sentence.item_id, sentence.direction)
    return str(result.inserted_id)
