"""Sentence supply: lazy, de-duplicated content resolution per vocabulary item."""

from core.supply.fallback import fallback_content
from core.supply.pipeline import ContentSource, SentenceSupply

__all__ = [
    "ContentSource",
    "SentenceSupply",
    "fallback_content",
]
