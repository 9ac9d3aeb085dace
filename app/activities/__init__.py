"""Sentence exercise activities"""

from app.activities.base import AbstractActivity
from app.activities.reorder_activity import ReorderActivity
from app.activities.find_error_activity import FindErrorActivity

__all__ = [
    "AbstractActivity",
    "ReorderActivity",
    "FindErrorActivity",
]
