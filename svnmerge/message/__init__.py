"""Commit Message Package"""

from svnmerge.message.builder import (
    MergeDirection,
    RevisionMode,
    FALLBACK_MESSAGE,
    MESSAGE_TEMPLATES,
    generate_commit_message,
    build_message,
)

__all__ = [
    "MergeDirection",
    "RevisionMode",
    "FALLBACK_MESSAGE",
    "MESSAGE_TEMPLATES",
    "generate_commit_message",
    "build_message",
]
