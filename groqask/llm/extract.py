"""
Absence-tolerant navigation of chat-completion responses.

The response body comes from a remote service, so every level may be missing
or have the wrong type. Lookups return None instead of raising.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from .types import ChatResult

PathSegment = Union[str, int]

ANSWER_PATH = ("choices", 0, "message", "content")
USAGE_PATH = ("usage",)


def lookup(document: Any, path: Sequence[PathSegment]) -> Optional[Any]:
    """
    Follow `path` through nested dicts (str keys) and lists (int indices).
    Returns None on a missing key, an out-of-range index or a type mismatch.
    """
    if not path:
        return document
    head, rest = path[0], path[1:]
    if isinstance(document, dict) and isinstance(head, str):
        if head not in document:
            return None
        return lookup(document[head], rest)
    # bool is an int subclass, never a list index here
    if isinstance(document, list) and isinstance(head, int) and not isinstance(head, bool):
        if 0 <= head < len(document):
            return lookup(document[head], rest)
    return None


def extract_answer(document: Any) -> Optional[str]:
    content = lookup(document, ANSWER_PATH)
    return content if isinstance(content, str) else None


def extract_usage(document: Any) -> Optional[Any]:
    return lookup(document, USAGE_PATH)


def extract_result(document: Any, show_usage: bool = False) -> ChatResult:
    return ChatResult(
        answer=extract_answer(document),
        usage=extract_usage(document) if show_usage else None,
    )
