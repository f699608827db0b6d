from __future__ import annotations

from typing import Optional

from ..config import ClientSettings
from .types import ChatMessage, ChatRequest


def build_request(prompt: str, settings: Optional[ClientSettings] = None) -> ChatRequest:
    """User prompt first, verbatim, followed by the fixed system instruction."""
    settings = settings or ClientSettings()
    return ChatRequest(
        model=settings.model,
        messages=(
            ChatMessage(role="user", content=prompt),
            ChatMessage(role="system", content=settings.system_prompt),
        ),
    )
