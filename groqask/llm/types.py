from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "user" | "system"
    content: str


@dataclass(frozen=True)
class ChatRequest:
    model: str
    messages: Tuple[ChatMessage, ...]

    def to_payload(self) -> Dict[str, Any]:
        messages: List[Dict[str, str]] = [
            {"role": msg.role, "content": msg.content} for msg in self.messages
        ]
        return {"model": self.model, "messages": messages}


@dataclass(frozen=True)
class ChatResult:
    answer: Optional[str] = None
    usage: Optional[Any] = None
