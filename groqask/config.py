from __future__ import annotations

import math
import os
from dataclasses import dataclass, replace
from typing import Any, Optional

from .errors import ConfigError

DEFAULT_MODEL = "llama-3.1-70b-versatile"
DEFAULT_ENDPOINT = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_TIMEOUT = 60.0
DEFAULT_SYSTEM_PROMPT = (
    "Answer concisely, focusing on insight, accuracy, and relevance. "
    "Explain in one to three sentences only, in other words only short answer "
    "while ensuring the response remains clear and compelling."
)
DEFAULT_CONFIG_PATH = "config.json"


@dataclass(frozen=True)
class ClientSettings:
    model: str = DEFAULT_MODEL
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """
        Read overrides from GROQASK_MODEL / GROQASK_SYSTEM_PROMPT /
        GROQASK_ENDPOINT / GROQASK_TIMEOUT. Unset or blank variables keep the defaults.
        """
        model = os.environ.get("GROQASK_MODEL", "").strip() or DEFAULT_MODEL
        system_prompt = os.environ.get("GROQASK_SYSTEM_PROMPT", "").strip() or DEFAULT_SYSTEM_PROMPT
        endpoint = os.environ.get("GROQASK_ENDPOINT", "").strip() or DEFAULT_ENDPOINT
        raw_timeout = os.environ.get("GROQASK_TIMEOUT", "").strip()
        timeout = parse_timeout(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        return cls(model=model, system_prompt=system_prompt, endpoint=endpoint, timeout=timeout)

    def with_overrides(self, **overrides: Any) -> "ClientSettings":
        # None means "not given on the command line"
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "timeout" in changes:
            changes["timeout"] = parse_timeout(changes["timeout"])
        return replace(self, **changes)


def parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"timeout must be a number of seconds, got {value!r}") from None
    if not (timeout > 0 and math.isfinite(timeout)):
        raise ConfigError(f"timeout must be a positive finite number, got {value!r}")
    return timeout


def resolve_config_path(path: Optional[str]) -> str:
    return path or os.environ.get("GROQASK_CONFIG", "").strip() or DEFAULT_CONFIG_PATH
