from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from .errors import ConfigParseError, ConfigReadError, MissingCredentialError

logger = logging.getLogger(__name__)

API_KEY_FIELD = "GROQ_API_KEY"


def load_api_key(path: Union[str, Path], field: str = API_KEY_FIELD) -> str:
    """
    Read the API key from a JSON config file such as {"GROQ_API_KEY": "..."}.

    Raises ConfigReadError if the file cannot be read, ConfigParseError if it is
    not JSON, and MissingCredentialError if `field` is absent or not a string.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ConfigReadError(f"cannot read {path}: {exc.strerror or exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(f"{path} is not valid JSON: {exc}") from exc

    api_key = data.get(field) if isinstance(data, dict) else None
    if not isinstance(api_key, str):
        raise MissingCredentialError(f"API key not found in {path.name} (expected string field {field})")
    logger.debug("Loaded %s from %s", field, path)
    return api_key
