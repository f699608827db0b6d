from __future__ import annotations

import logging
import time
from typing import Any, Dict

import requests

from ..config import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT, ClientSettings
from ..errors import RemoteRejectionError, TransportError
from .types import ChatRequest

logger = logging.getLogger(__name__)


class GroqClient:
    """Posts one chat request to an OpenAI-compatible endpoint and returns the decoded JSON."""

    def __init__(self, api_key: str, endpoint: str = DEFAULT_ENDPOINT, timeout: float = DEFAULT_TIMEOUT):
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout

    @classmethod
    def from_settings(cls, api_key: str, settings: ClientSettings) -> "GroqClient":
        return cls(api_key=api_key, endpoint=settings.endpoint, timeout=settings.timeout)

    def send(self, req: ChatRequest) -> Any:
        """
        Return the response document on a 2xx status.

        Raises RemoteRejectionError for any other status (the body is dropped)
        and TransportError when the request cannot complete or the body is not JSON.
        """
        headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        logger.debug("POST %s (model=%s, timeout=%ss)", self.endpoint, req.model, self.timeout)
        start = time.time()
        try:
            resp = requests.post(self.endpoint, json=req.to_payload(), headers=headers, timeout=self.timeout)
        except (requests.RequestException, UnicodeError) as exc:
            # http.client encodes headers as latin-1
            raise TransportError(f"request to {self.endpoint} failed: {exc}") from exc
        latency_ms = (time.time() - start) * 1000
        logger.debug("http %s in %.0f ms", resp.status_code, latency_ms)

        if not 200 <= resp.status_code < 300:
            raise RemoteRejectionError(resp.status_code)
        try:
            return resp.json()
        except ValueError as exc:
            raise TransportError(f"response body is not valid JSON: {exc}") from exc
