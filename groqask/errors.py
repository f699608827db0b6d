from __future__ import annotations


class GroqAskError(Exception):
    """Base class for every failure the CLI reports."""


class ConfigError(GroqAskError):
    pass


class ConfigReadError(ConfigError):
    pass


class ConfigParseError(ConfigError):
    pass


class MissingCredentialError(ConfigError):
    pass


class TransportError(GroqAskError):
    """The request could not be completed (network, TLS, timeout, bad body)."""


class RemoteRejectionError(GroqAskError):
    """The server answered with a non-success status code."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Request failed with status: {status_code}")
