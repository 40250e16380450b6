__all__ = ["GoogleTasksError", "PronoteAuthenticationError", "PronoteBridgeException", "PronoteConfigError"]

from dataclasses import dataclass

from requests import Response


@dataclass
class PronoteBridgeException(Exception):
    """Base exception class for pronote-bridge errors."""

    message: str

    def __str__(self) -> str:
        return self.message


class PronoteAuthenticationError(PronoteBridgeException):
    """Indicates that logging in on the Pronote portal failed."""


class PronoteConfigError(PronoteBridgeException):
    """Indicates an invalid or inconsistent configuration."""


@dataclass
class GoogleTasksError(PronoteBridgeException):
    """Indicates that the Google Tasks API answered with an error."""

    response: Response

    def __post_init__(self):
        self.status_code: int = self.response.status_code
