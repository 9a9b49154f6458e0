"""Exceptions raised by the Emome IMSP client."""


class EmomeError(Exception):
    """Base class for all client errors."""


class TransportError(EmomeError):
    """Network, timeout or HTTP failure while talking to the gateway."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EncodingError(EmomeError, ValueError):
    """Message text cannot be represented in the target encoding."""

    def __init__(self, encoding: str, character: str, position: int):
        super().__init__(
            f"Character {character!r} at position {position} "
            f"has no {encoding} representation"
        )
        self.encoding = encoding
        self.character = character
        self.position = position


class InvalidParameterError(EmomeError, ValueError):
    """Submission parameter is unknown or has an unusable value."""
