"""Shared fixtures."""

import pytest


class RecordingTransport:
    """Fake transport that records calls and returns a canned body."""
    
    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[tuple[str, dict]] = []
    
    def __call__(self, url, fields):
        self.calls.append((url, dict(fields)))
        if self.error is not None:
            raise self.error
        return self.response
    
    @property
    def last_fields(self) -> dict:
        return self.calls[-1][1]


@pytest.fixture
def transport():
    return RecordingTransport("0912345678|0|MID0001|Success<br>")
