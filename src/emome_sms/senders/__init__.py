"""Senders package - submitting messages to the IMSP gateway."""

from .imsp import ImspClient, SUBMIT_SM_PATH
from .transport import HttpxTransport, Transport

__all__ = ["ImspClient", "HttpxTransport", "Transport", "SUBMIT_SM_PATH"]
