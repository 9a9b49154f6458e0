"""Parsers package - decoding gateway responses."""

from .models import RecipientOutcome, SubmissionResult
from .response_parser import parse_response

__all__ = ["parse_response", "SubmissionResult", "RecipientOutcome"]
