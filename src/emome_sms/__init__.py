"""Client for Chunghwa Telecom Emome IMSP SMS HTTP API."""

from .config import Config, load_config
from .encoders import (
    convert_dest_port_by_message_type,
    convert_message,
    convert_message_by_message_type,
    convert_to_addr,
    encode_submission,
)
from .errors import EmomeError, EncodingError, InvalidParameterError, TransportError
from .parsers import RecipientOutcome, SubmissionResult, parse_response
from .senders import HttpxTransport, ImspClient

__all__ = [
    "ImspClient",
    "HttpxTransport",
    "Config",
    "load_config",
    "convert_to_addr",
    "convert_message",
    "convert_message_by_message_type",
    "convert_dest_port_by_message_type",
    "encode_submission",
    "parse_response",
    "SubmissionResult",
    "RecipientOutcome",
    "EmomeError",
    "TransportError",
    "EncodingError",
    "InvalidParameterError",
]
