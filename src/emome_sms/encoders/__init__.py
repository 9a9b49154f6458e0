"""Encoders package - building SubmitSM request fields."""

from .address import convert_to_addr, split_addresses
from .message import (
    UNICODE_DCS,
    convert_dest_port_by_message_type,
    convert_message,
    convert_message_by_message_type,
)
from .submission import encode_submission

__all__ = [
    "convert_to_addr",
    "split_addresses",
    "convert_message",
    "convert_message_by_message_type",
    "convert_dest_port_by_message_type",
    "encode_submission",
    "UNICODE_DCS",
]
