"""Turn submission parameters into wire-ready form fields."""

from typing import Mapping

from .address import convert_to_addr
from .message import (
    convert_dest_port_by_message_type,
    convert_message,
    convert_message_by_message_type,
    to_int,
)


def _field_value(value) -> str | bytes:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value
    return str(value)


def encode_submission(params: Mapping, legacy: bool = False) -> dict[str, str | bytes]:
    """
    Encode merged SubmitSM parameters.
    
    - msg becomes UTF-16BE hex (or Big5 bytes on the legacy path)
    - dest_port becomes 4 hex digits, or is dropped for narrow message types
    - to_addr becomes a comma-joined deduplicated string
    
    Args:
        params: Full parameter mapping (defaults already merged)
        legacy: Select message encoding by msg_type instead of always UTF-16
        
    Returns:
        New dict of string field values; params is not modified
    """
    fields = dict(params)
    msg_type = to_int(fields.get("msg_type") or 0, "msg_type")
    
    if legacy:
        fields["msg"] = convert_message_by_message_type(fields.get("msg"), msg_type)
    else:
        fields["msg"] = convert_message(fields.get("msg"))
    
    dest_port = convert_dest_port_by_message_type(fields.get("dest_port"), msg_type)
    if dest_port is None:
        fields.pop("dest_port", None)
    else:
        fields["dest_port"] = dest_port
    
    fields["to_addr"] = convert_to_addr(fields.get("to_addr"))
    
    return {key: _field_value(value) for key, value in fields.items()}
