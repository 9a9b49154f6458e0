"""Message body and destination port encoding."""

from ..errors import EncodingError, InvalidParameterError

# Message type codes
# 0 or 1 => Big5 (legacy)
# 2 or 3 => UTF-16 and HEX
WIDE_MESSAGE_TYPES = (2, 3)

# Data coding scheme sent with every canonical message (UCS-2)
UNICODE_DCS = 8

WIDE_ENCODING = "utf-16-be"
LEGACY_ENCODING = "big5"


def to_int(value, name: str) -> int:
    """Convert a numeric parameter, naming the field on failure."""
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}") from e


def to_hex(data: bytes) -> str:
    """Render bytes as uppercase hex, two digits per byte."""
    return data.hex().upper()


def convert_message(msg: str | None) -> str:
    """
    Encode message text as UTF-16 big-endian hex.
    
    Example: "Hi" => "00480069"
    """
    if msg is None:
        return ""
    return to_hex(msg.encode(WIDE_ENCODING))


def encode_big5(msg: str) -> bytes:
    """Encode text to Big5, failing on characters Big5 cannot hold."""
    try:
        return msg.encode(LEGACY_ENCODING)
    except UnicodeEncodeError as e:
        raise EncodingError(LEGACY_ENCODING, msg[e.start], e.start) from e


def convert_message_by_message_type(msg: str | None, msg_type: int) -> str | bytes:
    """
    Convert message by message type code.
    
    0 or 1 => Big5 bytes
    2 or 3 => UTF-16 and HEX
    
    Any other code leaves the text unchanged.
    """
    if msg is None:
        msg = ""
    
    msg_type = to_int(msg_type, "msg_type")
    if msg_type <= 1:
        return encode_big5(msg)
    if msg_type in WIDE_MESSAGE_TYPES:
        return convert_message(msg)
    return msg


def convert_dest_port_by_message_type(dest_port: int | str | None, msg_type: int) -> str | None:
    """
    Convert destination port to hexadecimal if message type code is 2 or 3.
    
    Example: 1234 => "04D2"
    
    Returns:
        Four uppercase hex digits, or None when the port is not sent
    """
    if to_int(msg_type, "msg_type") not in WIDE_MESSAGE_TYPES:
        return None
    
    port = to_int(dest_port or 0, "dest_port")
    if not 0 <= port <= 0xFFFF:
        raise InvalidParameterError(f"dest_port out of range: {port}")
    
    return f"{port:04X}"
