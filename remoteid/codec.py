"""Decoding, validation and JSON formatting of any Remote ID message."""

from __future__ import annotations

from .auth_page import AuthPage0, AuthPageX, auth_page_from_bytes
from .basic_id import BasicId
from .location import Location
from .message import (
    ErrorCode,
    MessageType,
    RidError,
    check_header,
    get_message_type,
    message_type_to_string,
)
from .operator_id import OperatorId
from .self_id import SelfId

_DECODERS = {
    MessageType.BASIC_ID: BasicId.from_bytes,
    MessageType.LOCATION: Location.from_bytes,
    MessageType.AUTH: auth_page_from_bytes,
    MessageType.SELF_ID: SelfId.from_bytes,
    MessageType.OPERATOR_ID: OperatorId.from_bytes,
}

_MESSAGE_CLASSES = (BasicId, Location, SelfId, OperatorId, AuthPage0, AuthPageX)


def decode(data):
    """Decode a 25-byte message into the object for its message type."""
    if data is None:
        raise RidError(ErrorCode.NULL_POINTER, "no message given")
    message_type = get_message_type(data)
    decoder = _DECODERS.get(message_type)
    if decoder is None:
        raise RidError(
            ErrorCode.UNKNOWN_MESSAGE_TYPE,
            f"unsupported message type {message_type_to_string(message_type)}",
        )
    return decoder(data)


def _as_message(message):
    if message is None:
        raise RidError(ErrorCode.NULL_POINTER, "no message given")
    if isinstance(message, (bytes, bytearray, memoryview)):
        return decode(message)
    if not isinstance(message, _MESSAGE_CLASSES):
        raise RidError(ErrorCode.UNKNOWN_MESSAGE_TYPE, f"not a message: {message!r}")
    return message


def validate(message) -> None:
    """Validate a message object or encoded message, raising RidError if invalid."""
    message = _as_message(message)
    if isinstance(message, (AuthPage0, AuthPageX)):
        check_header(message.protocol_version, message.message_type, MessageType.AUTH)
    else:
        message.validate()


def to_json(message) -> str:
    """Format a message object or encoded message as a JSON string."""
    return _as_message(message).to_json()