"""Common message header handling for Remote ID messages."""

from __future__ import annotations

from enum import IntEnum

MESSAGE_SIZE = 25
"""Size of a single Remote ID message in bytes."""


class ErrorCode(IntEnum):
    """Error codes reported by the library."""

    SUCCESS = 0
    NULL_POINTER = -1
    BUFFER_TOO_SMALL = -2
    BUFFER_TOO_LARGE = -3
    INVALID_CHARACTER = -4
    OUT_OF_RANGE = -5
    UNKNOWN_MESSAGE_TYPE = -6
    INVALID_LATITUDE = -7
    INVALID_LONGITUDE = -8
    INVALID_TRACK_DIRECTION = -9
    INVALID_TIMESTAMP = -10
    INVALID_PROTOCOL_VERSION = -11
    INVALID_MESSAGE_COUNT = -12
    INVALID_MESSAGE_SIZE = -13
    INVALID_LAST_PAGE_INDEX = -14
    INVALID_PAGE_NUMBER = -15
    NON_EMPTY_SIGNATURE = -16
    INVALID_UUID_VERSION = -17
    INVALID_UUID_VARIANT = -18
    INVALID_UUID_PADDING = -19


class MessageType(IntEnum):
    """Message types carried in the high nibble of the header byte."""

    BASIC_ID = 0x00
    LOCATION = 0x01
    AUTH = 0x02
    SELF_ID = 0x03
    SYSTEM = 0x04
    OPERATOR_ID = 0x05
    MESSAGE_PACK = 0x0F


class ProtocolVersion(IntEnum):
    """Protocol versions carried in the low nibble of the header byte."""

    VERSION_0 = 0x00
    VERSION_1 = 0x01
    VERSION_2 = 0x02
    PRIVATE_USE = 0x0F


class RidError(ValueError):
    """Raised when a message or a value does not satisfy the specification."""

    def __init__(self, code, message=None):
        self.code = ErrorCode(code)
        super().__init__(message or error_to_string(self.code))


def error_to_string(error) -> str:
    """Return the symbolic name of an error code, or "UNKNOWN"."""
    try:
        code = ErrorCode(error)
    except ValueError:
        return "UNKNOWN"
    if code is ErrorCode.SUCCESS:
        return "RID_SUCCESS"
    return f"RID_ERROR_{code.name}"


def message_type_to_string(message_type) -> str:
    """Return the symbolic name of a message type, or "UNKNOWN"."""
    try:
        return f"RID_MESSAGE_TYPE_{MessageType(message_type).name}"
    except ValueError:
        return "UNKNOWN"


def protocol_version_to_string(version) -> str:
    """Return the symbolic name of a protocol version, or "UNKNOWN"."""
    try:
        return f"RID_PROTOCOL_{ProtocolVersion(version).name}"
    except ValueError:
        return "UNKNOWN"


def _header_byte(data) -> int:
    if len(data) < 1:
        raise RidError(ErrorCode.BUFFER_TOO_SMALL, "message has no header byte")
    return data[0]


def get_message_type(data):
    """Return the message type of an encoded message.

    Known types come back as MessageType, others as a plain int.
    """
    value = (_header_byte(data) >> 4) & 0x0F
    try:
        return MessageType(value)
    except ValueError:
        return value


def get_protocol_version(data):
    """Return the protocol version of an encoded message.

    Known versions come back as ProtocolVersion, others as a plain int.
    """
    value = _header_byte(data) & 0x0F
    try:
        return ProtocolVersion(value)
    except ValueError:
        return value


def check_header(protocol_version, message_type, expected_type) -> None:
    """Raise RidError unless the header fields are valid for expected_type."""
    if not (
        ProtocolVersion.VERSION_0 <= protocol_version <= ProtocolVersion.VERSION_2
        or protocol_version == ProtocolVersion.PRIVATE_USE
    ):
        raise RidError(ErrorCode.INVALID_PROTOCOL_VERSION)
    if message_type != expected_type:
        raise RidError(ErrorCode.UNKNOWN_MESSAGE_TYPE)