"""Self ID message."""

from __future__ import annotations

import json
from enum import IntEnum

from .message import (
    MESSAGE_SIZE,
    ErrorCode,
    MessageType,
    ProtocolVersion,
    RidError,
    check_header,
    get_message_type,
    get_protocol_version,
)

DESCRIPTION_SIZE = 23


class DescriptionType(IntEnum):
    """Description types. Values 3-200 are reserved, 201-255 private use."""

    TEXT = 0
    EMERGENCY = 1
    EXTENDED_STATUS = 2


def description_type_to_string(description_type) -> str:
    """Return the symbolic name of a description type, or "UNKNOWN"."""
    try:
        return f"RID_DESCRIPTION_TYPE_{DescriptionType(description_type).name}"
    except ValueError:
        return "UNKNOWN"


class SelfId:
    """Self ID message: a free-text ASCII description of up to 23 characters."""

    __slots__ = ("protocol_version", "message_type", "_description_type", "_description")

    def __init__(
        self,
        description: str = "",
        description_type: int = DescriptionType.TEXT,
        *,
        protocol_version: int = ProtocolVersion.VERSION_2,
    ):
        self.protocol_version = protocol_version
        self.message_type = MessageType.SELF_ID
        self.description_type = description_type
        self.description = description

    @property
    def description_type(self):
        try:
            return DescriptionType(self._description_type)
        except ValueError:
            return self._description_type

    @description_type.setter
    def description_type(self, value) -> None:
        if not 0 <= value <= 0xFF:
            raise RidError(ErrorCode.OUT_OF_RANGE, f"description type {value} out of range")
        self._description_type = int(value)

    @property
    def description(self) -> str:
        return self._description.split(b"\0", 1)[0].decode("latin-1")

    @description.setter
    def description(self, value: str) -> None:
        if not value.isascii():
            raise RidError(ErrorCode.INVALID_CHARACTER, "description must be ASCII")
        raw = value.encode("ascii")
        if len(raw) > DESCRIPTION_SIZE:
            raise RidError(
                ErrorCode.BUFFER_TOO_LARGE,
                f"description longer than {DESCRIPTION_SIZE} characters",
            )
        self._description = raw.ljust(DESCRIPTION_SIZE, b"\0")

    def validate(self) -> None:
        """Raise RidError if any field holds an invalid value."""
        check_header(self.protocol_version, self.message_type, MessageType.SELF_ID)
        if any(byte > 0x7F for byte in self._description):
            raise RidError(ErrorCode.INVALID_CHARACTER, "description must be ASCII")

    def to_bytes(self) -> bytes:
        """Encode the message as its 25-byte wire form."""
        header = ((self.message_type & 0x0F) << 4) | (self.protocol_version & 0x0F)
        return bytes([header, self._description_type]) + self._description

    @classmethod
    def from_bytes(cls, data) -> "SelfId":
        """Decode a message from its wire form."""
        if len(data) < MESSAGE_SIZE:
            raise RidError(ErrorCode.BUFFER_TOO_SMALL, "self ID message is 25 bytes")
        if get_message_type(data) != MessageType.SELF_ID:
            raise RidError(ErrorCode.UNKNOWN_MESSAGE_TYPE)
        message = cls()
        message.protocol_version = get_protocol_version(data)
        message._description_type = data[1]
        message._description = bytes(data[2 : 2 + DESCRIPTION_SIZE])
        return message

    def to_dict(self) -> dict:
        return {
            "protocol_version": int(self.protocol_version),
            "message_type": int(self.message_type),
            "description_type": int(self._description_type),
            "description": self.description,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __eq__(self, other):
        if not isinstance(other, SelfId):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __repr__(self) -> str:
        return (
            f"SelfId(description={self.description!r}, "
            f"description_type={self.description_type!r}, "
            f"protocol_version={self.protocol_version!r})"
        )