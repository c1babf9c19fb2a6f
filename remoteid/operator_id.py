"""Operator ID message."""

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

OPERATOR_ID_SIZE = 20


class OperatorIdType(IntEnum):
    """Operator ID types. Values 1-200 are reserved, 201-255 private use."""

    OPERATOR_ID = 0


def operator_id_type_to_string(id_type) -> str:
    """Return the symbolic name of an operator ID type, or "UNKNOWN"."""
    if id_type == OperatorIdType.OPERATOR_ID:
        return "RID_ID_TYPE_OPERATOR_ID"
    return "UNKNOWN"


class OperatorId:
    """Operator ID message: an ASCII identifier of up to 20 characters."""

    __slots__ = ("protocol_version", "message_type", "_id_type", "_operator_id")

    def __init__(
        self,
        operator_id: str = "",
        id_type: int = OperatorIdType.OPERATOR_ID,
        *,
        protocol_version: int = ProtocolVersion.VERSION_2,
    ):
        self.protocol_version = protocol_version
        self.message_type = MessageType.OPERATOR_ID
        self.id_type = id_type
        self.operator_id = operator_id

    @property
    def id_type(self):
        try:
            return OperatorIdType(self._id_type)
        except ValueError:
            return self._id_type

    @id_type.setter
    def id_type(self, value) -> None:
        if not 0 <= value <= 0xFF:
            raise RidError(ErrorCode.OUT_OF_RANGE, f"id type {value} out of range")
        self._id_type = int(value)

    @property
    def operator_id(self) -> str:
        return self._operator_id.split(b"\0", 1)[0].decode("latin-1")

    @operator_id.setter
    def operator_id(self, value: str) -> None:
        if not value.isascii():
            raise RidError(ErrorCode.INVALID_CHARACTER, "operator ID must be ASCII")
        raw = value.encode("ascii")
        if len(raw) > OPERATOR_ID_SIZE:
            raise RidError(
                ErrorCode.BUFFER_TOO_LARGE,
                f"operator ID longer than {OPERATOR_ID_SIZE} characters",
            )
        self._operator_id = raw.ljust(OPERATOR_ID_SIZE, b"\0")

    def validate(self) -> None:
        """Raise RidError if any field holds an invalid value."""
        check_header(self.protocol_version, self.message_type, MessageType.OPERATOR_ID)
        if any(byte > 0x7F for byte in self._operator_id):
            raise RidError(ErrorCode.INVALID_CHARACTER, "operator ID must be ASCII")

    def to_bytes(self) -> bytes:
        """Encode the message as its 25-byte wire form."""
        header = ((self.message_type & 0x0F) << 4) | (self.protocol_version & 0x0F)
        return bytes([header, self._id_type]) + self._operator_id + bytes(3)

    @classmethod
    def from_bytes(cls, data) -> "OperatorId":
        """Decode a message from its wire form."""
        if len(data) < MESSAGE_SIZE:
            raise RidError(ErrorCode.BUFFER_TOO_SMALL, "operator ID message is 25 bytes")
        if get_message_type(data) != MessageType.OPERATOR_ID:
            raise RidError(ErrorCode.UNKNOWN_MESSAGE_TYPE)
        message = cls()
        message.protocol_version = get_protocol_version(data)
        message._id_type = data[1]
        message._operator_id = bytes(data[2 : 2 + OPERATOR_ID_SIZE])
        return message

    def to_dict(self) -> dict:
        return {
            "protocol_version": int(self.protocol_version),
            "message_type": int(self.message_type),
            "id_type": int(self._id_type),
            "operator_id": self.operator_id,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __eq__(self, other):
        if not isinstance(other, OperatorId):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __repr__(self) -> str:
        return (
            f"OperatorId(operator_id={self.operator_id!r}, id_type={self.id_type!r}, "
            f"protocol_version={self.protocol_version!r})"
        )