"""Basic ID message."""

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

UAS_ID_SIZE = 20
ID_TYPE_MAX = 15
UA_TYPE_MAX = 15

_REGISTRATION_CHARS = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789.")
# Serial numbers exclude the letters I and O.
_SERIAL_CHARS = frozenset(b"ABCDEFGHJKLMNPQRSTUVWXYZ0123456789")


class IdType(IntEnum):
    """UAS ID types. Values 5-15 are unused."""

    NONE = 0
    SERIAL_NUMBER = 1
    CAA_REGISTRATION_ID = 2
    UTM_ASSIGNED_UUID = 3
    SPECIFIC_SESSION_ID = 4


class UaType(IntEnum):
    """Unmanned aircraft types."""

    NONE = 0
    AEROPLANE_OR_FIXED_WING = 1
    HELICOPTER_OR_MULTIROTOR = 2
    GYROPLANE = 3
    HYBRID_LIFT = 4
    ORNITHOPTER = 5
    GLIDER = 6
    KITE = 7
    FREE_BALLOON = 8
    CAPTIVE_BALLOON = 9
    AIRSHIP = 10
    FREE_FALL_PARACHUTE = 11
    ROCKET = 12
    TETHERED_POWERED_AIRCRAFT = 13
    GROUND_OBSTACLE = 14
    OTHER = 15


def id_type_to_string(id_type) -> str:
    """Return the symbolic name of an ID type, or "UNKNOWN"."""
    try:
        return f"RID_ID_TYPE_{IdType(id_type).name}"
    except ValueError:
        return "UNKNOWN"


def ua_type_to_string(ua_type) -> str:
    """Return the symbolic name of a UA type, or "UNKNOWN"."""
    try:
        return f"RID_UA_TYPE_{UaType(ua_type).name}"
    except ValueError:
        return "UNKNOWN"


def _nibble(value, name: str, maximum: int) -> int:
    if not 0 <= value <= maximum:
        raise RidError(ErrorCode.OUT_OF_RANGE, f"{name} {value} out of range")
    return int(value)


class BasicId:
    """Basic ID message: identifies the aircraft and its type."""

    __slots__ = ("protocol_version", "message_type", "_id_type", "_ua_type", "_uas_id")

    def __init__(
        self,
        uas_id: str | bytes = "",
        id_type: int = IdType.NONE,
        ua_type: int = UaType.NONE,
        *,
        protocol_version: int = ProtocolVersion.VERSION_2,
    ):
        self.protocol_version = protocol_version
        self.message_type = MessageType.BASIC_ID
        self.id_type = id_type
        self.ua_type = ua_type
        self.uas_id = uas_id

    @property
    def id_type(self):
        try:
            return IdType(self._id_type)
        except ValueError:
            return self._id_type

    @id_type.setter
    def id_type(self, value) -> None:
        self._id_type = _nibble(value, "id type", ID_TYPE_MAX)

    @property
    def ua_type(self):
        try:
            return UaType(self._ua_type)
        except ValueError:
            return self._ua_type

    @ua_type.setter
    def ua_type(self, value) -> None:
        self._ua_type = _nibble(value, "ua type", UA_TYPE_MAX)

    @property
    def uas_id(self) -> str:
        """The UAS ID as text, up to the first NUL byte."""
        return self._uas_id.split(b"\0", 1)[0].decode("latin-1")

    @uas_id.setter
    def uas_id(self, value) -> None:
        if isinstance(value, str):
            try:
                raw = value.encode("latin-1")
            except UnicodeEncodeError:
                raise RidError(
                    ErrorCode.INVALID_CHARACTER, "UAS ID must be single-byte text"
                ) from None
        else:
            raw = bytes(value)
        if len(raw) > UAS_ID_SIZE:
            raise RidError(
                ErrorCode.BUFFER_TOO_LARGE, f"UAS ID longer than {UAS_ID_SIZE} bytes"
            )
        self._uas_id = raw.ljust(UAS_ID_SIZE, b"\0")

    @property
    def uas_id_bytes(self) -> bytes:
        """The raw 20-byte UAS ID field."""
        return self._uas_id

    def _check_characters(self, allowed: frozenset) -> None:
        for byte in self._uas_id:
            if byte == 0:
                break
            if byte not in allowed:
                raise RidError(ErrorCode.INVALID_CHARACTER, f"invalid character {chr(byte)!r}")

    def _check_uuid(self) -> None:
        version = (self._uas_id[6] >> 4) & 0x0F
        if not 1 <= version <= 5:
            raise RidError(ErrorCode.INVALID_UUID_VERSION)
        variant = (self._uas_id[8] >> 6) & 0x03
        if variant != 0x02:
            raise RidError(ErrorCode.INVALID_UUID_VARIANT)
        if any(self._uas_id[16:20]):
            raise RidError(ErrorCode.INVALID_UUID_PADDING)

    def validate(self) -> None:
        """Raise RidError if any field holds an invalid value."""
        check_header(self.protocol_version, self.message_type, MessageType.BASIC_ID)
        if self._id_type == IdType.CAA_REGISTRATION_ID:
            self._check_characters(_REGISTRATION_CHARS)
        elif self._id_type == IdType.SERIAL_NUMBER:
            self._check_characters(_SERIAL_CHARS)
        elif self._id_type == IdType.UTM_ASSIGNED_UUID:
            self._check_uuid()

    def to_bytes(self) -> bytes:
        """Encode the message as its 25-byte wire form."""
        header = ((self.message_type & 0x0F) << 4) | (self.protocol_version & 0x0F)
        types = (self._id_type << 4) | self._ua_type
        return bytes([header, types]) + self._uas_id + bytes(3)

    @classmethod
    def from_bytes(cls, data) -> "BasicId":
        """Decode a message from its wire form."""
        if len(data) < MESSAGE_SIZE:
            raise RidError(ErrorCode.BUFFER_TOO_SMALL, "basic ID message is 25 bytes")
        if get_message_type(data) != MessageType.BASIC_ID:
            raise RidError(ErrorCode.UNKNOWN_MESSAGE_TYPE)
        message = cls()
        message.protocol_version = get_protocol_version(data)
        message._ua_type = data[1] & 0x0F
        message._id_type = (data[1] >> 4) & 0x0F
        message._uas_id = bytes(data[2 : 2 + UAS_ID_SIZE])
        return message

    def to_dict(self) -> dict:
        return {
            "protocol_version": int(self.protocol_version),
            "message_type": int(self.message_type),
            "id_type": int(self._id_type),
            "ua_type": int(self._ua_type),
            "uas_id": self.uas_id,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __eq__(self, other):
        if not isinstance(other, BasicId):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __repr__(self) -> str:
        return (
            f"BasicId(uas_id={self.uas_id!r}, id_type={self.id_type!r}, "
            f"ua_type={self.ua_type!r}, protocol_version={self.protocol_version!r})"
        )