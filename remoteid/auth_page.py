"""Authentication message pages."""

from __future__ import annotations

import json
import struct
from enum import IntEnum

from .message import (
    MESSAGE_SIZE,
    ErrorCode,
    MessageType,
    ProtocolVersion,
    RidError,
    get_message_type,
    get_protocol_version,
)

AUTH_PAGE_0_DATA_SIZE = 17
AUTH_PAGE_DATA_SIZE = 23
AUTH_MAX_PAGE_INDEX = 15
AUTH_TYPE_MAX = 15

# Header, type and page number, last page index, length, timestamp, data.
_PAGE_0_LAYOUT = struct.Struct(f"<BBBBI{AUTH_PAGE_0_DATA_SIZE}s")


class AuthType(IntEnum):
    """Authentication types. Values 6-15 are reserved or private use."""

    NONE = 0
    UAS_ID_SIGNATURE = 1
    OPERATOR_ID_SIGNATURE = 2
    MESSAGE_SET_SIGNATURE = 3
    NETWORK_REMOTE_ID = 4
    SPECIFIC_METHOD = 5


def auth_type_to_string(auth_type) -> str:
    """Return the symbolic name of an authentication type, or "UNKNOWN"."""
    try:
        return f"RID_AUTH_TYPE_{AuthType(auth_type).name}"
    except ValueError:
        return "UNKNOWN"


def _check_auth_type(value) -> int:
    if not 0 <= value <= AUTH_TYPE_MAX:
        raise RidError(ErrorCode.OUT_OF_RANGE, f"auth type {value} out of range")
    return int(value)


def _auth_type_member(value):
    try:
        return AuthType(value)
    except ValueError:
        return value


def _pad_data(value, size: int) -> bytes:
    raw = bytes(value)
    if len(raw) > size:
        raise RidError(
            ErrorCode.BUFFER_TOO_LARGE, f"auth data longer than {size} bytes"
        )
    return raw.ljust(size, b"\0")


def _header(protocol_version, message_type) -> int:
    return ((message_type & 0x0F) << 4) | (protocol_version & 0x0F)


def _check_wire(data) -> None:
    if len(data) < MESSAGE_SIZE:
        raise RidError(ErrorCode.BUFFER_TOO_SMALL, "auth message is 25 bytes")
    if get_message_type(data) != MessageType.AUTH:
        raise RidError(ErrorCode.UNKNOWN_MESSAGE_TYPE)


class AuthPage0:
    """First authentication page: carries type, page count, length and timestamp."""

    __slots__ = (
        "protocol_version",
        "message_type",
        "_auth_type",
        "_last_page_index",
        "_length",
        "_timestamp",
        "_auth_data",
    )

    def __init__(
        self,
        auth_data=b"",
        auth_type: int = AuthType.NONE,
        last_page_index: int = 0,
        length: int = 0,
        timestamp: int = 0,
        *,
        protocol_version: int = ProtocolVersion.VERSION_2,
    ):
        self.protocol_version = protocol_version
        self.message_type = MessageType.AUTH
        self.auth_type = auth_type
        self.last_page_index = last_page_index
        self.length = length
        self.timestamp = timestamp
        self.auth_data = auth_data

    @property
    def page_number(self) -> int:
        return 0

    @property
    def auth_type(self):
        return _auth_type_member(self._auth_type)

    @auth_type.setter
    def auth_type(self, value) -> None:
        self._auth_type = _check_auth_type(value)

    @property
    def last_page_index(self) -> int:
        # The upper four bits are reserved.
        return self._last_page_index & 0x0F

    @last_page_index.setter
    def last_page_index(self, index) -> None:
        if not 0 <= index <= AUTH_MAX_PAGE_INDEX:
            raise RidError(ErrorCode.OUT_OF_RANGE, f"last page index {index} out of range")
        self._last_page_index = int(index)

    @property
    def length(self) -> int:
        """Total length of the authentication data in bytes."""
        return self._length

    @length.setter
    def length(self, value) -> None:
        if not 0 <= value <= 0xFF:
            raise RidError(ErrorCode.OUT_OF_RANGE, f"length {value} out of range")
        self._length = int(value)

    @property
    def timestamp(self) -> int:
        """Seconds since 2019-01-01 00:00:00 UTC."""
        return self._timestamp

    @timestamp.setter
    def timestamp(self, value) -> None:
        if not 0 <= value <= 0xFFFFFFFF:
            raise RidError(ErrorCode.OUT_OF_RANGE, f"timestamp {value} out of range")
        self._timestamp = int(value)

    @property
    def auth_data(self) -> bytes:
        """The 17-byte data field, zero padded."""
        return self._auth_data

    @auth_data.setter
    def auth_data(self, value) -> None:
        self._auth_data = _pad_data(value, AUTH_PAGE_0_DATA_SIZE)

    def to_bytes(self) -> bytes:
        """Encode the page as its 25-byte wire form."""
        return _PAGE_0_LAYOUT.pack(
            _header(self.protocol_version, self.message_type),
            self._auth_type << 4,
            self._last_page_index,
            self._length,
            self._timestamp,
            self._auth_data,
        )

    @classmethod
    def from_bytes(cls, data) -> "AuthPage0":
        """Decode page 0 from its wire form."""
        _check_wire(data)
        if data[1] & 0x0F != 0:
            raise RidError(ErrorCode.INVALID_PAGE_NUMBER, "not authentication page 0")
        _, types, last_index, length, timestamp, auth_data = _PAGE_0_LAYOUT.unpack_from(
            bytes(data[:MESSAGE_SIZE])
        )
        page = cls()
        page.protocol_version = get_protocol_version(data)
        page._auth_type = (types >> 4) & 0x0F
        page._last_page_index = last_index
        page._length = length
        page._timestamp = timestamp
        page._auth_data = auth_data
        return page

    def to_dict(self) -> dict:
        return {
            "protocol_version": int(self.protocol_version),
            "message_type": int(self.message_type),
            "page_number": 0,
            "auth_type": self._auth_type,
            "last_page_index": self.last_page_index,
            "length": self._length,
            "timestamp": self._timestamp,
            "auth_data": self._auth_data.hex(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __eq__(self, other):
        if not isinstance(other, AuthPage0):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __repr__(self) -> str:
        return (
            f"AuthPage0(auth_type={self.auth_type!r}, "
            f"last_page_index={self.last_page_index!r}, length={self.length!r}, "
            f"timestamp={self.timestamp!r}, auth_data={self.auth_data!r})"
        )


class AuthPageX:
    """Authentication page 1 to 15: carries a continuation of the data."""

    __slots__ = ("protocol_version", "message_type", "_auth_type", "_page_number", "_auth_data")

    def __init__(
        self,
        page_number: int,
        auth_data=b"",
        auth_type: int = AuthType.NONE,
        *,
        protocol_version: int = ProtocolVersion.VERSION_2,
    ):
        self.protocol_version = protocol_version
        self.message_type = MessageType.AUTH
        self.page_number = page_number
        self.auth_type = auth_type
        self.auth_data = auth_data

    @property
    def page_number(self) -> int:
        return self._page_number

    @page_number.setter
    def page_number(self, value) -> None:
        if not 1 <= value <= AUTH_MAX_PAGE_INDEX:
            raise RidError(ErrorCode.OUT_OF_RANGE, f"page number {value} out of range")
        self._page_number = int(value)

    @property
    def auth_type(self):
        return _auth_type_member(self._auth_type)

    @auth_type.setter
    def auth_type(self, value) -> None:
        self._auth_type = _check_auth_type(value)

    @property
    def auth_data(self) -> bytes:
        """The 23-byte data field, zero padded."""
        return self._auth_data

    @auth_data.setter
    def auth_data(self, value) -> None:
        self._auth_data = _pad_data(value, AUTH_PAGE_DATA_SIZE)

    def to_bytes(self) -> bytes:
        """Encode the page as its 25-byte wire form."""
        header = _header(self.protocol_version, self.message_type)
        return bytes([header, (self._auth_type << 4) | self._page_number]) + self._auth_data

    @classmethod
    def from_bytes(cls, data) -> "AuthPageX":
        """Decode a continuation page from its wire form."""
        _check_wire(data)
        page_number = data[1] & 0x0F
        if page_number == 0:
            raise RidError(ErrorCode.INVALID_PAGE_NUMBER, "page 0 is not a continuation page")
        page = cls(page_number)
        page.protocol_version = get_protocol_version(data)
        page._auth_type = (data[1] >> 4) & 0x0F
        page._auth_data = bytes(data[2 : 2 + AUTH_PAGE_DATA_SIZE])
        return page

    def to_dict(self) -> dict:
        return {
            "protocol_version": int(self.protocol_version),
            "message_type": int(self.message_type),
            "page_number": self._page_number,
            "auth_type": self._auth_type,
            "auth_data": self._auth_data.hex(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __eq__(self, other):
        if not isinstance(other, AuthPageX):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __repr__(self) -> str:
        return (
            f"AuthPageX(page_number={self.page_number!r}, "
            f"auth_type={self.auth_type!r}, auth_data={self.auth_data!r})"
        )


def auth_page_from_bytes(data) -> AuthPage0 | AuthPageX:
    """Decode an authentication page, choosing the class by its page number."""
    _check_wire(data)
    if data[1] & 0x0F == 0:
        return AuthPage0.from_bytes(data)
    return AuthPageX.from_bytes(data)