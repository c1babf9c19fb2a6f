"""Location/Vector message."""

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
    check_header,
    get_message_type,
    get_protocol_version,
)

TRACK_DIRECTION_UNKNOWN = 361
TRACK_DIRECTION_UNKNOWN_ENCODED = 181
TRACK_DIRECTION_MAX = 359

SPEED_INVALID = 255.0
SPEED_INVALID_ENCODED = 255
SPEED_MAX_ENCODED = 254

VERTICAL_SPEED_INVALID = 63.0
VERTICAL_SPEED_INVALID_ENCODED = 126
VERTICAL_SPEED_LIMIT = 62.0

HEIGHT_INVALID = -1000.0
HEIGHT_INVALID_ENCODED = 0
PRESSURE_ALTITUDE_INVALID = -1000.0
PRESSURE_ALTITUDE_INVALID_ENCODED = 0
GEODETIC_ALTITUDE_INVALID = -1000.0
GEODETIC_ALTITUDE_INVALID_ENCODED = 0
ALTITUDE_MIN = -1000.0
ALTITUDE_MAX = 31767.0

LATITUDE_ENCODED_LIMIT = 900000000
LONGITUDE_ENCODED_LIMIT = 1800000000

TIMESTAMP_MAX = 36000
TIMESTAMP_INVALID = 0xFFFF

_NIBBLE_MAX = 15
_EW_EAST = 0
_EW_WEST = 1
_SLOW_SPEED_LIMIT = 255 * 0.25
_FAST_SPEED_LIMIT = 254.25

# Header, flags, track, speed, vertical speed, latitude, longitude,
# pressure altitude, geodetic altitude, height, two accuracy bytes,
# timestamp, timestamp accuracy, reserved.
_LAYOUT = struct.Struct("<BBBBbiiHHHBBHBB")


class HeightType(IntEnum):
    """Reference of the height field."""

    ABOVE_TAKEOFF = 0
    AGL = 1


class OperationalStatus(IntEnum):
    """Operational status of the aircraft."""

    UNDECLARED = 0
    GROUND = 1
    AIRBORNE = 2
    EMERGENCY = 3
    REMOTE_ID_SYSTEM_FAILURE = 4


class HorizontalAccuracy(IntEnum):
    """Horizontal position accuracy."""

    UNKNOWN = 0
    METERS_18520 = 1
    METERS_7408 = 2
    METERS_3704 = 3
    METERS_1852 = 4
    METERS_926 = 5
    METERS_555 = 6
    METERS_185 = 7
    METERS_93 = 8
    METERS_30 = 9
    METERS_10 = 10
    METERS_3 = 11
    METERS_1 = 12


class VerticalAccuracy(IntEnum):
    """Vertical position accuracy."""

    UNKNOWN = 0
    METERS_150 = 1
    METERS_45 = 2
    METERS_25 = 3
    METERS_10 = 4
    METERS_3 = 5
    METERS_1 = 6


class SpeedAccuracy(IntEnum):
    """Horizontal speed accuracy."""

    UNKNOWN = 0
    METERS_PER_SECOND_10 = 1
    METERS_PER_SECOND_3 = 2
    METERS_PER_SECOND_1 = 3
    METERS_PER_SECOND_03 = 4


class TimestampAccuracy(IntEnum):
    """Timestamp accuracy in tenths of a second."""

    UNKNOWN = 0
    SECONDS_0_1 = 1
    SECONDS_0_2 = 2
    SECONDS_0_3 = 3
    SECONDS_0_4 = 4
    SECONDS_0_5 = 5
    SECONDS_0_6 = 6
    SECONDS_0_7 = 7
    SECONDS_0_8 = 8
    SECONDS_0_9 = 9
    SECONDS_1_0 = 10
    SECONDS_1_1 = 11
    SECONDS_1_2 = 12
    SECONDS_1_3 = 13
    SECONDS_1_4 = 14
    SECONDS_1_5 = 15


def _member(enum_cls, value):
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _enum_or_int(enum_cls, value):
    member = _member(enum_cls, value)
    return value if member is None else member


def _accuracy_string(prefix, enum_cls, value, unit_prefix, unit) -> str:
    member = _member(enum_cls, value)
    if member is None:
        return "UNKNOWN"
    if member.name == "UNKNOWN":
        return f"{prefix}UNKNOWN"
    return f"{prefix}{member.name.removeprefix(unit_prefix)}{unit}"


def height_type_to_string(height_type) -> str:
    """Return the symbolic name of a height type, or "UNKNOWN"."""
    member = _member(HeightType, height_type)
    return "UNKNOWN" if member is None else f"RID_HEIGHT_TYPE_{member.name}"


def operational_status_to_string(status) -> str:
    """Return the symbolic name of an operational status, or "UNKNOWN"."""
    member = _member(OperationalStatus, status)
    return "UNKNOWN" if member is None else f"RID_OPERATIONAL_STATUS_{member.name}"


def horizontal_accuracy_to_string(accuracy) -> str:
    """Return the symbolic name of a horizontal accuracy, or "UNKNOWN"."""
    return _accuracy_string(
        "RID_HORIZONTAL_ACCURACY_", HorizontalAccuracy, accuracy, "METERS_", "M"
    )


def vertical_accuracy_to_string(accuracy) -> str:
    """Return the symbolic name of a vertical accuracy, or "UNKNOWN"."""
    return _accuracy_string(
        "RID_VERTICAL_ACCURACY_", VerticalAccuracy, accuracy, "METERS_", "M"
    )


def speed_accuracy_to_string(accuracy) -> str:
    """Return the symbolic name of a speed accuracy, or "UNKNOWN"."""
    return _accuracy_string(
        "RID_SPEED_ACCURACY_", SpeedAccuracy, accuracy, "METERS_PER_SECOND_", "MS"
    )


def timestamp_accuracy_to_string(accuracy) -> str:
    """Return the symbolic name of a timestamp accuracy, or "UNKNOWN"."""
    return _accuracy_string(
        "RID_TIMESTAMP_ACCURACY_", TimestampAccuracy, accuracy, "SECONDS_", "S"
    )


def _out_of_range(name: str, value) -> RidError:
    return RidError(ErrorCode.OUT_OF_RANGE, f"{name} {value!r} out of range")


def _small_field(value, name: str, maximum: int) -> int:
    if not 0 <= value <= maximum:
        raise _out_of_range(name, value)
    return int(value)


def _encode_coordinate(degrees: float, limit: float, name: str) -> int:
    if not -limit <= degrees <= limit:
        raise _out_of_range(name, degrees)
    scaled = degrees * 10000000.0
    return int(scaled + 0.5) if degrees >= 0.0 else int(scaled - 0.5)


def _encode_altitude(value: float, name: str) -> int:
    if value == ALTITUDE_MIN:
        return HEIGHT_INVALID_ENCODED
    if not ALTITUDE_MIN <= value <= ALTITUDE_MAX:
        raise _out_of_range(name, value)
    return int((value + 1000.0) / 0.5 + 0.5)


def _decode_altitude(encoded: int) -> float:
    return encoded * 0.5 - 1000.0


class Location:
    """Location/Vector message: position, altitude and velocity of the aircraft.

    Attributes hold decoded values; the encoded wire values are kept internally
    and are what validate() and to_bytes() work on.
    """

    __slots__ = (
        "protocol_version",
        "message_type",
        "_operational_status",
        "_height_type",
        "_ew_direction",
        "_speed_multiplier",
        "_track_direction",
        "_speed",
        "_vertical_speed",
        "_latitude",
        "_longitude",
        "_pressure_altitude",
        "_geodetic_altitude",
        "_height",
        "_horizontal_accuracy",
        "_vertical_accuracy",
        "_baro_altitude_accuracy",
        "_speed_accuracy",
        "_timestamp",
        "_timestamp_accuracy",
    )

    def __init__(
        self,
        *,
        latitude: float = 0.0,
        longitude: float = 0.0,
        geodetic_altitude: float = GEODETIC_ALTITUDE_INVALID,
        pressure_altitude: float = PRESSURE_ALTITUDE_INVALID,
        height: float = HEIGHT_INVALID,
        height_type: int = HeightType.ABOVE_TAKEOFF,
        speed: float = SPEED_INVALID,
        vertical_speed: float = VERTICAL_SPEED_INVALID,
        track_direction: int = TRACK_DIRECTION_UNKNOWN,
        operational_status: int = OperationalStatus.UNDECLARED,
        horizontal_accuracy: int = HorizontalAccuracy.UNKNOWN,
        vertical_accuracy: int = VerticalAccuracy.UNKNOWN,
        speed_accuracy: int = SpeedAccuracy.UNKNOWN,
        baro_altitude_accuracy: int = VerticalAccuracy.UNKNOWN,
        timestamp: int = 0,
        timestamp_accuracy: int = TimestampAccuracy.UNKNOWN,
        protocol_version: int = ProtocolVersion.VERSION_2,
    ):
        self.protocol_version = protocol_version
        self.message_type = MessageType.LOCATION
        self.latitude = latitude
        self.longitude = longitude
        self.geodetic_altitude = geodetic_altitude
        self.pressure_altitude = pressure_altitude
        self.height = height
        self.height_type = height_type
        self.speed = speed
        self.vertical_speed = vertical_speed
        self.track_direction = track_direction
        self.operational_status = operational_status
        self.horizontal_accuracy = horizontal_accuracy
        self.vertical_accuracy = vertical_accuracy
        self.speed_accuracy = speed_accuracy
        self.baro_altitude_accuracy = baro_altitude_accuracy
        self.timestamp = timestamp
        self.timestamp_accuracy = timestamp_accuracy

    @property
    def track_direction(self) -> int:
        """True-north track in clockwise degrees, or TRACK_DIRECTION_UNKNOWN."""
        if self._track_direction == TRACK_DIRECTION_UNKNOWN_ENCODED:
            return TRACK_DIRECTION_UNKNOWN
        if self._ew_direction == _EW_EAST:
            return self._track_direction
        return self._track_direction + 180

    @track_direction.setter
    def track_direction(self, degrees: int) -> None:
        if degrees == TRACK_DIRECTION_UNKNOWN:
            self._track_direction = TRACK_DIRECTION_UNKNOWN_ENCODED
            self._ew_direction = _EW_WEST
            return
        if not 0 <= degrees <= TRACK_DIRECTION_MAX:
            raise _out_of_range("track direction", degrees)
        degrees = int(degrees)
        if degrees < 180:
            self._track_direction = degrees
            self._ew_direction = _EW_EAST
        else:
            self._track_direction = degrees - 180
            self._ew_direction = _EW_WEST

    @property
    def speed(self) -> float:
        """Ground speed in m/s, or SPEED_INVALID."""
        if self._speed == SPEED_INVALID_ENCODED and self._speed_multiplier == 1:
            return SPEED_INVALID
        if self._speed_multiplier == 0:
            return self._speed * 0.25
        return self._speed * 0.75 + _SLOW_SPEED_LIMIT

    @speed.setter
    def speed(self, speed_ms: float) -> None:
        if speed_ms < 0.0:
            raise _out_of_range("speed", speed_ms)
        if speed_ms == SPEED_INVALID:
            self._speed = SPEED_INVALID_ENCODED
            self._speed_multiplier = 1
        elif speed_ms <= _SLOW_SPEED_LIMIT:
            self._speed = int(speed_ms / 0.25 + 0.5)
            self._speed_multiplier = 0
        elif speed_ms < _FAST_SPEED_LIMIT:
            self._speed = int((speed_ms - _SLOW_SPEED_LIMIT) / 0.75 + 0.5)
            self._speed_multiplier = 1
        else:
            self._speed = SPEED_MAX_ENCODED
            self._speed_multiplier = 1

    @property
    def vertical_speed(self) -> float:
        """Vertical speed in m/s, up positive, or VERTICAL_SPEED_INVALID."""
        if self._vertical_speed == VERTICAL_SPEED_INVALID_ENCODED:
            return VERTICAL_SPEED_INVALID
        return self._vertical_speed * 0.5

    @vertical_speed.setter
    def vertical_speed(self, speed_ms: float) -> None:
        if speed_ms == VERTICAL_SPEED_INVALID:
            self._vertical_speed = VERTICAL_SPEED_INVALID_ENCODED
            return
        speed_ms = max(-VERTICAL_SPEED_LIMIT, min(VERTICAL_SPEED_LIMIT, speed_ms))
        if speed_ms >= 0.0:
            self._vertical_speed = int(speed_ms / 0.5 + 0.5)
        else:
            self._vertical_speed = int(speed_ms / 0.5 - 0.5)

    @property
    def latitude(self) -> float:
        return self._latitude / 10000000.0

    @latitude.setter
    def latitude(self, degrees: float) -> None:
        self._latitude = _encode_coordinate(degrees, 90.0, "latitude")

    @property
    def longitude(self) -> float:
        return self._longitude / 10000000.0

    @longitude.setter
    def longitude(self, degrees: float) -> None:
        self._longitude = _encode_coordinate(degrees, 180.0, "longitude")

    @property
    def height(self) -> float:
        return _decode_altitude(self._height)

    @height.setter
    def height(self, height_m: float) -> None:
        self._height = _encode_altitude(height_m, "height")

    @property
    def pressure_altitude(self) -> float:
        return _decode_altitude(self._pressure_altitude)

    @pressure_altitude.setter
    def pressure_altitude(self, altitude_m: float) -> None:
        self._pressure_altitude = _encode_altitude(altitude_m, "pressure altitude")

    @property
    def geodetic_altitude(self) -> float:
        return _decode_altitude(self._geodetic_altitude)

    @geodetic_altitude.setter
    def geodetic_altitude(self, altitude_m: float) -> None:
        self._geodetic_altitude = _encode_altitude(altitude_m, "geodetic altitude")

    @property
    def height_type(self) -> HeightType:
        return HeightType(self._height_type)

    @height_type.setter
    def height_type(self, value) -> None:
        if value not in (HeightType.ABOVE_TAKEOFF, HeightType.AGL):
            raise _out_of_range("height type", value)
        self._height_type = int(value)

    @property
    def operational_status(self):
        return _enum_or_int(OperationalStatus, self._operational_status)

    @operational_status.setter
    def operational_status(self, value) -> None:
        self._operational_status = _small_field(value, "operational status", _NIBBLE_MAX)

    @property
    def horizontal_accuracy(self):
        return _enum_or_int(HorizontalAccuracy, self._horizontal_accuracy)

    @horizontal_accuracy.setter
    def horizontal_accuracy(self, value) -> None:
        self._horizontal_accuracy = _small_field(value, "horizontal accuracy", _NIBBLE_MAX)

    @property
    def vertical_accuracy(self):
        return _enum_or_int(VerticalAccuracy, self._vertical_accuracy)

    @vertical_accuracy.setter
    def vertical_accuracy(self, value) -> None:
        self._vertical_accuracy = _small_field(value, "vertical accuracy", _NIBBLE_MAX)

    @property
    def baro_altitude_accuracy(self):
        return _enum_or_int(VerticalAccuracy, self._baro_altitude_accuracy)

    @baro_altitude_accuracy.setter
    def baro_altitude_accuracy(self, value) -> None:
        self._baro_altitude_accuracy = _small_field(
            value, "baro altitude accuracy", _NIBBLE_MAX
        )

    @property
    def speed_accuracy(self):
        return _enum_or_int(SpeedAccuracy, self._speed_accuracy)

    @speed_accuracy.setter
    def speed_accuracy(self, value) -> None:
        self._speed_accuracy = _small_field(value, "speed accuracy", _NIBBLE_MAX)

    @property
    def timestamp(self) -> int:
        """Deciseconds since the start of the hour, or TIMESTAMP_INVALID."""
        return self._timestamp

    @timestamp.setter
    def timestamp(self, deciseconds: int) -> None:
        if deciseconds == TIMESTAMP_INVALID:
            self._timestamp = TIMESTAMP_INVALID
            return
        self._timestamp = _small_field(deciseconds, "timestamp", TIMESTAMP_MAX)

    @property
    def timestamp_accuracy(self):
        return _enum_or_int(TimestampAccuracy, self._timestamp_accuracy)

    @timestamp_accuracy.setter
    def timestamp_accuracy(self, value) -> None:
        self._timestamp_accuracy = _small_field(
            value, "timestamp accuracy", TimestampAccuracy.SECONDS_1_5
        )

    def set_unixtime(self, unixtime: int) -> None:
        """Set the timestamp from Unix time, as deciseconds past the hour."""
        self.timestamp = (int(unixtime) % 3600) * 10

    def validate(self) -> None:
        """Raise RidError if any field holds an invalid value."""
        check_header(self.protocol_version, self.message_type, MessageType.LOCATION)
        if not -LATITUDE_ENCODED_LIMIT <= self._latitude <= LATITUDE_ENCODED_LIMIT:
            raise RidError(ErrorCode.INVALID_LATITUDE)
        if not -LONGITUDE_ENCODED_LIMIT <= self._longitude <= LONGITUDE_ENCODED_LIMIT:
            raise RidError(ErrorCode.INVALID_LONGITUDE)
        if self._track_direction > TRACK_DIRECTION_UNKNOWN_ENCODED:
            raise RidError(ErrorCode.INVALID_TRACK_DIRECTION)
        if self._timestamp > TIMESTAMP_MAX and self._timestamp != TIMESTAMP_INVALID:
            raise RidError(ErrorCode.INVALID_TIMESTAMP)

    def to_bytes(self) -> bytes:
        """Encode the message as its 25-byte wire form."""
        header = ((self.message_type & 0x0F) << 4) | (self.protocol_version & 0x0F)
        flags = (
            (self._operational_status << 4)
            | (self._height_type << 2)
            | (self._ew_direction << 1)
            | self._speed_multiplier
        )
        return _LAYOUT.pack(
            header,
            flags,
            self._track_direction,
            self._speed,
            self._vertical_speed,
            self._latitude,
            self._longitude,
            self._pressure_altitude,
            self._geodetic_altitude,
            self._height,
            (self._vertical_accuracy << 4) | self._horizontal_accuracy,
            (self._baro_altitude_accuracy << 4) | self._speed_accuracy,
            self._timestamp,
            self._timestamp_accuracy & 0x0F,
            0,
        )

    @classmethod
    def from_bytes(cls, data) -> "Location":
        """Decode a message from its wire form without validating it."""
        if len(data) < MESSAGE_SIZE:
            raise RidError(ErrorCode.BUFFER_TOO_SMALL, "location message is 25 bytes")
        if get_message_type(data) != MessageType.LOCATION:
            raise RidError(ErrorCode.UNKNOWN_MESSAGE_TYPE)
        (
            _header,
            flags,
            track,
            speed,
            vertical_speed,
            latitude,
            longitude,
            pressure_altitude,
            geodetic_altitude,
            height,
            vertical_horizontal,
            baro_speed,
            timestamp,
            timestamp_accuracy,
            _reserved,
        ) = _LAYOUT.unpack_from(bytes(data[:MESSAGE_SIZE]))
        message = cls()
        message.protocol_version = get_protocol_version(data)
        message._operational_status = (flags >> 4) & 0x0F
        message._height_type = (flags >> 2) & 0x01
        message._ew_direction = (flags >> 1) & 0x01
        message._speed_multiplier = flags & 0x01
        message._track_direction = track
        message._speed = speed
        message._vertical_speed = vertical_speed
        message._latitude = latitude
        message._longitude = longitude
        message._pressure_altitude = pressure_altitude
        message._geodetic_altitude = geodetic_altitude
        message._height = height
        message._vertical_accuracy = (vertical_horizontal >> 4) & 0x0F
        message._horizontal_accuracy = vertical_horizontal & 0x0F
        message._baro_altitude_accuracy = (baro_speed >> 4) & 0x0F
        message._speed_accuracy = baro_speed & 0x0F
        message._timestamp = timestamp
        message._timestamp_accuracy = timestamp_accuracy & 0x0F
        return message

    def to_dict(self) -> dict:
        return {
            "protocol_version": int(self.protocol_version),
            "message_type": int(self.message_type),
            "latitude": self.latitude,
            "longitude": self.longitude,
            "geodetic_altitude": self.geodetic_altitude,
            "pressure_altitude": self.pressure_altitude,
            "height": self.height,
            "height_type": self._height_type,
            "speed": self.speed,
            "vertical_speed": self.vertical_speed,
            "track_direction": self.track_direction,
            "operational_status": self._operational_status,
            "horizontal_accuracy": self._horizontal_accuracy,
            "vertical_accuracy": self._vertical_accuracy,
            "speed_accuracy": self._speed_accuracy,
            "baro_altitude_accuracy": self._baro_altitude_accuracy,
            "timestamp": self._timestamp,
            "timestamp_accuracy": self._timestamp_accuracy,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __eq__(self, other):
        if not isinstance(other, Location):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __repr__(self) -> str:
        return (
            f"Location(latitude={self.latitude!r}, longitude={self.longitude!r}, "
            f"geodetic_altitude={self.geodetic_altitude!r}, speed={self.speed!r}, "
            f"track_direction={self.track_direction!r}, timestamp={self.timestamp!r})"
        )