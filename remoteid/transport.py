"""Transport methods used for broadcasting Remote ID messages."""

from __future__ import annotations

from enum import IntEnum

from .message import ErrorCode, RidError

BLUETOOTH_LEGACY_MAX_PAYLOAD = 25
BLUETOOTH_LONG_RANGE_MAX_PAYLOAD = 255
WIFI_NAN_MAX_PAYLOAD = 255
WIFI_BEACON_MAX_PAYLOAD = 250

TIME_UNIT_US = 1024
"""Time unit in microseconds."""

BLUETOOTH_OUI = 0xFFFA
WIFI_NAN_OUI = 0x506F9A
WIFI_BEACON_OUI = 0xFA0BBC

BLUETOOTH_APP_CODE = 0x0D

WIFI_NAN_CLUSTER_ID = 0x506F9A0100FF
WIFI_NAN_CHANNEL_2G = 6
WIFI_NAN_CHANNEL_5G = 149

WIFI_BEACON_VENDOR_TYPE = 0x0D


class Transport(IntEnum):
    """Broadcast transport methods."""

    BLUETOOTH_LEGACY = 0
    BLUETOOTH_LONG_RANGE = 1
    WIFI_NAN = 2
    WIFI_BEACON = 3


_MAX_PAYLOAD = {
    Transport.BLUETOOTH_LEGACY: BLUETOOTH_LEGACY_MAX_PAYLOAD,
    Transport.BLUETOOTH_LONG_RANGE: BLUETOOTH_LONG_RANGE_MAX_PAYLOAD,
    Transport.WIFI_NAN: WIFI_NAN_MAX_PAYLOAD,
    Transport.WIFI_BEACON: WIFI_BEACON_MAX_PAYLOAD,
}


def transport_to_string(transport) -> str:
    """Return the symbolic name of a transport, or "UNKNOWN"."""
    try:
        return f"RID_TRANSPORT_{Transport(transport).name}"
    except ValueError:
        return "UNKNOWN"


def max_payload(transport) -> int:
    """Return the maximum payload size in bytes for a transport."""
    try:
        return _MAX_PAYLOAD[Transport(transport)]
    except ValueError:
        raise RidError(ErrorCode.OUT_OF_RANGE, f"unknown transport {transport!r}") from None