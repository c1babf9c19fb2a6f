# remoteid

`remoteid` reads, writes and checks the 25-byte broadcast messages that
unmanned aircraft send under the ASTM F3411 Remote ID standard. It works on
plain `bytes`: hand it a message taken from a received frame and it gives back
an object, or build an object and get its wire form back.

It has no dependencies outside the standard library.

## What it covers

| Module                 | Contents                                                                 |
|------------------------|--------------------------------------------------------------------------|
| `remoteid.message`     | `MessageType`, `ProtocolVersion`, `ErrorCode`, `RidError`, `get_message_type`, `get_protocol_version`, `check_header` |
| `remoteid.basic_id`    | `BasicId`, `IdType`, `UaType`                                            |
| `remoteid.location`    | `Location`, `HeightType`, `OperationalStatus` and the accuracy enums     |
| `remoteid.auth_page`   | `AuthPage0`, `AuthPageX`, `AuthType`, `auth_page_from_bytes`             |
| `remoteid.self_id`     | `SelfId`, `DescriptionType`                                              |
| `remoteid.operator_id` | `OperatorId`, `OperatorIdType`                                           |
| `remoteid.transport`   | `Transport`, `max_payload` and the transport constants                   |
| `remoteid.codec`       | `decode`, `validate` and `to_json` for any supported message             |

`BasicId`, `Location`, `SelfId` and `OperatorId` have `from_bytes`,
`to_bytes`, `validate`, `to_dict` and `to_json`. `AuthPage0` and `AuthPageX`
have `from_bytes`, `to_bytes`, `to_dict` and `to_json`; their header is
checked through `remoteid.codec.validate`.

## Decoding a received message

```python
from remoteid.codec import decode, validate, to_json

# Basic ID, protocol version 2, ID type "serial number", made-up serial.
frame = bytes([0x02, 0x10]) + b"1234ABCD5678EFGH".ljust(20, b"\x00") + bytes(3)

message = decode(frame)          # a BasicId
validate(message)
print(message.uas_id, message.id_type)
print(to_json(message))
```

`decode` reads the message type from the header byte and returns `BasicId`,
`Location`, `SelfId`, `OperatorId`, or for authentication messages
`AuthPage0` or `AuthPageX` depending on the page number. `validate` and
`to_json` accept either a message object or its encoded bytes.

The header can also be read on its own:

```python
from remoteid.message import get_message_type, get_protocol_version, MessageType

if get_message_type(frame) is MessageType.BASIC_ID:
    print(get_protocol_version(frame))
```

## Building a message

Fields are set with their real-world values and encoded as the standard
prescribes:

```python
from remoteid.location import Location, OperationalStatus

location = Location(
    latitude=60.1699,
    longitude=24.9384,
    geodetic_altitude=120.0,
    speed=12.5,
    track_direction=270,
    operational_status=OperationalStatus.AIRBORNE,
)
location.set_unixtime(1700000000)
wire = location.to_bytes()       # 25 bytes
assert Location.from_bytes(wire) == location
```

Setting a value outside its range raises `RidError` straight away.

## Errors

Invalid values raise `RidError`, a subclass of `ValueError`. Its `code` is an
`ErrorCode` member naming what went wrong, for example an out-of-range
latitude, a serial number with a forbidden character, or a UTM UUID with the
wrong version bits:

```python
from remoteid.codec import validate
from remoteid.message import RidError, error_to_string

try:
    validate(message)
except RidError as exc:
    print(error_to_string(exc.code))
```

## Names for enum values

Each enum has a matching `*_to_string` function, such as
`message_type_to_string`, `protocol_version_to_string`, `error_to_string`,
`id_type_to_string`, `ua_type_to_string`, `auth_type_to_string`,
`description_type_to_string`, `operator_id_type_to_string`,
`height_type_to_string` or `transport_to_string`. They return the standard's
constant name, such as `"RID_UA_TYPE_HELICOPTER_OR_MULTIROTOR"`, or
`"UNKNOWN"` for a value the standard does not define.

## Transports

`Transport` lists the four broadcast methods (Bluetooth legacy, Bluetooth long
range, Wi-Fi NAN and Wi-Fi beacon), and `max_payload(transport)` gives the
largest payload each one carries; an unknown transport raises `RidError`.
The module also holds the OUI, application code, NAN cluster ID and channel
constants.

## What it does not do

- There are no classes for the System and Message Pack message types;
  `decode` raises `RidError` with `ErrorCode.UNKNOWN_MESSAGE_TYPE` for them.
- Authentication pages are handled one page at a time. Nothing splits a
  signature across pages or joins the pages of a received signature back
  together.
- It does not send or receive radio frames, and has no command-line tool; it
  only works on message bytes that you supply.