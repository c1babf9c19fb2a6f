import json

import pytest

from remoteid.auth_page import AuthPage0, AuthPageX, AuthType
from remoteid.basic_id import BasicId, IdType, UaType
from remoteid.codec import decode, to_json, validate
from remoteid.location import Location
from remoteid.message import ErrorCode, RidError
from remoteid.operator_id import OperatorId
from remoteid.self_id import SelfId


@pytest.mark.parametrize(
    "message",
    [
        BasicId("1ABCD2345EF678XYZ", IdType.SERIAL_NUMBER, UaType.HELICOPTER_OR_MULTIROTOR),
        Location(latitude=60.1699, longitude=24.9384, speed=10.0),
        SelfId("Test flight"),
        OperatorId("OPERATOR0001"),
        AuthPage0(auth_data=b"\x01\x02", auth_type=AuthType.UAS_ID_SIGNATURE, length=2),
        AuthPageX(4, auth_data=b"\x03\x04"),
    ],
)
def test_decode_round_trip(message):
    decoded = decode(message.to_bytes())
    assert type(decoded) is type(message)
    assert decoded == message


def test_decode_unsupported_types():
    for header in (0x42, 0xF2, 0x62):
        with pytest.raises(RidError) as excinfo:
            decode(bytes([header]) + bytes(24))
        assert excinfo.value.code == ErrorCode.UNKNOWN_MESSAGE_TYPE


def test_decode_empty_and_none():
    with pytest.raises(RidError) as excinfo:
        decode(b"")
    assert excinfo.value.code == ErrorCode.BUFFER_TOO_SMALL
    with pytest.raises(RidError) as excinfo:
        decode(None)
    assert excinfo.value.code == ErrorCode.NULL_POINTER


def test_to_json_basic_id():
    message = BasicId("BRAWNDO001")
    text = to_json(message)
    assert '"message_type": 0' in text
    assert "BRAWNDO001" in text


def test_to_json_auth_page():
    page = AuthPage0(auth_type=AuthType.UAS_ID_SIGNATURE, timestamp=12345)
    text = to_json(page)
    assert '"message_type": 2' in text
    assert '"page_number": 0' in text
    assert '"timestamp":' in text


def test_to_json_from_bytes_matches_object():
    message = OperatorId("OPERATOR0001")
    assert to_json(message.to_bytes()) == message.to_json()
    assert json.loads(to_json(message))["operator_id"] == "OPERATOR0001"


def test_to_json_null_and_foreign():
    with pytest.raises(RidError) as excinfo:
        to_json(None)
    assert excinfo.value.code == ErrorCode.NULL_POINTER
    with pytest.raises(RidError) as excinfo:
        to_json(object())
    assert excinfo.value.code == ErrorCode.UNKNOWN_MESSAGE_TYPE


def test_validate_valid_messages():
    for message in (BasicId(), Location(), SelfId(), OperatorId(), AuthPage0(), AuthPageX(1)):
        validate(message)
        validate(message.to_bytes())
        assert decode(message.to_bytes()) == message


def test_validate_invalid_protocol_version():
    message = BasicId()
    message.protocol_version = 5
    with pytest.raises(RidError) as excinfo:
        validate(message)
    assert excinfo.value.code == ErrorCode.INVALID_PROTOCOL_VERSION

    page = AuthPage0()
    page.protocol_version = 5
    with pytest.raises(RidError) as excinfo:
        validate(page.to_bytes())
    assert excinfo.value.code == ErrorCode.INVALID_PROTOCOL_VERSION


def test_validate_delegates_to_message():
    message = BasicId("abc123", IdType.SERIAL_NUMBER)
    with pytest.raises(RidError) as excinfo:
        validate(message)
    assert excinfo.value.code == ErrorCode.INVALID_CHARACTER


def test_validate_null():
    with pytest.raises(RidError) as excinfo:
        validate(None)
    assert excinfo.value.code == ErrorCode.NULL_POINTER