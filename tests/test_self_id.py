import json

import pytest

from remoteid.message import MESSAGE_SIZE, ErrorCode, MessageType, ProtocolVersion, RidError
from remoteid.self_id import DescriptionType, SelfId, description_type_to_string


def test_self_id_defaults():
    message = SelfId()
    assert message.protocol_version == ProtocolVersion.VERSION_2
    assert message.message_type == MessageType.SELF_ID
    assert message.description_type == DescriptionType.TEXT
    assert message.description == ""


def test_to_bytes_layout():
    data = SelfId().to_bytes()
    assert len(data) == MESSAGE_SIZE
    assert data[0] == 0x32
    assert data[1:] == bytes(24)


@pytest.mark.parametrize("description_type", list(DescriptionType))
def test_set_and_get_description_type(description_type):
    message = SelfId()
    message.description_type = description_type
    assert message.description_type == description_type
    assert message.to_bytes()[1] == description_type


def test_private_description_type_kept_as_int():
    message = SelfId(description_type=201)
    assert message.description_type == 201
    assert SelfId.from_bytes(message.to_bytes()).description_type == 201


def test_description_type_out_of_range():
    with pytest.raises(RidError) as exc:
        SelfId(description_type=256)
    assert exc.value.code == ErrorCode.OUT_OF_RANGE


@pytest.mark.parametrize("value", ["", "X", "Survey flight", "A" * 23])
def test_set_and_get_description(value):
    message = SelfId(value)
    assert message.description == value
    assert SelfId.from_bytes(message.to_bytes()).description == value


def test_description_too_long():
    with pytest.raises(RidError) as exc:
        SelfId("A" * 24)
    assert exc.value.code == ErrorCode.BUFFER_TOO_LARGE


def test_description_must_be_ascii():
    with pytest.raises(RidError) as exc:
        SelfId("caf\u00e9")
    assert exc.value.code == ErrorCode.INVALID_CHARACTER


def test_round_trip_equality():
    message = SelfId("Emergency landing", DescriptionType.EMERGENCY)
    decoded = SelfId.from_bytes(message.to_bytes())
    assert decoded == message
    assert decoded.description_type == DescriptionType.EMERGENCY


def test_from_bytes_too_short():
    with pytest.raises(RidError) as exc:
        SelfId.from_bytes(SelfId().to_bytes()[:24])
    assert exc.value.code == ErrorCode.BUFFER_TOO_SMALL


def test_from_bytes_wrong_type():
    data = bytes([0x52]) + bytes(24)
    with pytest.raises(RidError) as exc:
        SelfId.from_bytes(data)
    assert exc.value.code == ErrorCode.UNKNOWN_MESSAGE_TYPE


def test_validate_valid_message():
    assert SelfId("Hello").validate() is None


def test_validate_invalid_protocol_version():
    message = SelfId()
    message.protocol_version = 5
    with pytest.raises(RidError) as exc:
        message.validate()
    assert exc.value.code == ErrorCode.INVALID_PROTOCOL_VERSION


def test_validate_invalid_message_type():
    message = SelfId()
    message.message_type = MessageType.LOCATION
    with pytest.raises(RidError) as exc:
        message.validate()
    assert exc.value.code == ErrorCode.UNKNOWN_MESSAGE_TYPE


def test_validate_non_ascii_description():
    raw = bytearray(SelfId().to_bytes())
    raw[2 + 5] = 0xFF
    with pytest.raises(RidError) as exc:
        SelfId.from_bytes(raw).validate()
    assert exc.value.code == ErrorCode.INVALID_CHARACTER


def test_description_type_to_string():
    assert description_type_to_string(DescriptionType.TEXT) == "RID_DESCRIPTION_TYPE_TEXT"
    assert description_type_to_string(DescriptionType.EMERGENCY) == "RID_DESCRIPTION_TYPE_EMERGENCY"
    assert description_type_to_string(99) == "UNKNOWN"


def test_to_json_matches_dict():
    message = SelfId("Survey flight")
    text = message.to_json()
    assert '"description":' in text
    assert json.loads(text) == message.to_dict()
    assert message.to_dict()["description"] == "Survey flight"