import pytest

from remoteid.message import (
    MESSAGE_SIZE,
    ErrorCode,
    MessageType,
    ProtocolVersion,
    RidError,
    check_header,
    error_to_string,
    get_message_type,
    get_protocol_version,
    message_type_to_string,
    protocol_version_to_string,
)


@pytest.mark.parametrize("message_type", list(MessageType))
def test_get_message_type(message_type):
    data = bytes([message_type << 4]) + bytes(MESSAGE_SIZE - 1)
    assert get_message_type(data) == message_type
    assert isinstance(get_message_type(data), MessageType)


@pytest.mark.parametrize("version", list(ProtocolVersion))
def test_get_protocol_version(version):
    data = bytes([version]) + bytes(MESSAGE_SIZE - 1)
    assert get_protocol_version(data) == version


def test_decode_captured_header():
    assert get_protocol_version(b"\x02\x10") == ProtocolVersion.VERSION_2
    assert get_message_type(b"\x02\x10") == MessageType.BASIC_ID
    assert get_message_type(b"\xf2") == MessageType.MESSAGE_PACK


def test_unknown_values_come_back_as_int():
    assert get_message_type(b"\x62") == 6
    assert get_protocol_version(b"\x05") == 5


def test_empty_data_raises():
    with pytest.raises(RidError) as exc:
        get_message_type(b"")
    assert exc.value.code == ErrorCode.BUFFER_TOO_SMALL
    with pytest.raises(RidError) as exc:
        get_protocol_version(b"")
    assert exc.value.code == ErrorCode.BUFFER_TOO_SMALL


def test_message_type_to_string():
    assert message_type_to_string(MessageType.BASIC_ID) == "RID_MESSAGE_TYPE_BASIC_ID"
    assert message_type_to_string(MessageType.LOCATION) == "RID_MESSAGE_TYPE_LOCATION"
    assert message_type_to_string(MessageType.AUTH) == "RID_MESSAGE_TYPE_AUTH"
    assert message_type_to_string(MessageType.SELF_ID) == "RID_MESSAGE_TYPE_SELF_ID"
    assert message_type_to_string(MessageType.SYSTEM) == "RID_MESSAGE_TYPE_SYSTEM"
    assert message_type_to_string(MessageType.OPERATOR_ID) == "RID_MESSAGE_TYPE_OPERATOR_ID"
    assert message_type_to_string(MessageType.MESSAGE_PACK) == "RID_MESSAGE_TYPE_MESSAGE_PACK"
    assert message_type_to_string(99) == "UNKNOWN"


def test_protocol_version_to_string():
    assert protocol_version_to_string(ProtocolVersion.VERSION_0) == "RID_PROTOCOL_VERSION_0"
    assert protocol_version_to_string(ProtocolVersion.VERSION_1) == "RID_PROTOCOL_VERSION_1"
    assert protocol_version_to_string(ProtocolVersion.VERSION_2) == "RID_PROTOCOL_VERSION_2"
    assert protocol_version_to_string(ProtocolVersion.PRIVATE_USE) == "RID_PROTOCOL_PRIVATE_USE"
    assert protocol_version_to_string(99) == "UNKNOWN"


def test_error_to_string():
    assert error_to_string(ErrorCode.SUCCESS) == "RID_SUCCESS"
    assert error_to_string(ErrorCode.NULL_POINTER) == "RID_ERROR_NULL_POINTER"
    assert error_to_string(ErrorCode.BUFFER_TOO_SMALL) == "RID_ERROR_BUFFER_TOO_SMALL"
    assert error_to_string(ErrorCode.BUFFER_TOO_LARGE) == "RID_ERROR_BUFFER_TOO_LARGE"
    assert error_to_string(ErrorCode.INVALID_CHARACTER) == "RID_ERROR_INVALID_CHARACTER"
    assert error_to_string(ErrorCode.OUT_OF_RANGE) == "RID_ERROR_OUT_OF_RANGE"
    assert error_to_string(ErrorCode.INVALID_UUID_VERSION) == "RID_ERROR_INVALID_UUID_VERSION"
    assert error_to_string(ErrorCode.INVALID_UUID_VARIANT) == "RID_ERROR_INVALID_UUID_VARIANT"
    assert error_to_string(ErrorCode.INVALID_UUID_PADDING) == "RID_ERROR_INVALID_UUID_PADDING"
    assert error_to_string(99) == "UNKNOWN"


def test_rid_error_carries_code_and_default_message():
    error = RidError(ErrorCode.OUT_OF_RANGE)
    assert error.code is ErrorCode.OUT_OF_RANGE
    assert str(error) == "RID_ERROR_OUT_OF_RANGE"
    assert str(RidError(-5, "too big")) == "too big"


@pytest.mark.parametrize("version", list(ProtocolVersion))
def test_check_header_accepts_valid_versions(version):
    assert check_header(version, MessageType.SYSTEM, MessageType.SYSTEM) is None


def test_check_header_rejects_invalid_version():
    with pytest.raises(RidError) as exc:
        check_header(5, MessageType.SYSTEM, MessageType.SYSTEM)
    assert exc.value.code == ErrorCode.INVALID_PROTOCOL_VERSION


def test_check_header_rejects_wrong_type():
    with pytest.raises(RidError) as exc:
        check_header(ProtocolVersion.VERSION_2, MessageType.LOCATION, MessageType.BASIC_ID)
    assert exc.value.code == ErrorCode.UNKNOWN_MESSAGE_TYPE