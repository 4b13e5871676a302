"""Unit tests for the message object codec."""

import pytest

from steam_machine_id.domain.entities import MachineID
from steam_machine_id.domain.exceptions import InvalidInput, MalformedMessage
from steam_machine_id.infrastructure.encoding.message_object import (
    MESSAGE_SIZE,
    MessageObjectReader,
    MessageObjectWriter,
    c_string,
    decode_machine_id,
    encode_machine_id,
)


@pytest.fixture
def message() -> bytes:
    return encode_machine_id(MachineID.from_account_name("accountname"))


def test_message_size_constant() -> None:
    assert MESSAGE_SIZE == 155


def test_c_string_appends_null() -> None:
    """Text and bytes both gain a single trailing null."""
    assert c_string("BB3") == b"BB3\x00"
    assert c_string(b"") == b"\x00"


def test_c_string_rejects_embedded_null() -> None:
    """Embedded null would corrupt the layout."""
    with pytest.raises(InvalidInput):
        c_string("BB\x003")


def test_encoded_layout(message: bytes, account_vectors: dict[str, str]) -> None:
    """Markers, names and values sit at fixed offsets."""
    assert len(message) == 155
    assert message[0] == 0x00
    assert message[1:15] == b"MessageObject\x00"

    assert message[15] == 0x01
    assert message[16:20] == b"BB3\x00"
    assert message[20:60] == account_vectors["BB3"].encode()
    assert message[60] == 0x00

    assert message[61] == 0x01
    assert message[62:66] == b"FF2\x00"
    assert message[66:106] == account_vectors["FF2"].encode()
    assert message[106] == 0x00

    assert message[107] == 0x01
    assert message[108:112] == b"3B3\x00"
    assert message[112:152] == account_vectors["3B3"].encode()
    assert message[152] == 0x00

    assert message[153:] == b"\x08\x08"


def test_writer_generic_fields() -> None:
    """Writer lays out arbitrary string fields."""
    data = MessageObjectWriter("Obj").write_string("k", "v").finish()
    assert data == b"\x00Obj\x00\x01k\x00v\x00\x08\x08"


def test_writer_finish_is_idempotent() -> None:
    """finish returns the same bytes and closes the writer."""
    writer = MessageObjectWriter("Obj")
    assert writer.finish() == writer.finish() == b"\x00Obj\x00\x08\x08"
    with pytest.raises(RuntimeError):
        writer.write_string("k", "v")


def test_reader_parses_writer_output() -> None:
    """Reader returns the type name and fields in order."""
    data = (
        MessageObjectWriter("Obj")
        .write_string("a", b"1")
        .write_string("b", "two")
        .finish()
    )
    assert MessageObjectReader(data).read() == ("Obj", [("a", b"1"), ("b", b"two")])


def test_decode_restores_machine_id(message: bytes) -> None:
    """decode_machine_id inverts encode_machine_id."""
    assert decode_machine_id(message) == MachineID.from_account_name("accountname")


def test_decode_rejects_wrong_length(message: bytes) -> None:
    with pytest.raises(MalformedMessage, match="155 bytes"):
        decode_machine_id(message[:-1])
    with pytest.raises(MalformedMessage, match="155 bytes"):
        decode_machine_id(message + b"\x08")


@pytest.mark.parametrize(
    ("offset", "byte", "match"),
    [
        (0, 0x05, "object start"),
        (1, ord("m"), "object type"),
        (15, 0x02, "field type"),
        (16, ord("X"), "Expected fields"),
        (20, ord("g"), "Invalid BB3"),
        (154, 0x00, "outer object end"),
    ],
)
def test_decode_rejects_corruption(message: bytes, offset: int, byte: int, match: str) -> None:
    """Any corrupted marker, name or value raises MalformedMessage."""
    corrupted = bytearray(message)
    corrupted[offset] = byte
    with pytest.raises(MalformedMessage, match=match):
        decode_machine_id(bytes(corrupted))


def test_decode_rejects_missing_terminator(message: bytes) -> None:
    """A value without its terminator swallows the next field."""
    corrupted = bytearray(message)
    corrupted[152] = ord("A")
    with pytest.raises(MalformedMessage):
        decode_machine_id(bytes(corrupted))
