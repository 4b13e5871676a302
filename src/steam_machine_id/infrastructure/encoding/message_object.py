"""Binary message object codec for machine IDs.

Layout of an encoded machine ID (155 bytes)::

    offset  len  content
    0       1    0x00                 object start
    1       14   "MessageObject\\0"   type name
    15      1    0x01                 string field tag
    16      4    "BB3\\0"             field name
    20      41   <40 hex chars>\\0    field value
    61      46   FF2 field            (same shape)
    107     46   3B3 field            (same shape)
    153     1    0x08                 object end
    154     1    0x08                 outer object end
"""

import logging

from steam_machine_id.domain.entities import MachineID
from steam_machine_id.domain.exceptions import InvalidInput, MalformedMessage
from steam_machine_id.domain.value_objects import FieldLabel, HashValue
from steam_machine_id.domain.value_objects.hash_value import HEX_SIZE

logger = logging.getLogger(__name__)

OBJECT_START = 0x00
TYPE_STRING = 0x01
OBJECT_END = 0x08

MESSAGE_OBJECT_TYPE = "MessageObject"
NULL = b"\x00"

# start + type name + 3 * (tag + name + value) + end + outer end
MESSAGE_SIZE = (
    1
    + len(MESSAGE_OBJECT_TYPE) + 1
    + len(FieldLabel) * (1 + 3 + 1 + HEX_SIZE + 1)
    + 1
    + 1
)


def c_string(value: str | bytes) -> bytes:
    """Null-terminated bytes; text is UTF-8 encoded."""
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    if NULL in data:
        raise InvalidInput(f"Embedded null byte in {value!r}")
    return data + NULL


class MessageObjectWriter:
    """Builds a message object holding string fields."""

    def __init__(self, type_name: str) -> None:
        self._buffer = bytearray([OBJECT_START])
        self._buffer += c_string(type_name)
        self._finished = False

    def write_string(self, name: str, value: str | bytes) -> "MessageObjectWriter":
        if self._finished:
            raise RuntimeError("Message object already finished")
        self._buffer.append(TYPE_STRING)
        self._buffer += c_string(name)
        self._buffer += c_string(value)
        return self

    def finish(self) -> bytes:
        if not self._finished:
            self._buffer += bytes([OBJECT_END, OBJECT_END])
            self._finished = True
        return bytes(self._buffer)


class MessageObjectReader:
    """Parses a message object written by MessageObjectWriter."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def _read_byte(self) -> int:
        if self._pos >= len(self._data):
            raise MalformedMessage("Unexpected end of message")
        byte = self._data[self._pos]
        self._pos += 1
        return byte

    def _read_c_string(self) -> bytes:
        end = self._data.find(NULL, self._pos)
        if end < 0:
            raise MalformedMessage("Unterminated string")
        value = self._data[self._pos : end]
        self._pos = end + 1
        return value

    def read(self) -> tuple[str, list[tuple[str, bytes]]]:
        """Return the type name and the (name, value) string fields in order."""
        if self._read_byte() != OBJECT_START:
            raise MalformedMessage("Missing object start marker")
        type_name = self._decode(self._read_c_string())
        fields: list[tuple[str, bytes]] = []
        while True:
            tag = self._read_byte()
            if tag == OBJECT_END:
                break
            if tag != TYPE_STRING:
                raise MalformedMessage(f"Unsupported field type 0x{tag:02x}")
            name = self._decode(self._read_c_string())
            fields.append((name, self._read_c_string()))
        if self._read_byte() != OBJECT_END:
            raise MalformedMessage("Missing outer object end marker")
        if self._pos != len(self._data):
            raise MalformedMessage("Trailing bytes after message object")
        return type_name, fields

    @staticmethod
    def _decode(raw: bytes) -> str:
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedMessage("Name is not valid UTF-8") from exc


def encode_machine_id(machine_id: MachineID) -> bytes:
    """Encode a machine ID as a 155-byte message object."""
    writer = MessageObjectWriter(MESSAGE_OBJECT_TYPE)
    for label, value in machine_id.values().items():
        writer.write_string(label, value.value)
    data = writer.finish()
    logger.debug("Encoded machine ID message (%d bytes)", len(data))
    return data


def decode_machine_id(data: bytes) -> MachineID:
    """Decode a message object produced by encode_machine_id."""
    if len(data) != MESSAGE_SIZE:
        raise MalformedMessage(
            f"Machine ID message must be {MESSAGE_SIZE} bytes, got {len(data)}"
        )
    type_name, fields = MessageObjectReader(data).read()
    if type_name != MESSAGE_OBJECT_TYPE:
        raise MalformedMessage(f"Unexpected object type: {type_name!r}")

    names = [name for name, _ in fields]
    expected = [str(label) for label in FieldLabel]
    if names != expected:
        raise MalformedMessage(f"Expected fields {expected}, got {names}")

    values: dict[str, HashValue] = {}
    for name, raw in fields:
        try:
            values[name] = HashValue(raw)
        except ValueError as exc:
            raise MalformedMessage(f"Invalid {name} value: {exc}") from exc

    logger.debug("Decoded machine ID message")
    return MachineID(
        value_bb3=values[FieldLabel.BB3],
        value_ff2=values[FieldLabel.FF2],
        value_3b3=values[FieldLabel.B3B3],
    )
