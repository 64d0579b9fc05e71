import pytest

from errors import OversizedMessageError
from padding import (
    message_bit_length,
    pad_message,
    padded_length,
    split_into_blocks,
)


# (message length, expected padded length). Lengths above 55 mod 64 need an
# extra block for the 0x80 terminator and the 8-byte length field.
PADDED_LENGTHS = [
    (0, 64),
    (1, 64),
    (31, 64),
    (55, 64),
    (56, 128),
    (63, 128),
    (64, 128),
    (119, 128),
    (120, 192),
]


@pytest.mark.parametrize("length,expected", PADDED_LENGTHS)
def test_padded_length(length, expected):
    assert padded_length(length) == expected
    assert len(pad_message(b"\xff" * length)) == expected


@pytest.mark.parametrize("length", [length for length, _ in PADDED_LENGTHS])
def test_pad_message_layout(length):
    message = bytes(i & 0xFF for i in range(length))
    padded = pad_message(message)

    assert padded[:length] == message
    assert padded[length] == 0x80
    assert set(padded[length + 1 : -8]) <= {0}
    assert int.from_bytes(padded[-8:], byteorder="big") == length * 8


def test_pad_message_accepts_bytearray_and_memoryview():
    expected = pad_message(b"abc")
    assert pad_message(bytearray(b"abc")) == expected
    assert pad_message(memoryview(b"abc")) == expected


def test_pad_message_does_not_mutate_input():
    message = bytearray(b"hello")
    pad_message(message)
    assert message == bytearray(b"hello")


@pytest.mark.parametrize("message", ["abc", 3, 2**40, None])
def test_pad_message_rejects_non_bytes(message):
    with pytest.raises(TypeError):
        pad_message(message)


def test_message_bit_length_limit():
    assert message_bit_length(2**61 - 1) == 2**64 - 8
    with pytest.raises(OversizedMessageError):
        message_bit_length(2**61)


def test_padded_length_rejects_negative():
    with pytest.raises(ValueError):
        padded_length(-1)


def test_split_into_blocks():
    padded = pad_message(b"a" * 100)
    blocks = list(split_into_blocks(padded))

    assert len(blocks) == 2
    assert all(len(block) == 64 for block in blocks)
    assert b"".join(blocks) == padded


def test_split_into_blocks_rejects_unpadded_buffer():
    with pytest.raises(ValueError):
        list(split_into_blocks(b"x" * 65))
