import pytest

from errors import MalformedHexInputError, Sha256Error
from hexcodec import bytes_to_hex, hex_to_bytes, hex_to_digest
from sha256 import compute_digest


def test_bytes_to_hex_is_lowercase_pairs():
    assert bytes_to_hex(b"\x00\x0f\xab\xff") == "000fabff"
    assert bytes_to_hex(b"") == ""


def test_hex_to_bytes():
    assert hex_to_bytes("000fabff") == b"\x00\x0f\xab\xff"
    assert hex_to_bytes("ABcd") == b"\xab\xcd"
    assert hex_to_bytes("") == b""


@pytest.mark.parametrize("message", [b"", b"abc", b"\x00" * 100])
def test_digest_round_trip(message):
    digest = compute_digest(message)
    assert hex_to_bytes(bytes_to_hex(digest)) == digest
    assert hex_to_digest(bytes_to_hex(digest)) == digest


@pytest.mark.parametrize("text", ["zz", "0g", "a ", " a", "+1", "0x", "ab\n0"])
def test_rejects_non_hex_characters(text):
    with pytest.raises(MalformedHexInputError):
        hex_to_bytes(text)


@pytest.mark.parametrize("text", ["abc", "a", "0" * 63])
def test_rejects_odd_length(text):
    with pytest.raises(MalformedHexInputError):
        hex_to_bytes(text)


def test_malformed_hex_is_a_value_error():
    with pytest.raises(ValueError):
        hex_to_bytes("zz")
    assert issubclass(MalformedHexInputError, Sha256Error)


def test_hex_to_digest_requires_64_characters():
    with pytest.raises(MalformedHexInputError):
        hex_to_digest("ab" * 31)
    with pytest.raises(MalformedHexInputError):
        hex_to_digest("ab" * 33)
