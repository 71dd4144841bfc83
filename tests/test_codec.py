# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import secrets

import pytest

from interopcrypt import codec
from interopcrypt.errors import EncodingError

byte_cases = [
    b"",
    b"Hello",
    bytes(range(256)),
    secrets.token_bytes(1000),
]


@pytest.mark.parametrize("data", byte_cases)
def test_base64_reverses(data):
    assert codec.b64_decode(codec.b64_encode(data)) == data


@pytest.mark.parametrize("data", byte_cases)
def test_hex_reverses(data):
    assert codec.hex_decode(codec.hex_encode(data)) == data


@pytest.mark.parametrize("data", byte_cases)
def test_raw_reverses(data):
    text = codec.raw_encode(data)
    assert len(text) == len(data)
    assert codec.raw_decode(text) == data


def test_empty_encodes_empty():
    assert codec.b64_encode(b"") == ""
    assert codec.hex_encode(b"") == ""
    assert codec.raw_encode(b"") == ""
    assert codec.utf8_encode("") == b""


def test_known_encodings():
    assert codec.b64_encode_text("Hello, World!") == "SGVsbG8sIFdvcmxkIQ=="
    assert codec.hex_encode(b"Hello") == "48656c6c6f"
    assert codec.raw_encode(b"\x00\x7f\xff") == "\x00\x7f\xff"


def test_hex_accepts_both_cases():
    expected = bytes([10, 11, 12, 13, 14, 15])
    assert codec.hex_decode("0A0B0C0D0E0F") == expected
    assert codec.hex_decode("0a0b0c0d0e0f") == expected
    assert codec.hex_decode("0a0B0c0D0e0F") == expected


def test_raw_decode_masks_code_points():
    assert codec.raw_decode("Ł") == b"\x41"


@pytest.mark.parametrize("text", ["你好，世界", "こんにちは世界", "😀🎉", "!@#$%^&*()_+{}|:<>?~`-=[]\\;',./", ""])
def test_text_base64_reverses(text):
    assert codec.b64_decode_text(codec.b64_encode_text(text)) == text
    assert codec.utf8_decode(codec.utf8_encode(text)) == text


@pytest.mark.parametrize("text", ["SGVsbG8", "SGVs*G8=", "ü===", "SGVsbG8=\n!"])
def test_base64_rejects_malformed(text):
    with pytest.raises(EncodingError):
        codec.b64_decode(text)


@pytest.mark.parametrize("text", ["abc", "zz", "0x12", "12 34", "ab cd ef", "\u00fc0"])
def test_hex_rejects_malformed(text):
    with pytest.raises(EncodingError):
        codec.hex_decode(text)


def test_utf8_rejects_malformed():
    with pytest.raises(EncodingError):
        codec.utf8_decode(b"\xff\xfe\xfd")


def test_encoding_error_is_value_error():
    with pytest.raises(ValueError):
        codec.hex_decode("q")
