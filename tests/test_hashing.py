# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import re

import pytest

from interopcrypt import codec
from interopcrypt import hashing

md5_cases = [
    ("", "d41d8cd98f00b204e9800998ecf8427e"),
    ("Hello", "8b1a9953c4611296a827abf8c47804d7"),
    ("abc", "900150983cd24fb0d6963f7d28e17f72"),
    ("123456", "e10adc3949ba59abbe56e057f20f883e"),
    ("The quick brown fox jumps over the lazy dog", "9e107d9d372bb6826bd81d3542a419d6"),
]


@pytest.mark.parametrize("text,expected", md5_cases)
def test_md5_text_hex(text, expected):
    assert hashing.md5_text_hex(text) == expected
    assert hashing.md5_hex(text.encode("utf-8")) == expected


@pytest.mark.parametrize("text,expected", md5_cases)
def test_md5_digest(text, expected):
    digest = hashing.md5_text(text)
    assert len(digest) == 16
    assert digest == codec.hex_decode(expected)
    assert hashing.md5(text.encode("utf-8")) == digest


def test_md5_hex_format():
    assert re.fullmatch(r"[0-9a-f]{32}", hashing.md5_hex(bytes(range(256))))


def test_md5_of_ciphertext():
    assert hashing.md5_hex(codec.b64_decode("v8dUhK9k1+uBnFJjlNtcGg==")) == "7b0ec6dfb48e8c79e53e5a3f55df62cb"
