"""MD5 digests over bytes or UTF-8 text."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import hashlib

from interopcrypt import codec


def md5(data: bytes) -> bytes:
    """Computes the 16 byte MD5 digest of the data."""
    return hashlib.md5(data).digest()


def md5_hex(data: bytes) -> str:
    """Computes the MD5 digest of the data as 32 lowercase hex characters."""
    return codec.hex_encode(md5(data))


def md5_text(text: str) -> bytes:
    return md5(codec.utf8_encode(text))


def md5_text_hex(text: str) -> str:
    return md5_hex(codec.utf8_encode(text))
