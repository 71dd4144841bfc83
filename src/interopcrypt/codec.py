"""Byte/text conversions used at every boundary of the library.

Covers Base64 (standard alphabet, padded), lowercase Hex, UTF-8 and the "raw" byte-string form, where every byte
maps to the character with the same code point. Malformed input is reported as an EncodingError.

Typical usage example:

    text = b64_encode(b"\x00\x01")
    data = b64_decode(text)
    hex_decode("DEADbeef")
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64
import binascii

from interopcrypt.errors import EncodingError


def b64_encode(data: bytes) -> str:
    """Encodes bytes as a padded, standard-alphabet Base64 string."""
    return base64.b64encode(data).decode("ascii")


def b64_decode(text: str) -> bytes:
    """Decodes a standard-alphabet Base64 string.

    Args:
        text: The Base64 text. Padding is required, characters outside the alphabet are rejected.

    Returns:
        The decoded bytes.

    Raises:
        EncodingError: If the text is not valid Base64.
    """
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (UnicodeEncodeError, binascii.Error) as exc:
        raise EncodingError(f"Invalid Base64 input: {exc}") from exc


def hex_encode(data: bytes) -> str:
    """Encodes bytes as a lowercase hex string without separators."""
    return data.hex()


def hex_decode(text: str) -> bytes:
    """Decodes a hex string, accepting both upper and lower case digits.

    Args:
        text: The hex text, two digits per byte.

    Returns:
        The decoded bytes.

    Raises:
        EncodingError: If the text has odd length or contains anything but hex digits.
    """
    if len(text) % 2:
        raise EncodingError(f"Hex input must have even length (got {len(text)})")
    try:
        return binascii.unhexlify(text.encode("ascii"))
    except (UnicodeEncodeError, binascii.Error) as exc:
        raise EncodingError(f"Invalid hex input: {exc}") from exc


def utf8_encode(text: str) -> bytes:
    return text.encode("utf-8")


def utf8_decode(data: bytes) -> str:
    """Decodes UTF-8 bytes, raising EncodingError on invalid sequences."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(f"Invalid UTF-8 input: {exc}") from exc


def raw_encode(data: bytes) -> str:
    """Maps each byte to the character of the same code point."""
    return data.decode("latin-1")


def raw_decode(text: str) -> bytes:
    """Maps each character back to a byte, keeping only the low eight bits of its code point."""
    return bytes(ord(ch) & 0xFF for ch in text)


def b64_encode_text(text: str) -> str:
    """UTF-8 encodes the text, then Base64 encodes the result."""
    return b64_encode(utf8_encode(text))


def b64_decode_text(text: str) -> str:
    """Reverses b64_encode_text."""
    return utf8_decode(b64_decode(text))
