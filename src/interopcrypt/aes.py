"""AES-128-CBC with a fixed initialization vector.

The companion systems all encrypt with the same constant IV, so identical plaintexts under identical keys yield
byte-identical ciphertexts on every side. Keys of any length are normalized to 16 bytes first.

WARNING: A constant IV leaks equality of message prefixes across encryptions under the same key. This module exists
solely for interoperability and must not be used where confidentiality matters. A secure variant draws a random IV
per message and transmits it alongside the ciphertext.

Typical usage example:

    key = hashing.md5_text("123456")
    c = encrypt_text_base64("10005154", key)
    r = decrypt_text_from_base64(c, key)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import algorithms
from cryptography.hazmat.primitives.ciphers import Cipher
from cryptography.hazmat.primitives.ciphers import modes

from interopcrypt import codec
from interopcrypt.errors import DecryptionError

KEY_SIZE = 16
BLOCK_BITS = 128

# Interop only. Never reuse in a security-sensitive context.
AES_IV = bytes(range(1, 17))


def normalize_key(key: bytes) -> bytes:
    """Brings a key of any length to exactly KEY_SIZE bytes.

    Args:
        key: The raw key.

    Returns:
        The key unchanged if it already has 16 bytes, truncated to its first 16 bytes if longer, or right-padded
        with zero bytes if shorter.
    """
    if len(key) == KEY_SIZE:
        return key
    if len(key) > KEY_SIZE:
        return key[:KEY_SIZE]
    return key + b"\x00" * (KEY_SIZE - len(key))


def _cipher(key: bytes) -> Cipher:
    return Cipher(algorithms.AES(normalize_key(key)), modes.CBC(AES_IV))


def encrypt(plaintext: bytes, key: bytes) -> bytes:
    """Encrypts the plaintext with PKCS#7 padding under the normalized key and the fixed IV.

    Args:
        plaintext: Data to encrypt, may be empty.
        key: Key of any length.

    Returns:
        The ciphertext, a non-empty multiple of 16 bytes.
    """
    padder = padding.PKCS7(BLOCK_BITS).padder()
    padded = padder.update(plaintext) + padder.finalize()
    encryptor = _cipher(key).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def decrypt(ciphertext: bytes, key: bytes) -> bytes:
    """Decrypts data produced by encrypt.

    Args:
        ciphertext: The ciphertext.
        key: Key of any length, normalized the same way as for encryption.

    Returns:
        The plaintext.

    Raises:
        DecryptionError: If the ciphertext is empty, not block aligned, or its padding is invalid after decryption.
    """
    if not ciphertext or len(ciphertext) % (BLOCK_BITS // 8):
        raise DecryptionError(f"Ciphertext length must be a non-zero multiple of 16 (got {len(ciphertext)})")
    decryptor = _cipher(key).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()
    unpadder = padding.PKCS7(BLOCK_BITS).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise DecryptionError("Decryption failed, the key or ciphertext is likely incorrect.") from exc


def encrypt_base64(plaintext: bytes, key: bytes) -> str:
    return codec.b64_encode(encrypt(plaintext, key))


def decrypt_from_base64(ciphertext: str, key: bytes) -> bytes:
    """Decodes Base64 ciphertext and decrypts it.

    Raises:
        EncodingError: If the ciphertext is not valid Base64.
        DecryptionError: If decryption fails.
    """
    return decrypt(codec.b64_decode(ciphertext), key)


def encrypt_text(plaintext: str, key: bytes) -> bytes:
    return encrypt(codec.utf8_encode(plaintext), key)


def encrypt_text_base64(plaintext: str, key: bytes) -> str:
    return encrypt_base64(codec.utf8_encode(plaintext), key)


def decrypt_text_from_base64(ciphertext: str, key: bytes) -> str:
    """Decrypts Base64 ciphertext and decodes the plaintext as UTF-8."""
    return codec.utf8_decode(decrypt_from_base64(ciphertext, key))
