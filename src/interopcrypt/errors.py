"""Exception hierarchy shared by every interopcrypt component."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class InteropCryptError(Exception):
    """Base exception for all interopcrypt errors."""


class DecryptionError(InteropCryptError):
    """AES or RSA decryption failed, usually a wrong key or corrupted ciphertext."""


class KeyImportError(InteropCryptError):
    """Key bytes could not be interpreted in any of the accepted encodings."""


class EncodingError(InteropCryptError, ValueError):
    """Malformed Base64, Hex or UTF-8 input to a codec."""
