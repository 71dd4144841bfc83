"""Cross-platform cryptographic utilities with byte-exact interoperability.

Provides AES-128-CBC with a fixed IV, RSA PKCS#1 v1.5 encryption and signing with private keys accepted in PKCS#1
or PKCS#8, MD5 hashing, Base64/Hex/UTF-8 codecs, and conversion between the PKCS#1 and PKCS#8 private key encodings.

Typical usage example:

    pair = generate_key_pair(2048)
    c = rsa.encrypt_base64(b"Hi there!", pair.public_key)
    r = rsa.decrypt_from_base64(c, pair.private_key)
    t = aes.encrypt_text_base64("Hi there!", hashing.md5_text("123456"))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from interopcrypt import aes
from interopcrypt import codec
from interopcrypt import hashing
from interopcrypt import keyformat
from interopcrypt import rsa
from interopcrypt.errors import DecryptionError
from interopcrypt.errors import EncodingError
from interopcrypt.errors import InteropCryptError
from interopcrypt.errors import KeyImportError
from interopcrypt.keyformat import KeyEncoding
from interopcrypt.keyformat import pkcs1_to_pkcs8
from interopcrypt.keyformat import pkcs8_to_pkcs1
from interopcrypt.rsa import convert_private_key
from interopcrypt.rsa import extract_public_key
from interopcrypt.rsa import generate_key_pair
from interopcrypt.rsa import KeyPair
from interopcrypt.rsa import normalize_private_key
from interopcrypt.rsa import SignatureAlgorithm

__version__ = "0.1.0"
__all__ = [
    "aes",
    "codec",
    "hashing",
    "keyformat",
    "rsa",
    "DecryptionError",
    "EncodingError",
    "InteropCryptError",
    "KeyImportError",
    "KeyEncoding",
    "KeyPair",
    "SignatureAlgorithm",
    "convert_private_key",
    "extract_public_key",
    "generate_key_pair",
    "normalize_private_key",
    "pkcs1_to_pkcs8",
    "pkcs8_to_pkcs1",
]
