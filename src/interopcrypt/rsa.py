"""RSA encryption and signing under PKCS#1 v1.5, with format-agnostic private key ingestion.

Public keys are always SPKI DER. Private keys may be given as PKCS#1 or PKCS#8 DER without saying which: every
operation taking a private key goes through normalize_private_key, which tries PKCS#8 first and then the PKCS#1
bytes wrapped into PKCS#8. Generated key pairs carry their private half in PKCS#1, matching the companion systems.

Typical usage example:

    pair = generate_key_pair(2048)
    c = encrypt(b"Hi there!", pair.public_key)
    r = decrypt(c, pair.private_key)
    s = sign(b"Hi there!", pair.private_key)
    assert verify(b"Hi there!", pair.public_key, s)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import enum
import logging
import typing

from cryptography.exceptions import InvalidSignature
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric import rsa

from interopcrypt import codec
from interopcrypt import keyformat
from interopcrypt.errors import DecryptionError
from interopcrypt.errors import EncodingError
from interopcrypt.errors import KeyImportError
from interopcrypt.keyformat import KeyEncoding

_logger = logging.getLogger(__name__)

DEFAULT_KEY_SIZE = 2048
PUBLIC_EXPONENT = 65537


class SignatureAlgorithm(enum.Enum):
    """Digest used under RSASSA-PKCS1-v1_5."""
    SHA256 = "SHA-256"
    SHA1 = "SHA-1"


HASH_ALGORITHMS: dict[SignatureAlgorithm, typing.Type[hashes.HashAlgorithm]] = {
    SignatureAlgorithm.SHA256: hashes.SHA256,
    SignatureAlgorithm.SHA1: hashes.SHA1,
}


class KeyPair(typing.NamedTuple):
    """A generated key pair.

    Attributes:
        public_key: SPKI DER encoded public key.
        private_key: PKCS#1 DER encoded private key.
    """
    public_key: bytes
    private_key: bytes

    def public_key_base64(self) -> str:
        return codec.b64_encode(self.public_key)

    def private_key_base64(self) -> str:
        return codec.b64_encode(self.private_key)


class ImportAttempt(typing.NamedTuple):
    """Outcome of interpreting private key bytes under one encoding.

    Attributes:
        encoding: The encoding the bytes were tried as.
        key: The loaded key, or None if this attempt failed.
        reason: Why the attempt failed, None on success.
    """
    encoding: KeyEncoding
    key: rsa.RSAPrivateKey | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.key is not None


def _load_pkcs8(pkcs8: bytes, encoding: KeyEncoding) -> ImportAttempt:
    """Hands PKCS#8 bytes to the provider after checking their structure ourselves.

    The structural check keeps the provider from accepting some other encoding in the PKCS#8 slot, which would
    otherwise stop the PKCS#1 fallback from ever being taken.
    """
    try:
        keyformat.pkcs8_to_pkcs1(pkcs8)
        key = serialization.load_der_private_key(pkcs8, password=None)
    except (KeyImportError, ValueError, TypeError, UnsupportedAlgorithm) as exc:
        return ImportAttempt(encoding, reason=str(exc) or type(exc).__name__)
    if not isinstance(key, rsa.RSAPrivateKey):
        return ImportAttempt(encoding, reason=f"Not an RSA key: {type(key).__name__}")
    return ImportAttempt(encoding, key)


def import_attempts(private_key: bytes) -> typing.Iterator[ImportAttempt]:
    """Yields the ingestion attempts for private key bytes in order, stopping after the first success.

    Args:
        private_key: DER bytes in PKCS#8 or PKCS#1.

    Yields:
        First the bytes read as PKCS#8, then the bytes read as PKCS#1 (wrapped into PKCS#8).
    """
    attempt = _load_pkcs8(private_key, KeyEncoding.PKCS8)
    yield attempt
    if attempt.ok:
        return
    yield _load_pkcs8(keyformat.pkcs1_to_pkcs8(private_key), KeyEncoding.PKCS1)


def normalize_private_key(private_key: bytes) -> rsa.RSAPrivateKey:
    """Loads an RSA private key given in either PKCS#8 or PKCS#1 DER.

    Args:
        private_key: The key bytes, encoding unknown.

    Returns:
        The loaded private key.

    Raises:
        KeyImportError: If the bytes are neither a PKCS#8 nor a PKCS#1 RSA private key.
    """
    failures = []
    for attempt in import_attempts(private_key):
        if attempt.ok:
            _logger.debug("Private key accepted as %s", attempt.encoding.value)
            return attempt.key
        _logger.debug("Private key rejected as %s: %s", attempt.encoding.value, attempt.reason)
        failures.append(f"{attempt.encoding.value}: {attempt.reason}")
    raise KeyImportError("Private key is neither PKCS#8 nor PKCS#1 (" + "; ".join(failures) + ")")


def load_public_key(public_key: bytes) -> rsa.RSAPublicKey:
    """Loads an SPKI DER encoded RSA public key.

    Raises:
        KeyImportError: If the bytes are not an SPKI RSA public key.
    """
    try:
        key = serialization.load_der_public_key(public_key)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyImportError(f"Public key is not SPKI: {exc}") from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise KeyImportError(f"Not an RSA public key: {type(key).__name__}")
    return key


def generate_key_pair(bits: int = DEFAULT_KEY_SIZE) -> KeyPair:
    """Generates an RSA key pair.

    The provider exports the private key as PKCS#8, which is then unwrapped so the pair follows the PKCS#1
    convention of the companion systems.

    Args:
        bits: The modulus size in bits.

    Returns:
        The public key as SPKI DER and the private key as PKCS#1 DER.
    """
    _logger.debug("Generating %d-bit RSA key pair", bits)
    key = rsa.generate_private_key(public_exponent=PUBLIC_EXPONENT, key_size=bits)
    public_der = key.public_key().public_bytes(serialization.Encoding.DER,
                                               serialization.PublicFormat.SubjectPublicKeyInfo)
    pkcs8 = key.private_bytes(serialization.Encoding.DER, serialization.PrivateFormat.PKCS8,
                              serialization.NoEncryption())
    return KeyPair(public_der, keyformat.pkcs8_to_pkcs1(pkcs8))


def extract_public_key(private_key: bytes) -> bytes:
    """Derives the SPKI DER public key belonging to a PKCS#1 or PKCS#8 private key."""
    key = normalize_private_key(private_key)
    return key.public_key().public_bytes(serialization.Encoding.DER, serialization.PublicFormat.SubjectPublicKeyInfo)


def encrypt(data: bytes, public_key: bytes) -> bytes:
    """Encrypts with RSAES-PKCS1-v1_5.

    Padding is random, so encrypting the same data twice gives different ciphertexts.

    Args:
        data: The message, at most key size minus 11 bytes.
        public_key: SPKI DER public key.

    Returns:
        The ciphertext, as long as the modulus.

    Raises:
        KeyImportError: If the public key cannot be loaded.
        ValueError: If the message is too long for the key.
    """
    return load_public_key(public_key).encrypt(data, padding.PKCS1v15())


def decrypt(data: bytes, private_key: bytes) -> bytes:
    """Decrypts RSAES-PKCS1-v1_5 ciphertext.

    The provider applies implicit rejection: a full-length ciphertext whose padding does not check out, typically
    one made for another key, decrypts to pseudorandom bytes derived from the key and ciphertext instead of raising.
    Callers needing to detect a wrong key must authenticate the message themselves.

    Args:
        data: The ciphertext.
        private_key: PKCS#1 or PKCS#8 DER private key.

    Returns:
        The message.

    Raises:
        KeyImportError: If the private key cannot be loaded.
        DecryptionError: If the ciphertext length does not match the key size.
    """
    key = normalize_private_key(private_key)
    try:
        return key.decrypt(data, padding.PKCS1v15())
    except ValueError as exc:
        raise DecryptionError(f"RSA decryption failed: {exc}") from exc


def encrypt_base64(data: bytes, public_key: bytes) -> str:
    return codec.b64_encode(encrypt(data, public_key))


def decrypt_from_base64(data: str, private_key: bytes) -> bytes:
    return decrypt(codec.b64_decode(data), private_key)


def sign(data: bytes, private_key: bytes, algorithm: SignatureAlgorithm = SignatureAlgorithm.SHA256) -> bytes:
    """Signs the data with RSASSA-PKCS1-v1_5.

    The signature is deterministic for a given key, digest and message.

    Args:
        data: The message to sign.
        private_key: PKCS#1 or PKCS#8 DER private key.
        algorithm: The digest to sign under.

    Returns:
        The signature, as long as the modulus.

    Raises:
        KeyImportError: If the private key cannot be loaded.
    """
    key = normalize_private_key(private_key)
    return key.sign(data, padding.PKCS1v15(), HASH_ALGORITHMS[algorithm]())


def sign_sha1(data: bytes, private_key: bytes) -> bytes:
    return sign(data, private_key, SignatureAlgorithm.SHA1)


def verify(data: bytes,
           public_key: bytes,
           signature: bytes,
           algorithm: SignatureAlgorithm = SignatureAlgorithm.SHA256) -> bool:
    """Verifies an RSASSA-PKCS1-v1_5 signature.

    Args:
        data: The signed message.
        public_key: SPKI DER public key.
        signature: The signature to check.
        algorithm: The digest the signature was made under.

    Returns:
        True if the signature matches the message and key, False otherwise.

    Raises:
        KeyImportError: If the public key cannot be loaded.
    """
    key = load_public_key(public_key)
    try:
        key.verify(signature, data, padding.PKCS1v15(), HASH_ALGORITHMS[algorithm]())
    except InvalidSignature:
        return False
    return True


def verify_sha1(data: bytes, public_key: bytes, signature: bytes) -> bool:
    return verify(data, public_key, signature, SignatureAlgorithm.SHA1)


def sign_base64(text: str, private_key: bytes, algorithm: SignatureAlgorithm = SignatureAlgorithm.SHA256) -> str:
    """Signs the UTF-8 encoding of the text and returns the signature as Base64."""
    return codec.b64_encode(sign(codec.utf8_encode(text), private_key, algorithm))


def verify_from_base64(text: str,
                       public_key: bytes,
                       signature: str,
                       algorithm: SignatureAlgorithm = SignatureAlgorithm.SHA256) -> bool:
    """Verifies a Base64 signature over the UTF-8 encoding of the text.

    A signature that is not valid Base64 cannot match and yields False.
    """
    try:
        raw = codec.b64_decode(signature)
    except EncodingError:
        return False
    return verify(codec.utf8_encode(text), public_key, raw, algorithm)


def convert_private_key(private_key: bytes, target: KeyEncoding) -> bytes:
    """Re-encodes a PKCS#1 or PKCS#8 private key in the target encoding.

    Args:
        private_key: PKCS#1 or PKCS#8 DER private key.
        target: KeyEncoding.PKCS1 or KeyEncoding.PKCS8.

    Returns:
        The DER bytes of the same key in the target encoding.

    Raises:
        KeyImportError: If the private key cannot be loaded.
        ValueError: If the target is not a private key encoding.
    """
    key = normalize_private_key(private_key)
    pkcs8 = key.private_bytes(serialization.Encoding.DER, serialization.PrivateFormat.PKCS8,
                              serialization.NoEncryption())
    if target is KeyEncoding.PKCS8:
        return pkcs8
    if target is KeyEncoding.PKCS1:
        return keyformat.pkcs8_to_pkcs1(pkcs8)
    raise ValueError(f"{target.value} is not a private key encoding")
