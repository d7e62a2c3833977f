"""RFC 4226 HOTP (HMAC-based One-Time Password) implementation."""

import logging
from hmac import compare_digest
from typing import Union

from pure_otp import base32
from pure_otp.errors import InvalidBase32Character, InvalidSecret, OtpError
from pure_otp.hmac_sha1 import hmac_sha1
from pure_otp.sha1 import DIGEST_SIZE

logger = logging.getLogger(__name__)

DEFAULT_DIGITS = 6
MIN_DIGITS = 6
MAX_DIGITS = 8
MAX_COUNTER = 2**64 - 1


def generate_hotp(
    secret: Union[str, bytes], counter: int, digits: int = DEFAULT_DIGITS
) -> str:
    """
    Generate an HOTP code using RFC 4226.

    Args:
        secret: The HOTP secret as Base32 text, or the raw key bytes.
        counter: The moving counter value (incremented after each use).
        digits: Number of digits in the output code (default: 6).

    Returns:
        A zero-padded HOTP code string.

    Raises:
        InvalidSecret: If the secret cannot be decoded or is empty.
        ValueError: If counter or digits is out of range.
    """
    return _hotp(decode_secret(secret), counter, digits)


def decode_secret(secret: Union[str, bytes]) -> bytes:
    """
    Turn an HOTP secret into raw key bytes.

    Text is decoded as Base32; bytes are taken to be the key itself.

    Raises:
        InvalidSecret: If decoding fails or yields no key material.
    """
    if isinstance(secret, str):
        try:
            raw_secret = base32.decode(secret)
        except InvalidBase32Character as e:
            raise InvalidSecret(f"Unable to decode Base32 secret: {e}") from e
    elif isinstance(secret, (bytes, bytearray, memoryview)):
        raw_secret = bytes(secret)
    else:
        raise InvalidSecret(
            f"Secret must be Base32 text or bytes, not {type(secret).__name__}"
        )

    if not raw_secret:
        raise InvalidSecret("Secret decodes to an empty key")
    return raw_secret


def counter_to_bytes(counter: int) -> bytes:
    """Encode a counter as the 8-byte big-endian HOTP moving factor."""
    if not 0 <= counter <= MAX_COUNTER:
        raise ValueError(f"Counter must be an unsigned 64-bit integer: {counter}")
    return counter.to_bytes(8, byteorder="big")


def dynamic_truncate(digest: bytes) -> int:
    """Extract the 31-bit value selected by the digest's last nibble (RFC 4226, 5.3)."""
    if len(digest) != DIGEST_SIZE:
        raise OtpError(f"Expected a {DIGEST_SIZE}-byte digest, got {len(digest)}")
    offset = digest[19] & 0x0F
    return (
        ((digest[offset] & 0x7F) << 24)
        | (digest[offset + 1] << 16)
        | (digest[offset + 2] << 8)
        | digest[offset + 3]
    )


def validate_digits(digits: int) -> None:
    if not MIN_DIGITS <= digits <= MAX_DIGITS:
        raise ValueError(
            f"digits must be between {MIN_DIGITS} and {MAX_DIGITS}, got {digits}"
        )


def _hotp(key: bytes, counter: int, digits: int) -> str:
    validate_digits(digits)
    logger.debug("Generating %d-digit HOTP for counter %d", digits, counter)
    hmac_digest = hmac_sha1(key, counter_to_bytes(counter))
    code = dynamic_truncate(hmac_digest) % (10**digits)
    return f"{code:0{digits}d}"


class HotpGenerator:
    """
    Counter-based OTP generator bound to one secret.

    The secret is decoded once, when the generator is built, so a bad secret
    is reported immediately. Each call computes a fresh HMAC; instances can
    be shared between threads.
    """

    def __init__(self, secret: Union[str, bytes], digits: int = DEFAULT_DIGITS):
        validate_digits(digits)
        self._key = decode_secret(secret)
        self.digits = digits

    def at(self, counter: int) -> str:
        """Generate the code for the given counter."""
        return _hotp(self._key, counter, self.digits)

    def verify(self, token: str, counter: int) -> bool:
        """Check token against the code for counter in constant time."""
        if not isinstance(token, str):
            return False
        expected = self.at(counter)
        return compare_digest(token.encode("ascii", "replace"), expected.encode("ascii"))

    def __repr__(self) -> str:
        return f"HotpGenerator(digits={self.digits})"
