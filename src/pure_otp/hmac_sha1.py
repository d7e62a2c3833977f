"""HMAC-SHA1 (FIPS 198 / RFC 2104) composed from the pure-Python SHA-1."""

from typing import Optional

from pure_otp._bytes import BytesLike, to_bytes
from pure_otp.errors import EmptyHmacKey
from pure_otp.sha1 import BLOCK_SIZE, DIGEST_SIZE, Sha1, sha1

IPAD = 0x36
OPAD = 0x5C


def _prepare_key(key: BytesLike) -> bytes:
    """Shorten or zero-pad the key to exactly one block."""
    key_bytes = to_bytes(key, "HMAC key")
    if not key_bytes:
        raise EmptyHmacKey("HMAC key cannot be empty")
    if len(key_bytes) > BLOCK_SIZE:
        key_bytes = sha1(key_bytes)
    return key_bytes.ljust(BLOCK_SIZE, b"\0")


def _xor(block: bytes, pad: int) -> bytes:
    return bytes(b ^ pad for b in block)


class HmacSha1:
    """
    Incremental HMAC-SHA1.

    Like :class:`pure_otp.sha1.Sha1` this object is single use: the inner
    hash is finalized by ``digest()`` and any later call raises
    :class:`pure_otp.errors.HashFinalizedError` until ``reset()`` restarts
    the message under the same key.
    """

    name = "hmac-sha1"
    block_size = BLOCK_SIZE
    digest_size = DIGEST_SIZE

    def __init__(self, key: BytesLike, msg: Optional[BytesLike] = None):
        block = _prepare_key(key)
        self._ipad = _xor(block, IPAD)
        self._opad = _xor(block, OPAD)
        self._inner = Sha1(self._ipad)
        if msg is not None:
            self.update(msg)

    def reset(self) -> "HmacSha1":
        """Discard the message so far, keeping the key."""
        self._inner.reset().update(self._ipad)
        return self

    def update(self, msg: BytesLike) -> "HmacSha1":
        self._inner.update(msg)
        return self

    def digest(self) -> bytes:
        inner_digest = self._inner.digest()
        return sha1(self._opad + inner_digest)

    def hexdigest(self) -> str:
        return self.digest().hex()


def hmac_sha1(key: BytesLike, message: BytesLike) -> bytes:
    """
    Compute HMAC-SHA1 of message under key.

    Args:
        key: Non-empty key; keys longer than 64 bytes are hashed first.
        message: The message to authenticate.

    Returns:
        The 20-byte MAC.

    Raises:
        EmptyHmacKey: If key is empty.
        InputFormatNotRecognized: If key or message is not text or bytes-like.
    """
    block = _prepare_key(key)
    inner = sha1(_xor(block, IPAD) + to_bytes(message, "message"))
    return sha1(_xor(block, OPAD) + inner)
