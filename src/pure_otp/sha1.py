"""
Streaming SHA-1 (FIPS 180-4) implemented in pure Python.

The :class:`Sha1` object follows the familiar ``hashlib`` shape
(``update`` / ``digest`` / ``hexdigest`` / ``copy``) with one deliberate
difference: it is single use. Once ``digest()`` or ``hexdigest()`` has been
called the object refuses further input until ``reset()`` is called.
"""

import struct
from typing import List, Optional

from pure_otp._bytes import BytesLike, to_bytes
from pure_otp.errors import HashFinalizedError, UnsupportedHashVariant

BLOCK_SIZE = 64
DIGEST_SIZE = 20

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_MASK = 0xFFFFFFFF
_BLOCK = struct.Struct(">16I")
_STATE = struct.Struct(">5I")

_VARIANT_NAMES = ("sha1", "sha-1")


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _compress(state: List[int], block: bytes) -> None:
    """Fold one 64-byte block into the five-word state in place."""
    w = list(_BLOCK.unpack(block))
    for i in range(16, 80):
        w.append(_rotl(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    a, b, c, d, e = state
    for i in range(80):
        if i < 20:
            f = (b & c) | (~b & d)
            k = 0x5A827999
        elif i < 40:
            f = b ^ c ^ d
            k = 0x6ED9EBA1
        elif i < 60:
            f = (b & c) | (b & d) | (c & d)
            k = 0x8F1BBCDC
        else:
            f = b ^ c ^ d
            k = 0xCA62C1D6

        temp = (_rotl(a, 5) + f + e + k + w[i]) & _MASK
        e = d
        d = c
        c = _rotl(b, 30)
        b = a
        a = temp

    state[0] = (state[0] + a) & _MASK
    state[1] = (state[1] + b) & _MASK
    state[2] = (state[2] + c) & _MASK
    state[3] = (state[3] + d) & _MASK
    state[4] = (state[4] + e) & _MASK


class Sha1:
    """
    Incremental SHA-1 hash.

    The message is the concatenation of every ``update`` argument in call
    order. Text is hashed as its UTF-8 encoding.
    """

    name = "sha1"
    block_size = BLOCK_SIZE
    digest_size = DIGEST_SIZE

    def __init__(self, data: Optional[BytesLike] = None):
        self.reset()
        if data is not None:
            self.update(data)

    def reset(self) -> "Sha1":
        """Restore the initial state and discard any buffered input."""
        self._state = list(INITIAL_STATE)
        self._remainder = b""
        self._processed = 0
        self._finalized = False
        return self

    @property
    def finalized(self) -> bool:
        return self._finalized

    def update(self, data: BytesLike) -> "Sha1":
        """
        Feed more message bytes.

        Raises:
            HashFinalizedError: If the digest has already been produced.
            InputFormatNotRecognized: If data is not text or bytes-like.
        """
        self._check_open()
        buf = self._remainder + to_bytes(data, "message")
        full = len(buf) - len(buf) % BLOCK_SIZE
        for start in range(0, full, BLOCK_SIZE):
            _compress(self._state, buf[start : start + BLOCK_SIZE])
        self._processed += full
        self._remainder = buf[full:]
        return self

    def digest(self) -> bytes:
        """
        Finalize the message and return the 20-byte digest.

        Raises:
            HashFinalizedError: If called a second time without reset().
        """
        self._check_open()
        bit_length = (self._processed + len(self._remainder)) * 8

        tail = self._remainder + b"\x80"
        if len(tail) > BLOCK_SIZE - 8:
            tail = tail.ljust(BLOCK_SIZE, b"\0")
            _compress(self._state, tail)
            tail = b""
        tail = tail.ljust(BLOCK_SIZE - 8, b"\0")
        tail += struct.pack(">Q", bit_length & 0xFFFFFFFFFFFFFFFF)
        _compress(self._state, tail)

        self._remainder = b""
        self._finalized = True
        return _STATE.pack(*self._state)

    def hexdigest(self) -> str:
        """Finalize the message and return the digest as lowercase hex."""
        return self.digest().hex()

    def copy(self) -> "Sha1":
        """Return an independent clone of this (unfinalized) hash."""
        self._check_open()
        clone = Sha1.__new__(Sha1)
        clone._state = list(self._state)
        clone._remainder = self._remainder
        clone._processed = self._processed
        clone._finalized = False
        return clone

    def _check_open(self) -> None:
        if self._finalized:
            raise HashFinalizedError(
                "SHA-1 digest already produced; call reset() before reuse"
            )


def new(variant: str = "SHA-1", data: Optional[BytesLike] = None) -> Sha1:
    """
    Create a hash object for the named variant.

    Raises:
        UnsupportedHashVariant: If variant is anything other than SHA-1.
    """
    if str(variant).lower() not in _VARIANT_NAMES:
        raise UnsupportedHashVariant(
            f"Hash variant {variant!r} is not supported; only SHA-1 is available"
        )
    return Sha1(data)


def sha1(data: BytesLike = b"") -> bytes:
    """Return the SHA-1 digest of data in one call."""
    return Sha1(data).digest()
