"""Tests for HMAC-SHA1."""

import os

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from pure_otp.errors import EmptyHmacKey, HashFinalizedError, InputFormatNotRecognized
from pure_otp.hmac_sha1 import HmacSha1, hmac_sha1


# RFC 2202 HMAC-SHA1 test cases
RFC2202_TEST_VECTORS = [
    (b"\x0b" * 20, b"Hi There", "b617318655057264e28bc0b6fb378c8ef146be00"),
    (b"Jefe", b"what do ya want for nothing?", "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"),
    (b"\xaa" * 20, b"\xdd" * 50, "125d7342b9ac11cd91a39af48aa17b4f63f175d3"),
    (
        b"\xaa" * 80,
        b"Test Using Larger Than Block-Size Key - Hash Key First",
        "aa4ae5e15272d00e95705637ce8a3b55ed402112",
    ),
    (
        b"\xaa" * 80,
        b"Test Using Larger Than Block-Size Key and Larger Than One Block-Size Data",
        "e8e99d0f45237d786d6bbaa7965c7808bbff1a91",
    ),
]


def _reference(key: bytes, message: bytes) -> bytes:
    h = crypto_hmac.HMAC(key, hashes.SHA1())
    h.update(message)
    return h.finalize()


@pytest.mark.parametrize("key,message,expected", RFC2202_TEST_VECTORS)
def test_rfc2202_vectors(key, message, expected):
    """Test HMAC-SHA1 against RFC 2202 test cases."""
    assert hmac_sha1(key, message).hex() == expected
    assert HmacSha1(key, message).hexdigest() == expected


@pytest.mark.parametrize("key_length", [1, 20, 63, 64, 65, 200])
def test_hmac_matches_cryptography(key_length):
    """Test key lengths on both sides of the block size against cryptography."""
    key = os.urandom(key_length)
    message = os.urandom(100)
    mac = hmac_sha1(key, message)
    assert len(mac) == 20
    assert mac == _reference(key, message)


def test_hmac_empty_key():
    """Test that an empty key is rejected."""
    with pytest.raises(EmptyHmacKey, match="cannot be empty"):
        hmac_sha1(b"", b"message")
    with pytest.raises(EmptyHmacKey):
        HmacSha1("")


def test_hmac_empty_message():
    """Test that an empty message is allowed."""
    assert hmac_sha1(b"key", b"") == _reference(b"key", b"")


def test_hmac_text_inputs_are_utf8():
    """Test that text keys and messages are UTF-8 encoded."""
    assert hmac_sha1("Jefe", "what do ya want for nothing?").hex() == RFC2202_TEST_VECTORS[1][2]
    assert hmac_sha1("clé", "€") == _reference("clé".encode("utf-8"), "€".encode("utf-8"))


def test_hmac_streaming_matches_one_shot():
    """Test that incremental updates equal the one-shot function."""
    key = b"secret-key"
    message = os.urandom(300)
    h = HmacSha1(key)
    for start in range(0, len(message), 37):
        h.update(message[start : start + 37])
    assert h.digest() == hmac_sha1(key, message)


def test_hmac_streaming_single_use():
    """Test that a finalized HMAC object cannot be reused."""
    h = HmacSha1(b"key", b"message")
    h.digest()
    with pytest.raises(HashFinalizedError):
        h.update(b"more")


def test_hmac_calls_do_not_share_state():
    """Test that repeated calls with the same input agree."""
    first = hmac_sha1(b"key", b"message")
    hmac_sha1(b"other", b"noise")
    assert hmac_sha1(b"key", b"message") == first


def test_hmac_rejects_unknown_input():
    """Test that unsupported key and message types are rejected."""
    with pytest.raises(InputFormatNotRecognized):
        hmac_sha1(123, b"message")
    with pytest.raises(InputFormatNotRecognized):
        hmac_sha1(b"key", 1.5)


def test_package_keeps_hmac_module():
    """Test the package attribute is the module, not the one-shot function."""
    import pure_otp
    from pure_otp import hmac_sha1_digest
    from pure_otp import hmac_sha1 as hmac_module

    assert hmac_module.HmacSha1 is HmacSha1
    assert pure_otp.hmac_sha1 is hmac_module
    assert hmac_sha1_digest(b"Jefe", b"what do ya want for nothing?").hex() == RFC2202_TEST_VECTORS[1][2]


def test_hmac_reset_keeps_key():
    """Test that reset restarts the message under the same key."""
    h = HmacSha1(b"Jefe", b"something else")
    h.digest()
    h.reset()
    h.update(b"what do ya want for nothing?")
    assert h.hexdigest() == RFC2202_TEST_VECTORS[1][2]


def test_hmac_reset_discards_unfinished_message():
    """Test that reset drops input that was never digested."""
    h = HmacSha1(b"key", b"partial")
    h.reset()
    assert h.digest() == _reference(b"key", b"")
