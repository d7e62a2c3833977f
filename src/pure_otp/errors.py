"""Exception types raised by the OTP stack."""


class OtpError(ValueError):
    """Base class for every error raised by pure-otp."""


class InvalidBase32Character(OtpError):
    """Raised when Base32 text contains a character outside the alphabet."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"Invalid base32 character {char!r} at position {position}"
        )


class InvalidSecret(OtpError):
    """Raised when an OTP secret cannot be turned into key material."""


class EmptyHmacKey(OtpError):
    """Raised when HMAC is given a zero-length key."""


class UnsupportedHashVariant(OtpError):
    """Raised when a hash other than SHA-1 is requested."""


class InputFormatNotRecognized(OtpError, TypeError):
    """Raised when data is neither text nor a bytes-like object."""


class HashFinalizedError(OtpError, RuntimeError):
    """Raised when a finalized hash object is used again without reset()."""
