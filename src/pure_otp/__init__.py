"""Pure-Python HOTP/TOTP with its own Base32, SHA-1 and HMAC-SHA1."""

from pure_otp.account import Account, format_code, normalize_secret
from pure_otp.base32 import decode as b32decode
from pure_otp.base32 import encode as b32encode
from pure_otp.errors import (
    EmptyHmacKey,
    HashFinalizedError,
    InputFormatNotRecognized,
    InvalidBase32Character,
    InvalidSecret,
    OtpError,
    UnsupportedHashVariant,
)
from pure_otp.hmac_sha1 import HmacSha1
from pure_otp.hmac_sha1 import hmac_sha1 as hmac_sha1_digest
from pure_otp.hotp import HotpGenerator, generate_hotp
from pure_otp.sha1 import Sha1
from pure_otp.sha1 import sha1 as sha1_digest
from pure_otp.totp import TimeStepConfig, TotpGenerator, generate_totp

__version__ = "0.1.0"

__all__ = [
    "Account",
    "EmptyHmacKey",
    "HashFinalizedError",
    "HmacSha1",
    "HotpGenerator",
    "InputFormatNotRecognized",
    "InvalidBase32Character",
    "InvalidSecret",
    "OtpError",
    "Sha1",
    "TimeStepConfig",
    "TotpGenerator",
    "UnsupportedHashVariant",
    "b32decode",
    "b32encode",
    "format_code",
    "generate_hotp",
    "generate_totp",
    "hmac_sha1_digest",
    "normalize_secret",
    "sha1_digest",
]
