"""In-memory account entries pairing a display name with a TOTP secret."""

import re
from typing import Optional

from pure_otp.hotp import DEFAULT_DIGITS
from pure_otp.totp import DEFAULT_PERIOD, TotpGenerator

_WHITESPACE = re.compile(r"\s+")


def normalize_secret(secret: str) -> str:
    """
    Clean up a secret as typed or pasted by a user.

    Removes all whitespace (secrets are often shown in groups of four) and
    upper-cases ASCII letters. Other characters are left for the Base32
    decoder to reject.
    """
    return "".join(
        char.upper() if char.isascii() else char
        for char in _WHITESPACE.sub("", secret)
    )


def format_code(code: str) -> str:
    """Split a six-digit code into two groups of three for display."""
    if len(code) == 6:
        return f"{code[:3]} {code[3:]}"
    return code


class Account:
    """
    A named TOTP secret.

    The secret is normalised and checked when the account is created, so an
    unusable secret is rejected up front rather than when a code is first
    displayed.
    """

    def __init__(
        self,
        name: str,
        secret: str,
        period: int = DEFAULT_PERIOD,
        digits: int = DEFAULT_DIGITS,
    ):
        """
        Initialize an Account.

        Args:
            name: Label shown next to the code.
            secret: Base32 secret, whitespace and case are ignored.
            period: TOTP time step in seconds (default: 30).
            digits: Code length (default: 6).

        Raises:
            ValueError: If name or secret is blank.
            InvalidSecret: If the secret is not valid Base32 key material.
        """
        name = name.strip()
        if not name:
            raise ValueError("Please enter an account name")
        secret = normalize_secret(secret)
        if not secret:
            raise ValueError("Please enter a TOTP secret")

        self.name = name
        self.secret = secret
        self._totp = TotpGenerator(secret, period=period, digits=digits)
        # Fail now rather than on first display
        self._totp.generate()

    @property
    def period(self) -> int:
        return self._totp.period

    @property
    def digits(self) -> int:
        return self._totp.digits

    def code(self, timestamp: Optional[float] = None) -> str:
        return self._totp.generate(timestamp)

    def display_code(self, timestamp: Optional[float] = None) -> str:
        return format_code(self.code(timestamp))

    def verify(self, token: str, timestamp: Optional[float] = None, window: int = 1) -> bool:
        if not isinstance(token, str):
            return False
        return self._totp.verify(normalize_secret(token), timestamp, window)

    def remaining_seconds(self) -> int:
        return self._totp.get_remaining_seconds()

    def remaining_percentage(self) -> float:
        return self._totp.get_remaining_percentage()

    def __repr__(self) -> str:
        return f"Account(name={self.name!r}, period={self.period}, digits={self.digits})"
