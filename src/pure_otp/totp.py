"""RFC 6238 TOTP (Time-based One-Time Password) built on HOTP."""

import logging
import time
from dataclasses import dataclass
from hmac import compare_digest
from typing import Callable, Optional, Union

from pure_otp.hotp import DEFAULT_DIGITS, HotpGenerator, validate_digits

logger = logging.getLogger(__name__)

DEFAULT_PERIOD = 30
DEFAULT_WINDOW = 1


@dataclass(frozen=True)
class TimeStepConfig:
    """Period (seconds) and code length shared by every code of a generator."""

    period: int = DEFAULT_PERIOD
    digits: int = DEFAULT_DIGITS

    def __post_init__(self) -> None:
        if isinstance(self.period, bool) or not isinstance(self.period, int):
            raise ValueError(f"period must be an integer, got {self.period!r}")
        if self.period <= 0:
            raise ValueError(f"period must be positive, got {self.period}")
        validate_digits(self.digits)


class TotpGenerator:
    """
    Time-based OTP generator for one account.

    Timestamps are Unix epoch milliseconds; ``None`` means "now" as reported
    by ``clock`` (seconds, ``time.time`` by default).
    """

    def __init__(
        self,
        secret: Union[str, bytes],
        period: int = DEFAULT_PERIOD,
        digits: int = DEFAULT_DIGITS,
        clock: Callable[[], float] = time.time,
    ):
        self.config = TimeStepConfig(period=period, digits=digits)
        self._hotp = HotpGenerator(secret, digits=digits)
        self._clock = clock

    @property
    def period(self) -> int:
        return self.config.period

    @property
    def digits(self) -> int:
        return self.config.digits

    def _seconds(self, timestamp: Optional[float]) -> int:
        if timestamp is None:
            return int(self._clock())
        return int(timestamp // 1000)

    def timecode(self, timestamp: Optional[float] = None) -> int:
        """Return the time-step counter for timestamp (ms) or now."""
        return self._seconds(timestamp) // self.period

    def generate(self, timestamp: Optional[float] = None) -> str:
        """
        Generate the code for the time step containing timestamp.

        Args:
            timestamp: Unix time in milliseconds, or None for now.

        Returns:
            The zero-padded TOTP code.
        """
        return self._hotp.at(self.timecode(timestamp))

    def get_remaining_seconds(self) -> int:
        """Seconds until the current code expires, in ``[1, period]``."""
        now = int(self._clock())
        return self.period - (now % self.period)

    def get_remaining_percentage(self) -> float:
        """Share of the current period still remaining, in ``(0, 100]``."""
        return self.get_remaining_seconds() / self.period * 100

    def verify(
        self,
        token: str,
        timestamp: Optional[float] = None,
        window: int = DEFAULT_WINDOW,
    ) -> bool:
        """
        Check a token against the codes around timestamp.

        Every counter in ``[c - window, c + window]`` is compared, even after
        a match, so the time taken does not reveal which step matched.

        Args:
            token: The code to check.
            timestamp: Unix time in milliseconds, or None for now.
            window: Number of periods of drift tolerated in each direction.

        Returns:
            True if token matches any code in the window.
        """
        if window < 0:
            raise ValueError(f"window must not be negative, got {window}")
        if not isinstance(token, str):
            return False

        counter = self.timecode(timestamp)
        candidate = token.encode("ascii", "replace")
        matched = False
        for step in range(counter - window, counter + window + 1):
            if step < 0:
                continue
            expected = self._hotp.at(step).encode("ascii")
            matched |= compare_digest(candidate, expected)
        logger.debug(
            "Verified TOTP around counter %d with window %d", counter, window
        )
        return matched

    def __repr__(self) -> str:
        return f"TotpGenerator(period={self.period}, digits={self.digits})"


def generate_totp(
    secret: Union[str, bytes],
    timestamp: Optional[float] = None,
    period: int = DEFAULT_PERIOD,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """Generate a TOTP code without keeping a generator around."""
    return TotpGenerator(secret, period=period, digits=digits).generate(timestamp)
