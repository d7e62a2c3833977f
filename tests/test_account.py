"""Tests for account helpers."""

import pytest

from pure_otp.account import Account, format_code, normalize_secret
from pure_otp.errors import InvalidSecret


SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


def test_normalize_secret():
    """Test whitespace removal and upper-casing."""
    assert normalize_secret("gezd gnbv gy3t qojq\n") == "GEZDGNBVGY3TQOJQ"
    assert normalize_secret("  \t ") == ""


@pytest.mark.parametrize(
    "code,expected",
    [("755224", "755 224"), ("012345", "012 345"), ("94287082", "94287082"), ("", "")],
)
def test_format_code(code, expected):
    """Test that only six-digit codes are grouped."""
    assert format_code(code) == expected


def test_account_normalizes_secret():
    """Test that a pasted, spaced, lowercase secret is accepted."""
    account = Account("GitHub", "gezd gnbv gy3t qojq gezd gnbv gy3t qojq")
    assert account.secret == SECRET
    assert account.name == "GitHub"


def test_account_code():
    """Test code generation for a given timestamp."""
    account = Account("Example", SECRET)
    assert account.code(0) == "755224"
    assert account.display_code(0) == "755 224"
    assert account.display_code(30_000) == "287 082"


def test_account_eight_digits():
    """Test that eight-digit codes are shown ungrouped."""
    account = Account("Example", SECRET, digits=8)
    assert account.display_code(59_000) == "94287082"


def test_account_verify_accepts_grouped_token():
    """Test that a code typed with a space still verifies."""
    account = Account("Example", SECRET)
    assert account.verify("755 224", 0)
    assert not account.verify("000 000", 0)


@pytest.mark.parametrize("token", [None, 755224, b"755224"])
def test_account_verify_rejects_non_text(token):
    """Test that non-text tokens fail verification instead of raising."""
    account = Account("Example", SECRET)
    assert not account.verify(token, 0)


def test_account_remaining():
    """Test the countdown helpers."""
    account = Account("Example", SECRET)
    assert 1 <= account.remaining_seconds() <= account.period
    assert 0 < account.remaining_percentage() <= 100


@pytest.mark.parametrize("secret", ["gezdgnbvgy3tqojı", "ſezdgnbvgy3tqojq"])
def test_account_rejects_non_ascii_letters(secret):
    """Test that normalising never turns a non-ASCII letter into a valid symbol."""
    assert normalize_secret(secret) != normalize_secret(secret).upper()
    with pytest.raises(InvalidSecret):
        Account("Example", secret)


@pytest.mark.parametrize("name", ["", "   "])
def test_account_requires_name(name):
    """Test that a blank name is rejected."""
    with pytest.raises(ValueError, match="account name"):
        Account(name, SECRET)


def test_account_requires_secret():
    """Test that a blank secret is rejected."""
    with pytest.raises(ValueError, match="TOTP secret"):
        Account("Example", " \n ")


@pytest.mark.parametrize("secret", ["AAAA0!!!", "hello-world", "===="])
def test_account_invalid_secret(secret):
    """Test that unusable secrets raise InvalidSecret instead of a placeholder code."""
    with pytest.raises(InvalidSecret):
        Account("Example", secret)


def test_account_repr_hides_secret():
    """Test that the repr does not leak the secret."""
    assert SECRET not in repr(Account("Example", SECRET))
