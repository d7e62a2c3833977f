"""Command-line interface for pure-otp."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from pure_otp import base32
from pure_otp.account import format_code, normalize_secret
from pure_otp.errors import OtpError
from pure_otp.hotp import generate_hotp
from pure_otp.sha1 import Sha1
from pure_otp.totp import DEFAULT_PERIOD, DEFAULT_WINDOW, TotpGenerator

logger = logging.getLogger(__name__)

SECRET_ENV_VAR = "PURE_OTP_SECRET"


def _resolve_secret(args: argparse.Namespace) -> str:
    """Take the secret from the command line, falling back to the environment."""
    secret = args.secret or os.environ.get(SECRET_ENV_VAR)
    if not secret:
        raise ValueError(
            f"No secret given. Pass it as an argument or set {SECRET_ENV_VAR}."
        )
    return normalize_secret(secret)


def totp_command(args: argparse.Namespace) -> int:
    """Handle the totp command."""
    try:
        totp = TotpGenerator(
            _resolve_secret(args), period=args.period, digits=args.digits
        )
        code = totp.generate(args.timestamp)
        print(format_code(code) if args.group else code)
        if args.remaining:
            print(f"{totp.get_remaining_seconds()}s remaining")
        return 0
    except ValueError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1


def hotp_command(args: argparse.Namespace) -> int:
    """Handle the hotp command."""
    try:
        code = generate_hotp(_resolve_secret(args), args.counter, args.digits)
        print(format_code(code) if args.group else code)
        return 0
    except ValueError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1


def verify_command(args: argparse.Namespace) -> int:
    """Handle the verify command."""
    try:
        totp = TotpGenerator(
            _resolve_secret(args), period=args.period, digits=args.digits
        )
        token = normalize_secret(args.token)
        if totp.verify(token, args.timestamp, window=args.window):
            print("✓ Code is valid")
            return 0
        print("✗ Code is not valid", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1


def encode_command(args: argparse.Namespace) -> int:
    """Handle the encode command."""
    print(base32.encode(args.text.encode("utf-8")))
    return 0


def decode_command(args: argparse.Namespace) -> int:
    """Handle the decode command."""
    try:
        raw = base32.decode(args.text)
    except OtpError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1
    print(raw.hex() if args.hex else raw.decode("utf-8", "replace"))
    return 0


def sha1_command(args: argparse.Namespace) -> int:
    """Handle the sha1 command."""
    print(Sha1(args.text).hexdigest())
    return 0


def _add_secret_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "secret",
        nargs="?",
        default=None,
        help=f"Base32 secret (default: ${SECRET_ENV_VAR})",
    )
    parser.add_argument(
        "--digits",
        "-d",
        type=int,
        default=6,
        choices=[6, 7, 8],
        help="Number of digits in the code (default: 6)",
    )


def _add_time_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--period",
        "-p",
        type=int,
        default=DEFAULT_PERIOD,
        help=f"Time step in seconds (default: {DEFAULT_PERIOD})",
    )
    parser.add_argument(
        "--timestamp",
        "-t",
        type=int,
        default=None,
        help="Unix time in milliseconds (default: now)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the pure-otp command."""
    parser = argparse.ArgumentParser(
        prog="pure-otp",
        description="HOTP/TOTP code generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # TOTP command
    totp_parser = subparsers.add_parser(
        "totp",
        aliases=["code"],
        help="Generate the current TOTP code",
    )
    _add_secret_options(totp_parser)
    _add_time_options(totp_parser)
    totp_parser.add_argument(
        "--remaining",
        "-r",
        action="store_true",
        help="Also print the seconds left before the code changes",
    )
    totp_parser.add_argument(
        "--group",
        "-g",
        action="store_true",
        help='Print six-digit codes as "123 456"',
    )
    totp_parser.set_defaults(handler=totp_command)

    # HOTP command
    hotp_parser = subparsers.add_parser(
        "hotp",
        help="Generate the HOTP code for a counter",
    )
    _add_secret_options(hotp_parser)
    hotp_parser.add_argument(
        "--counter",
        "-c",
        type=int,
        required=True,
        help="HOTP counter value",
    )
    hotp_parser.add_argument(
        "--group",
        "-g",
        action="store_true",
        help='Print six-digit codes as "123 456"',
    )
    hotp_parser.set_defaults(handler=hotp_command)

    # Verify command
    verify_parser = subparsers.add_parser(
        "verify",
        help="Check a TOTP code",
    )
    verify_parser.add_argument("token", help="The code to check")
    _add_secret_options(verify_parser)
    _add_time_options(verify_parser)
    verify_parser.add_argument(
        "--window",
        "-w",
        type=int,
        default=DEFAULT_WINDOW,
        help=f"Periods of clock drift tolerated (default: {DEFAULT_WINDOW})",
    )
    verify_parser.set_defaults(handler=verify_command)

    # Base32 helpers
    encode_parser = subparsers.add_parser("encode", help="Base32-encode text")
    encode_parser.add_argument("text", help="UTF-8 text to encode")
    encode_parser.set_defaults(handler=encode_command)

    decode_parser = subparsers.add_parser("decode", help="Decode Base32 text")
    decode_parser.add_argument("text", help="Base32 text to decode")
    decode_parser.add_argument(
        "--hex",
        action="store_true",
        help="Print the decoded bytes as hex",
    )
    decode_parser.set_defaults(handler=decode_command)

    # SHA-1 helper
    sha1_parser = subparsers.add_parser("sha1", help="Print the SHA-1 of text")
    sha1_parser.add_argument("text", help="UTF-8 text to hash")
    sha1_parser.set_defaults(handler=sha1_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    logger.debug("Running %s command", args.command)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
