"""RFC 4648 Base32 encoding and decoding."""

from typing import Union

from pure_otp._bytes import to_bytes
from pure_otp.errors import InputFormatNotRecognized, InvalidBase32Character

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PAD = "="

_LOOKUP = {char: index for index, char in enumerate(ALPHABET)}
# ASCII-only case folding; str.upper() maps e.g. "ı" to "I"
_LOOKUP.update({char.lower(): index for char, index in _LOOKUP.items() if char.isalpha()})

# Symbols emitted for a trailing group of 1, 2, 3, 4 or 5 bytes
_SYMBOLS_FOR_BYTES = {1: 2, 2: 4, 3: 5, 4: 7, 5: 8}


def encode(data: Union[bytes, bytearray, memoryview]) -> str:
    """
    Encode bytes as padded Base32 text.

    Args:
        data: The bytes to encode.

    Returns:
        Base32 text whose length is a multiple of 8.

    Raises:
        InputFormatNotRecognized: If data is not bytes-like.
    """
    if isinstance(data, str):
        raise InputFormatNotRecognized("encode() expects bytes, not str")
    raw = to_bytes(data, "base32 input")

    out = []
    for start in range(0, len(raw), 5):
        chunk = raw[start : start + 5]
        # Right-pad to 40 bits so every group shifts out the same way
        n = int.from_bytes(chunk.ljust(5, b"\0"), "big")
        symbols = _SYMBOLS_FOR_BYTES[len(chunk)]
        for i in range(symbols):
            out.append(ALPHABET[(n >> (35 - 5 * i)) & 31])
        out.append(PAD * (8 - symbols))
    return "".join(out)


def decode(text: Union[str, bytes]) -> bytes:
    """
    Decode Base32 text into bytes.

    Decoding is case-insensitive. ``=`` characters are skipped wherever they
    appear, so missing or surplus padding is tolerated; the output length
    depends only on the number of alphabet characters.

    Args:
        text: Base32 text (str, or ASCII bytes).

    Returns:
        The decoded bytes.

    Raises:
        InvalidBase32Character: If a character is neither in the alphabet
            nor ``=``.
        InputFormatNotRecognized: If text is neither str nor bytes.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("latin-1")
    elif not isinstance(text, str):
        raise InputFormatNotRecognized(
            f"Unsupported base32 input type: {type(text).__name__}"
        )

    buffer = 0
    bits = 0
    out = bytearray()
    for position, char in enumerate(text):
        value = _LOOKUP.get(char)
        if value is None:
            if char == PAD:
                continue
            raise InvalidBase32Character(char, position)
        buffer = ((buffer << 5) | value) & 0xFFF
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
    return bytes(out)
