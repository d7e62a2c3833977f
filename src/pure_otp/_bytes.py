"""Input coercion shared by the codec and hash modules."""

from typing import Union

from pure_otp.errors import InputFormatNotRecognized

BytesLike = Union[str, bytes, bytearray, memoryview]

CHARSET = "utf-8"


def to_bytes(data: BytesLike, what: str = "input") -> bytes:
    """
    Convert text or a bytes-like object into immutable bytes.

    Text is encoded as UTF-8.

    Raises:
        InputFormatNotRecognized: If data is of any other type.
    """
    if isinstance(data, str):
        return data.encode(CHARSET)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise InputFormatNotRecognized(
        f"Unsupported {what} type: {type(data).__name__}"
    )
