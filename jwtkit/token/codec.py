"""Unpadded base64url encoding used by every token segment."""

import base64
import binascii
import re

from jwtkit.core.errors import MalformedBase64Error

_BASE64URL = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def b64url_encode(data: bytes) -> str:
    """Encode bytes as base64url text with the padding stripped."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(data: str | bytes) -> bytes:
    """Decode base64url text; trailing padding is accepted but not needed."""
    if isinstance(data, bytes):
        try:
            data = data.decode("ascii")
        except UnicodeDecodeError as exc:
            raise MalformedBase64Error("Segment contains non-ASCII bytes") from exc
    if not _BASE64URL.fullmatch(data):
        raise MalformedBase64Error("Segment contains invalid base64url characters")
    stripped = data.rstrip("=")
    if len(stripped) % 4 == 1:
        raise MalformedBase64Error("Segment length cannot encode whole bytes")
    try:
        return base64.urlsafe_b64decode(stripped + "=" * (-len(stripped) % 4))
    except binascii.Error as exc:
        raise MalformedBase64Error(str(exc)) from exc


def int_to_b64url(value: int) -> str:
    """Encode a non-negative integer big-endian, as JWK RSA parameters are."""
    byte_length = max(1, (value.bit_length() + 7) // 8)
    return b64url_encode(value.to_bytes(byte_length, byteorder="big"))


def b64url_to_int(data: str) -> int:
    """Decode a base64url big-endian integer."""
    raw = b64url_decode(data)
    if not raw:
        raise MalformedBase64Error("Integer parameter is empty")
    return int.from_bytes(raw, byteorder="big")
