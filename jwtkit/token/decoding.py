"""Parsing, signature verification, and validation of compact tokens."""

import logging
from typing import Any, Generic, NamedTuple

from pydantic import BaseModel, ConfigDict, ValidationError

from jwtkit.core.errors import (
    AlgorithmNotAllowedError,
    InvalidSignatureError,
    JWTError,
    MalformedTokenError,
)
from jwtkit.crypto.keys import DecodingKey
from jwtkit.crypto.signing import Verifier, default_backend
from jwtkit.token.algorithms import ensure_key_compatible
from jwtkit.token.claims import (
    ClaimsMapping,
    ClaimsT,
    mapping_to_claims,
    parse_claims_json,
)
from jwtkit.token.codec import b64url_decode
from jwtkit.token.encoding import signing_input
from jwtkit.token.header import Header
from jwtkit.token.validation import Validation, validate

logger = logging.getLogger(__name__)

DEFAULT_CLAIMS_TYPE = dict[str, Any]


class TokenData(BaseModel, Generic[ClaimsT]):
    """A decoded token: its header and its claims."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    header: Header
    claims: ClaimsT


class _Segments(NamedTuple):
    header: str
    payload: str
    signature: str


def _split(token: str) -> _Segments:
    if not isinstance(token, str):
        raise MalformedTokenError("Token must be a string")
    parts = token.split(".")
    if len(parts) != 3 or not all(parts):
        raise MalformedTokenError("Token must have three non-empty segments")
    return _Segments(*parts)


def _parse_header(segment: str) -> Header:
    raw = b64url_decode(segment)
    try:
        return Header.model_validate_json(raw)
    except ValidationError as exc:
        raise MalformedTokenError(f"Token header is invalid: {exc}") from exc


def _parse_claims(segment: str, claims_type: Any) -> tuple[ClaimsMapping, Any]:
    mapping = parse_claims_json(b64url_decode(segment))
    return mapping, mapping_to_claims(mapping, claims_type)


def _check_allowed(header: Header, validation: Validation) -> None:
    if header.alg not in validation.algorithms:
        raise AlgorithmNotAllowedError(f"Algorithm {header.alg.value} is not allowed")


def decode_header(token: str) -> Header:
    """Parse the header without checking the signature or the claims.

    Use it to pick a key (for example by ``kid``) before calling
    :func:`decode`.
    """
    return _parse_header(_split(token).header)


def decode(
    token: str,
    key: DecodingKey,
    validation: Validation,
    *,
    claims_type: Any = DEFAULT_CLAIMS_TYPE,
    now: int | None = None,
    verifier: Verifier = default_backend,
) -> TokenData[Any]:
    """Verify and validate ``token``, returning its header and claims."""
    header: Header | None = None
    try:
        segments = _split(token)
        header = _parse_header(segments.header)
        _check_allowed(header, validation)
        ensure_key_compatible(header.alg, key.family)

        # the payload must be base64url before its text can be signing input
        b64url_decode(segments.payload)
        message = signing_input(segments.header, segments.payload)
        signature = b64url_decode(segments.signature)
        try:
            verified = verifier.verify(header.alg, message, signature, key)
        except Exception as exc:
            raise InvalidSignatureError("Signature could not be verified") from exc
        if not verified:
            raise InvalidSignatureError("Signature verification failed")

        mapping, claims = _parse_claims(segments.payload, claims_type)
        validate(mapping, validation, now=now)
    except JWTError as exc:
        alg = header.alg.value if header is not None else "unparsed"
        logger.debug("Rejected token: %s (alg=%s)", type(exc).__name__, alg)
        raise
    return TokenData(header=header, claims=claims)


def dangerous_insecure_decode(
    token: str, *, claims_type: Any = DEFAULT_CLAIMS_TYPE
) -> TokenData[Any]:
    """Decode a token WITHOUT verifying its signature or its claims."""
    segments = _split(token)
    header = _parse_header(segments.header)
    _, claims = _parse_claims(segments.payload, claims_type)
    return TokenData(header=header, claims=claims)


def dangerous_insecure_decode_with_validation(
    token: str,
    validation: Validation,
    *,
    claims_type: Any = DEFAULT_CLAIMS_TYPE,
    now: int | None = None,
) -> TokenData[Any]:
    """Decode and validate claims WITHOUT verifying the signature."""
    segments = _split(token)
    header = _parse_header(segments.header)
    _check_allowed(header, validation)
    mapping, claims = _parse_claims(segments.payload, claims_type)
    validate(mapping, validation, now=now)
    return TokenData(header=header, claims=claims)
