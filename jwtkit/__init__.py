"""Encode, decode, and validate JSON Web Tokens."""

from jwtkit.core.errors import (
    AlgorithmKeyMismatchError,
    AlgorithmNotAllowedError,
    ClaimValidationError,
    ExpiredTokenError,
    ImmatureTokenError,
    InvalidAudienceError,
    InvalidClaimsFormatError,
    InvalidIssuerError,
    InvalidKeyError,
    InvalidSignatureError,
    InvalidSubjectError,
    JWTError,
    MalformedBase64Error,
    MalformedTokenError,
    MissingRequiredClaimError,
    SigningFailedError,
)
from jwtkit.crypto.keys import DecodingKey, EncodingKey
from jwtkit.jwk.types import Jwk, JwkSet, OctetJwk, OtherJwk, RsaJwk
from jwtkit.token.algorithms import Algorithm
from jwtkit.token.decoding import (
    TokenData,
    dangerous_insecure_decode,
    dangerous_insecure_decode_with_validation,
    decode,
    decode_header,
)
from jwtkit.token.encoding import encode
from jwtkit.token.header import Header
from jwtkit.token.validation import Validation

__all__ = [
    "Algorithm",
    "AlgorithmKeyMismatchError",
    "AlgorithmNotAllowedError",
    "ClaimValidationError",
    "DecodingKey",
    "EncodingKey",
    "ExpiredTokenError",
    "Header",
    "ImmatureTokenError",
    "InvalidAudienceError",
    "InvalidClaimsFormatError",
    "InvalidIssuerError",
    "InvalidKeyError",
    "InvalidSignatureError",
    "InvalidSubjectError",
    "JWTError",
    "Jwk",
    "JwkSet",
    "MalformedBase64Error",
    "MalformedTokenError",
    "MissingRequiredClaimError",
    "OctetJwk",
    "OtherJwk",
    "RsaJwk",
    "SigningFailedError",
    "TokenData",
    "Validation",
    "dangerous_insecure_decode",
    "dangerous_insecure_decode_with_validation",
    "decode",
    "decode_header",
    "encode",
]
