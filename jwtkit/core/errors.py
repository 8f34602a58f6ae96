"""Error taxonomy for token encoding, decoding, and claim validation."""


class JWTError(Exception):
    """Base class for every error raised by jwtkit."""


class MalformedTokenError(JWTError):
    """Token is not three non-empty dot-separated segments or has a bad header."""


class MalformedBase64Error(MalformedTokenError):
    """A segment is not valid unpadded base64url."""


class InvalidClaimsFormatError(JWTError):
    """Claims cannot be converted to or from a string-keyed JSON mapping."""


class AlgorithmNotAllowedError(JWTError):
    """Token algorithm is outside the configured allow-list."""


class AlgorithmKeyMismatchError(JWTError):
    """Key family does not match the algorithm's signature family."""


class InvalidSignatureError(JWTError):
    """Signature does not verify against the signing input."""


class SigningFailedError(JWTError):
    """The signer could not produce a signature."""


class InvalidKeyError(JWTError):
    """Key material could not be loaded into a key handle."""


class ClaimValidationError(JWTError):
    """Base class for semantic claim check failures."""


class ExpiredTokenError(ClaimValidationError):
    """The exp claim is in the past (beyond leeway)."""


class ImmatureTokenError(ClaimValidationError):
    """The nbf claim is in the future (beyond leeway)."""


class InvalidIssuerError(ClaimValidationError):
    """The iss claim is missing or not an accepted issuer."""


class InvalidAudienceError(ClaimValidationError):
    """The aud claim shares no value with the accepted audiences."""


class InvalidSubjectError(ClaimValidationError):
    """The sub claim does not match the expected subject."""


class MissingRequiredClaimError(ClaimValidationError):
    """A claim required by the validation config is absent."""

    def __init__(self, claim: str) -> None:
        self.claim = claim
        super().__init__(f'Token is missing the "{claim}" claim')
