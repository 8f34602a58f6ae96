"""JSON Web Key and Key Set data shapes (RFC 7517).

These models only describe the wire format. Turning a JWK into usable key
material is done by :meth:`jwtkit.crypto.keys.DecodingKey.from_jwk`.
"""

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

from jwtkit.token.algorithms import Algorithm


class PublicKeyUse(StrEnum):
    """Intended use of a public key."""

    SIGNATURE = "sig"
    ENCRYPTION = "enc"


class _JwkCommon(BaseModel):
    """Parameters shared by every key type."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    use: PublicKeyUse | None = None
    key_ops: list[str] | None = None
    alg: Algorithm | None = None
    kid: str | None = None
    x5u: str | None = None
    x5c: list[str] | None = None
    x5t: str | None = None
    x5t_s256: str | None = Field(default=None, alias="x5t#S256")


class RsaJwk(_JwkCommon):
    """RSA public key: base64url modulus and exponent."""

    kty: Literal["RSA"] = "RSA"
    n: str
    e: str


class OctetJwk(_JwkCommon):
    """Symmetric key: base64url secret."""

    kty: Literal["oct"] = "oct"
    k: str


class OtherJwk(_JwkCommon):
    """Key of a type this library cannot verify with (e.g. ``EC``).

    Kept so that mixed key sets still parse; its parameters stay as extras.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    kty: str
    alg: str | None = None  # type: ignore[assignment]


def _jwk_kind(value: Any) -> str:
    kty = value.get("kty") if isinstance(value, dict) else getattr(value, "kty", None)
    return kty if kty in ("RSA", "oct") else "other"


Jwk = Annotated[
    Annotated[RsaJwk, Tag("RSA")]
    | Annotated[OctetJwk, Tag("oct")]
    | Annotated[OtherJwk, Tag("other")],
    Discriminator(_jwk_kind),
]


class JwkSet(BaseModel):
    """JSON Web Key Set."""

    model_config = ConfigDict(frozen=True)

    keys: list[Jwk] = Field(default_factory=list)

    def find(self, kid: str) -> RsaJwk | OctetJwk | OtherJwk | None:
        """Return the first key with a matching ``kid``."""
        for key in self.keys:
            if key.kid == kid:
                return key
        return None
