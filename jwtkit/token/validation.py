"""Validation options and the registered-claims check pipeline."""

import math
import time
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, NonNegativeInt

from jwtkit.core.errors import (
    ExpiredTokenError,
    ImmatureTokenError,
    InvalidAudienceError,
    InvalidIssuerError,
    InvalidSubjectError,
    MissingRequiredClaimError,
)
from jwtkit.token.algorithms import Algorithm


class Validation(BaseModel):
    """Options controlling which tokens ``decode`` accepts.

    An empty ``algorithms`` set accepts no token at all.
    """

    model_config = ConfigDict(frozen=True)

    algorithms: frozenset[Algorithm]
    leeway: NonNegativeInt = 0
    validate_exp: bool = True
    validate_nbf: bool = False
    iss: frozenset[str] | None = None
    aud: frozenset[str] | None = None
    sub: str | None = None
    required_spec_claims: frozenset[str] = frozenset()

    @classmethod
    def for_algorithm(cls, algorithm: Algorithm, **options: Any) -> "Validation":
        """Accept only ``algorithm``, with default time checks."""
        return cls(algorithms=frozenset({algorithm}), **options)


def _timestamp(value: object) -> int | None:
    """Return an integer timestamp, or None for non-numeric or non-finite values."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)


def _audiences(value: object) -> set[str]:
    if isinstance(value, str):
        return {value}
    if isinstance(value, list):
        return {v for v in value if isinstance(v, str)}
    return set()


def validate(
    claims: Mapping[str, Any],
    validation: Validation,
    *,
    now: int | None = None,
) -> None:
    """Check registered claims, raising the first failure in a fixed order.

    Order: required presence, ``exp``, ``nbf``, ``iss``, ``aud``, ``sub``.
    ``now`` defaults to the wall clock read at call time.
    """
    current = int(time.time()) if now is None else int(now)

    for name in sorted(validation.required_spec_claims):
        if name not in claims:
            raise MissingRequiredClaimError(name)

    if validation.validate_exp:
        if "exp" not in claims:
            raise MissingRequiredClaimError("exp")
        exp = _timestamp(claims["exp"])
        if exp is None or exp < current - validation.leeway:
            raise ExpiredTokenError("Token has expired")

    if validation.validate_nbf and "nbf" in claims:
        nbf = _timestamp(claims["nbf"])
        if nbf is None or nbf > current + validation.leeway:
            raise ImmatureTokenError("Token is not yet valid")

    if validation.iss is not None:
        iss = claims.get("iss")
        if not isinstance(iss, str) or iss not in validation.iss:
            raise InvalidIssuerError("Token issuer is not accepted")

    if validation.aud is not None:
        if not _audiences(claims.get("aud")) & validation.aud:
            raise InvalidAudienceError("Token audience is not accepted")

    if validation.sub is not None and claims.get("sub") != validation.sub:
        raise InvalidSubjectError("Token subject does not match")
