"""Supported signing algorithms and the capabilities each one requires."""

from enum import StrEnum
from typing import NamedTuple

from cryptography.hazmat.primitives import hashes

from jwtkit.core.errors import AlgorithmKeyMismatchError


class Algorithm(StrEnum):
    """JOSE ``alg`` values accepted by this library."""

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"
    PS256 = "PS256"
    PS384 = "PS384"
    PS512 = "PS512"


class KeyFamily(StrEnum):
    """Kind of key material a key handle carries."""

    HMAC = "hmac"
    RSA = "rsa"


class PaddingScheme(StrEnum):
    """Signature padding; HMAC has none."""

    NONE = "none"
    PKCS1V15 = "pkcs1v15"
    PSS = "pss"


class AlgorithmRequirements(NamedTuple):
    """Hash, key family, and padding fixed by an algorithm."""

    hash_function: type[hashes.HashAlgorithm]
    key_family: KeyFamily
    padding_scheme: PaddingScheme


_REQUIREMENTS: dict[Algorithm, AlgorithmRequirements] = {
    Algorithm.HS256: AlgorithmRequirements(hashes.SHA256, KeyFamily.HMAC, PaddingScheme.NONE),
    Algorithm.HS384: AlgorithmRequirements(hashes.SHA384, KeyFamily.HMAC, PaddingScheme.NONE),
    Algorithm.HS512: AlgorithmRequirements(hashes.SHA512, KeyFamily.HMAC, PaddingScheme.NONE),
    Algorithm.RS256: AlgorithmRequirements(hashes.SHA256, KeyFamily.RSA, PaddingScheme.PKCS1V15),
    Algorithm.RS384: AlgorithmRequirements(hashes.SHA384, KeyFamily.RSA, PaddingScheme.PKCS1V15),
    Algorithm.RS512: AlgorithmRequirements(hashes.SHA512, KeyFamily.RSA, PaddingScheme.PKCS1V15),
    Algorithm.PS256: AlgorithmRequirements(hashes.SHA256, KeyFamily.RSA, PaddingScheme.PSS),
    Algorithm.PS384: AlgorithmRequirements(hashes.SHA384, KeyFamily.RSA, PaddingScheme.PSS),
    Algorithm.PS512: AlgorithmRequirements(hashes.SHA512, KeyFamily.RSA, PaddingScheme.PSS),
}


def requirements_for(algorithm: Algorithm) -> AlgorithmRequirements:
    """Look up the hash, key family, and padding for an algorithm."""
    return _REQUIREMENTS[Algorithm(algorithm)]


def ensure_key_compatible(algorithm: Algorithm, family: KeyFamily) -> None:
    """Reject a key whose family cannot be used with ``algorithm``."""
    expected = requirements_for(algorithm).key_family
    if family != expected:
        raise AlgorithmKeyMismatchError(
            f"{algorithm.value} requires a {expected.value} key, got {family.value}"
        )
