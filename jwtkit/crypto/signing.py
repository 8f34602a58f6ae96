"""Signature primitives behind the encoder and decoder.

``Signer`` and ``Verifier`` are the seams the token layer calls through.
``CryptographyBackend`` implements both with the ``cryptography`` package.
"""

from typing import Protocol

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.padding import AsymmetricPadding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from jwtkit.core.errors import MalformedBase64Error
from jwtkit.crypto.keys import DecodingKey, EncodingKey
from jwtkit.token.algorithms import (
    Algorithm,
    PaddingScheme,
    ensure_key_compatible,
    requirements_for,
)
from jwtkit.token.codec import b64url_decode, b64url_encode


class Signer(Protocol):
    """Produces a raw signature over a message."""

    def sign(self, algorithm: Algorithm, message: bytes, key: EncodingKey) -> bytes: ...


class Verifier(Protocol):
    """Checks a raw signature; malformed signatures are ``False``, not errors."""

    def verify(
        self,
        algorithm: Algorithm,
        message: bytes,
        signature: bytes,
        key: DecodingKey,
    ) -> bool: ...


def _rsa_padding(scheme: PaddingScheme, hash_alg: hashes.HashAlgorithm) -> AsymmetricPadding:
    if scheme is PaddingScheme.PSS:
        return padding.PSS(mgf=padding.MGF1(hash_alg), salt_length=hash_alg.digest_size)
    return padding.PKCS1v15()


class CryptographyBackend:
    """HMAC and RSA (PKCS#1 v1.5, PSS) signatures via ``cryptography``."""

    def sign(self, algorithm: Algorithm, message: bytes, key: EncodingKey) -> bytes:
        ensure_key_compatible(algorithm, key.family)
        req = requirements_for(algorithm)
        hash_alg = req.hash_function()
        material = key.material
        if isinstance(material, RSAPrivateKey):
            return material.sign(message, _rsa_padding(req.padding_scheme, hash_alg), hash_alg)
        mac = hmac.HMAC(material, hash_alg)
        mac.update(message)
        return mac.finalize()

    def verify(
        self,
        algorithm: Algorithm,
        message: bytes,
        signature: bytes,
        key: DecodingKey,
    ) -> bool:
        ensure_key_compatible(algorithm, key.family)
        req = requirements_for(algorithm)
        hash_alg = req.hash_function()
        material = key.material
        try:
            if isinstance(material, RSAPublicKey):
                material.verify(
                    signature,
                    message,
                    _rsa_padding(req.padding_scheme, hash_alg),
                    hash_alg,
                )
            else:
                mac = hmac.HMAC(material, hash_alg)
                mac.update(message)
                mac.verify(signature)
        except InvalidSignature:
            return False
        return True


default_backend = CryptographyBackend()


def sign(message: str | bytes, key: EncodingKey, algorithm: Algorithm) -> str:
    """Sign ``message`` and return the base64url signature."""
    if isinstance(message, str):
        message = message.encode()
    return b64url_encode(default_backend.sign(algorithm, message, key))


def verify(
    signature: str, message: str | bytes, key: DecodingKey, algorithm: Algorithm
) -> bool:
    """Check a base64url ``signature`` over ``message``."""
    if isinstance(message, str):
        message = message.encode()
    try:
        raw = b64url_decode(signature)
    except MalformedBase64Error:
        return False
    return default_backend.verify(algorithm, message, raw, key)
