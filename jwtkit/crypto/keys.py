"""Key handles for signing and verification, and RSA key helpers."""

import base64
import binascii

import uuid_utils
from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from jwtkit.core.errors import InvalidKeyError, MalformedBase64Error
from jwtkit.crypto.types import SigningKeyData
from jwtkit.jwk.types import OctetJwk, OtherJwk, PublicKeyUse, RsaJwk
from jwtkit.token.algorithms import Algorithm, KeyFamily
from jwtkit.token.codec import b64url_decode, b64url_to_int, int_to_b64url

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537

_KEY_LOAD_ERRORS = (ValueError, TypeError, UnsupportedAlgorithm)


def _to_bytes(value: str | bytes) -> bytes:
    return value.encode() if isinstance(value, str) else value


def _decode_standard_base64(secret: str) -> bytes:
    try:
        return base64.b64decode(secret, validate=True)
    except binascii.Error as exc:
        raise InvalidKeyError("Secret is not valid base64") from exc


def _require_rsa_private(key: object) -> RSAPrivateKey:
    if not isinstance(key, RSAPrivateKey):
        raise InvalidKeyError(f"Expected an RSA private key, got {type(key).__name__}")
    return key


def _require_rsa_public(key: object) -> RSAPublicKey:
    if isinstance(key, RSAPrivateKey):
        return key.public_key()
    if not isinstance(key, RSAPublicKey):
        raise InvalidKeyError(f"Expected an RSA public key, got {type(key).__name__}")
    return key


class EncodingKey:
    """Key used to sign tokens, tagged with its key family."""

    __slots__ = ("_family", "_material")

    def __init__(self, family: KeyFamily, material: bytes | RSAPrivateKey) -> None:
        self._family = family
        self._material = material

    @property
    def family(self) -> KeyFamily:
        return self._family

    @property
    def material(self) -> bytes | RSAPrivateKey:
        return self._material

    def __repr__(self) -> str:
        return f"EncodingKey(family={self._family.value})"

    @classmethod
    def from_hmac_secret(cls, secret: str | bytes) -> "EncodingKey":
        """Use raw secret bytes (or UTF-8 text) for the HS* algorithms."""
        return cls(KeyFamily.HMAC, _to_bytes(secret))

    @classmethod
    def from_base64_secret(cls, secret: str) -> "EncodingKey":
        """Use a standard-base64 encoded secret for the HS* algorithms."""
        return cls(KeyFamily.HMAC, _decode_standard_base64(secret))

    @classmethod
    def from_rsa(cls, private_key: RSAPrivateKey) -> "EncodingKey":
        """Wrap an already loaded RSA private key."""
        return cls(KeyFamily.RSA, _require_rsa_private(private_key))

    @classmethod
    def from_rsa_pem(
        cls, pem: str | bytes, password: bytes | None = None
    ) -> "EncodingKey":
        """Load a PKCS#1 or PKCS#8 PEM private key."""
        try:
            loaded = serialization.load_pem_private_key(_to_bytes(pem), password)
        except _KEY_LOAD_ERRORS as exc:
            raise InvalidKeyError(f"Cannot load RSA private key: {exc}") from exc
        return cls.from_rsa(_require_rsa_private(loaded))

    @classmethod
    def from_rsa_der(
        cls, der: bytes, password: bytes | None = None
    ) -> "EncodingKey":
        """Load a PKCS#1 or PKCS#8 DER private key."""
        try:
            loaded = serialization.load_der_private_key(der, password)
        except _KEY_LOAD_ERRORS as exc:
            raise InvalidKeyError(f"Cannot load RSA private key: {exc}") from exc
        return cls.from_rsa(_require_rsa_private(loaded))


class DecodingKey:
    """Key used to verify tokens, tagged with its key family."""

    __slots__ = ("_family", "_material")

    def __init__(self, family: KeyFamily, material: bytes | RSAPublicKey) -> None:
        self._family = family
        self._material = material

    @property
    def family(self) -> KeyFamily:
        return self._family

    @property
    def material(self) -> bytes | RSAPublicKey:
        return self._material

    def __repr__(self) -> str:
        return f"DecodingKey(family={self._family.value})"

    @classmethod
    def from_hmac_secret(cls, secret: str | bytes) -> "DecodingKey":
        """Use raw secret bytes (or UTF-8 text) for the HS* algorithms."""
        return cls(KeyFamily.HMAC, _to_bytes(secret))

    @classmethod
    def from_base64_secret(cls, secret: str) -> "DecodingKey":
        """Use a standard-base64 encoded secret for the HS* algorithms."""
        return cls(KeyFamily.HMAC, _decode_standard_base64(secret))

    @classmethod
    def from_rsa(cls, key: RSAPublicKey | RSAPrivateKey) -> "DecodingKey":
        """Wrap a loaded RSA key; private keys contribute their public half."""
        return cls(KeyFamily.RSA, _require_rsa_public(key))

    @classmethod
    def from_rsa_pem(cls, pem: str | bytes) -> "DecodingKey":
        """Load an RSA public key from a PEM public key or X.509 certificate."""
        data = _to_bytes(pem)
        try:
            if b"-----BEGIN CERTIFICATE-----" in data:
                loaded = x509.load_pem_x509_certificate(data).public_key()
            else:
                loaded = serialization.load_pem_public_key(data)
        except _KEY_LOAD_ERRORS as exc:
            raise InvalidKeyError(f"Cannot load RSA public key: {exc}") from exc
        return cls.from_rsa(_require_rsa_public(loaded))

    @classmethod
    def from_rsa_der(cls, der: bytes) -> "DecodingKey":
        """Load an RSA public key from DER (SubjectPublicKeyInfo or PKCS#1)."""
        try:
            loaded = serialization.load_der_public_key(der)
        except _KEY_LOAD_ERRORS as exc:
            raise InvalidKeyError(f"Cannot load RSA public key: {exc}") from exc
        return cls.from_rsa(_require_rsa_public(loaded))

    @classmethod
    def from_rsa_components(cls, n: str, e: str) -> "DecodingKey":
        """Build an RSA public key from base64url modulus and exponent."""
        try:
            numbers = rsa.RSAPublicNumbers(b64url_to_int(e), b64url_to_int(n))
            return cls(KeyFamily.RSA, numbers.public_key())
        except (MalformedBase64Error, ValueError) as exc:
            raise InvalidKeyError(f"Invalid RSA components: {exc}") from exc

    @classmethod
    def from_jwk(cls, jwk: RsaJwk | OctetJwk | OtherJwk) -> "DecodingKey":
        """Build a key from a parsed JWK."""
        if isinstance(jwk, RsaJwk):
            return cls.from_rsa_components(jwk.n, jwk.e)
        if not isinstance(jwk, OctetJwk):
            raise InvalidKeyError(f"Unsupported JWK key type: {jwk.kty}")
        try:
            return cls(KeyFamily.HMAC, b64url_decode(jwk.k))
        except MalformedBase64Error as exc:
            raise InvalidKeyError("JWK contained an invalid key value") from exc


def generate_rsa_keypair(key_size: int = RSA_KEY_SIZE) -> SigningKeyData:
    """Generate a new RSA keypair with a time-ordered key id."""
    private_key = rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=key_size,
    )
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )
    kid = str(uuid_utils.uuid7())
    return SigningKeyData(
        kid=kid, private_key_pem=private_pem, public_key_pem=public_pem
    )


def rsa_public_key_to_jwk(
    public_key_pem: str, kid: str, alg: Algorithm = Algorithm.RS256
) -> RsaJwk:
    """Convert a PEM public key to a signature-use JWK."""
    key = DecodingKey.from_rsa_pem(public_key_pem).material
    assert isinstance(key, RSAPublicKey)
    numbers = key.public_numbers()
    return RsaJwk(
        use=PublicKeyUse.SIGNATURE,
        alg=alg,
        kid=kid,
        n=int_to_b64url(numbers.n),
        e=int_to_b64url(numbers.e),
    )
