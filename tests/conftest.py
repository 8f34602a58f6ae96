"""Shared test fixtures for jwtkit."""

import pytest

from jwtkit.crypto.keys import DecodingKey, EncodingKey, generate_rsa_keypair
from jwtkit.crypto.types import SigningKeyData

NOW = 1_700_000_000
HMAC_SECRET = b"a-test-secret-that-is-at-least-64-bytes-long-for-hs512-signing!!"


@pytest.fixture(scope="session")
def rsa_keypair() -> SigningKeyData:
    """One RSA keypair for the whole session; generation is slow."""
    return generate_rsa_keypair()


@pytest.fixture(scope="session")
def rsa_encoding_key(rsa_keypair: SigningKeyData) -> EncodingKey:
    return EncodingKey.from_rsa_pem(rsa_keypair.private_key_pem)


@pytest.fixture(scope="session")
def rsa_decoding_key(rsa_keypair: SigningKeyData) -> DecodingKey:
    return DecodingKey.from_rsa_pem(rsa_keypair.public_key_pem)


@pytest.fixture
def hmac_encoding_key() -> EncodingKey:
    return EncodingKey.from_hmac_secret(HMAC_SECRET)


@pytest.fixture
def hmac_decoding_key() -> DecodingKey:
    return DecodingKey.from_hmac_secret(HMAC_SECRET)


@pytest.fixture
def claims() -> dict[str, object]:
    """Claims valid at ``NOW``."""
    return {"sub": "b@b.com", "company": "ACME", "exp": NOW + 10_000}
