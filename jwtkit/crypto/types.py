"""Type definitions for generated signing key material."""

from pydantic import BaseModel


class SigningKeyData(BaseModel):
    """An RSA keypair for JWT signing, as PEM text."""

    kid: str
    private_key_pem: str
    public_key_pem: str
