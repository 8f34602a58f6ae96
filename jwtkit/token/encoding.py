"""Compact JWS serialization of a header and claims."""

import logging

from jwtkit.core.errors import SigningFailedError
from jwtkit.crypto.keys import EncodingKey
from jwtkit.crypto.signing import Signer, default_backend
from jwtkit.token.algorithms import ensure_key_compatible
from jwtkit.token.claims import claims_to_json
from jwtkit.token.codec import b64url_encode
from jwtkit.token.header import Header

logger = logging.getLogger(__name__)


def signing_input(header_segment: str, payload_segment: str) -> bytes:
    """Bytes covered by the signature: ``header.payload`` in ASCII."""
    return f"{header_segment}.{payload_segment}".encode("ascii")


def encode(
    header: Header,
    claims: object,
    key: EncodingKey,
    *,
    signer: Signer = default_backend,
) -> str:
    """Sign ``claims`` under ``header`` and return ``header.payload.signature``."""
    ensure_key_compatible(header.alg, key.family)

    header_segment = b64url_encode(header.to_json())
    payload_segment = b64url_encode(claims_to_json(claims))
    message = signing_input(header_segment, payload_segment)

    try:
        signature = signer.sign(header.alg, message, key)
    except Exception as exc:
        logger.warning("Signer failed for %s: %s", header.alg.value, type(exc).__name__)
        raise SigningFailedError(f"Could not sign token with {header.alg.value}") from exc

    return f"{header_segment}.{payload_segment}.{b64url_encode(signature)}"
