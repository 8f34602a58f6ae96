"""Conversion between caller claims types and JSON-compatible mappings."""

from collections.abc import Mapping
from datetime import datetime
from functools import lru_cache
from typing import Any, TypeVar

import pydantic_core
from pydantic import BaseModel, TypeAdapter, ValidationError

from jwtkit.core.errors import InvalidClaimsFormatError

ClaimsT = TypeVar("ClaimsT")

TIME_CLAIMS = ("exp", "nbf", "iat")

ClaimsMapping = dict[str, Any]


@lru_cache(maxsize=128)
def _adapter(claims_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(claims_type)


def claims_to_mapping(claims: object) -> ClaimsMapping:
    """Convert a claims object into a string-keyed mapping.

    Pydantic models drop ``None`` fields. ``datetime`` values in the
    registered time claims become integer Unix seconds.
    """
    try:
        if isinstance(claims, Mapping):
            mapping: object = dict(claims)
        elif isinstance(claims, BaseModel):
            mapping = claims.model_dump(by_alias=True, exclude_none=True)
        else:
            mapping = _adapter(type(claims)).dump_python(claims, by_alias=True)
    except (pydantic_core.PydanticSerializationError, TypeError) as exc:
        raise InvalidClaimsFormatError(f"Cannot convert claims: {exc}") from exc

    if not isinstance(mapping, dict) or not all(isinstance(k, str) for k in mapping):
        raise InvalidClaimsFormatError("Claims must convert to a string-keyed mapping")

    for name in TIME_CLAIMS:
        value = mapping.get(name)
        if isinstance(value, datetime):
            mapping[name] = int(value.timestamp())
    return mapping


def claims_to_json(claims: object) -> bytes:
    """Serialize claims to JSON text."""
    mapping = claims_to_mapping(claims)
    try:
        return pydantic_core.to_json(mapping)
    except pydantic_core.PydanticSerializationError as exc:
        raise InvalidClaimsFormatError(f"Claims are not JSON serializable: {exc}") from exc


def parse_claims_json(raw: bytes) -> ClaimsMapping:
    """Parse a payload segment into a claims mapping."""
    try:
        mapping = pydantic_core.from_json(raw)
    except ValueError as exc:
        raise InvalidClaimsFormatError(f"Claims are not valid JSON: {exc}") from exc
    if not isinstance(mapping, dict):
        raise InvalidClaimsFormatError("Claims must be a JSON object")
    return mapping


def mapping_to_claims(mapping: ClaimsMapping, claims_type: type[ClaimsT]) -> ClaimsT:
    """Validate a claims mapping into ``claims_type``."""
    try:
        return _adapter(claims_type).validate_python(mapping)
    except ValidationError as exc:
        raise InvalidClaimsFormatError(
            f"Claims do not match {getattr(claims_type, '__name__', claims_type)}: {exc}"
        ) from exc
