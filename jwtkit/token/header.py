"""JOSE header model."""

from pydantic import BaseModel, ConfigDict, Field

from jwtkit.jwk.types import Jwk
from jwtkit.token.algorithms import Algorithm


class Header(BaseModel):
    """JOSE header; ``alg`` is the only field used for dispatch."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    alg: Algorithm = Algorithm.HS256
    typ: str | None = "JWT"
    cty: str | None = None
    jku: str | None = None
    jwk: Jwk | None = None
    kid: str | None = None
    x5u: str | None = None
    x5c: list[str] | None = None
    x5t: str | None = None
    x5t_s256: str | None = Field(default=None, alias="x5t#S256")
    crit: frozenset[str] | None = None

    @classmethod
    def for_algorithm(cls, alg: Algorithm, **fields: object) -> "Header":
        """Build a header for ``alg`` with the default ``typ``."""
        return cls(alg=alg, **fields)

    def to_json(self) -> bytes:
        """Serialize to compact JSON, omitting unset fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode()
