"""Validation settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from jwtkit.token.algorithms import Algorithm
from jwtkit.token.validation import Validation

LEEWAY_DEFAULT = 0


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class ValidationSettings(BaseSettings):
    """Token acceptance policy, e.g. ``JWT_ALGORITHMS=RS256,PS256``."""

    model_config = SettingsConfigDict(env_prefix="JWT_")

    algorithms: str = "HS256"
    leeway: int = LEEWAY_DEFAULT
    validate_exp: bool = True
    validate_nbf: bool = False
    issuers: str = ""
    audiences: str = ""
    subject: str | None = None
    required_claims: str = ""

    def get_algorithm_list(self) -> list[Algorithm]:
        """Parse comma-separated algorithm names."""
        return [Algorithm(name) for name in _split_csv(self.algorithms)]

    def get_issuer_list(self) -> list[str]:
        """Parse comma-separated issuers."""
        return _split_csv(self.issuers)

    def get_audience_list(self) -> list[str]:
        """Parse comma-separated audiences."""
        return _split_csv(self.audiences)

    def to_validation(self) -> Validation:
        """Build the explicit ``Validation`` passed to ``decode``.

        Unset issuers or audiences disable that check.
        """
        issuers = self.get_issuer_list()
        audiences = self.get_audience_list()
        return Validation(
            algorithms=frozenset(self.get_algorithm_list()),
            leeway=self.leeway,
            validate_exp=self.validate_exp,
            validate_nbf=self.validate_nbf,
            iss=frozenset(issuers) if issuers else None,
            aud=frozenset(audiences) if audiences else None,
            sub=self.subject,
            required_spec_claims=frozenset(_split_csv(self.required_claims)),
        )
