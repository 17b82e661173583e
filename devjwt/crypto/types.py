"""Type definitions for the JWS header and registered JWT claims."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr

NumericDate = StrictInt | StrictFloat


class TokenHeader(BaseModel):
    """Protected JWS header of an issued token."""

    model_config = ConfigDict(frozen=True)

    alg: Literal["RS256"] = "RS256"
    typ: Literal["JWT"] = "JWT"
    kid: str


class RegisteredClaims(BaseModel):
    """Structural rules for the registered claim names of RFC 7519.

    Private claims pass through untouched.
    """

    model_config = ConfigDict(extra="allow", strict=True)

    iss: StrictStr | None = None
    sub: StrictStr | None = None
    aud: StrictStr | list[StrictStr] | None = None
    exp: NumericDate | None = None
    nbf: NumericDate | None = None
    iat: NumericDate | None = None
    jti: StrictStr | None = None
