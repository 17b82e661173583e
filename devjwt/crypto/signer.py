"""RS256 signing of claim sets into compact JWS strings."""

import json
from collections.abc import Mapping
from typing import Any

import jwt
import structlog
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from pydantic import ValidationError

from devjwt.core.errors import ClaimsError, SigningError
from devjwt.crypto.types import RegisteredClaims, TokenHeader

logger = structlog.get_logger(__name__)

MIN_RSA_KEY_SIZE = 2048


def build_header(kid: str) -> TokenHeader:
    """Build the RS256 / JWT header carrying the caller's key id."""
    try:
        return TokenHeader(kid=kid)
    except ValidationError as exc:
        raise SigningError(f"Invalid key id for the token header: {exc}") from exc


def build_payload(claims: Mapping[str, Any]) -> dict[str, Any]:
    """Check the claim set and return a plain dict ready for encoding."""
    payload = dict(claims)
    try:
        json.dumps(payload, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise ClaimsError(f"Claim set is not JSON serializable: {exc}") from exc
    try:
        RegisteredClaims.model_validate(payload)
    except ValidationError as exc:
        raise ClaimsError(f"Invalid registered claim: {exc}") from exc
    return payload


def check_signing_key(private_key: object) -> RSAPrivateKey:
    """Ensure the key can produce an RS256 signature."""
    if not isinstance(private_key, RSAPrivateKey):
        raise SigningError(
            f"RS256 requires an RSA private key, got {type(private_key).__name__}"
        )
    if private_key.key_size < MIN_RSA_KEY_SIZE:
        raise SigningError(
            f"The RSA key size must be at least {MIN_RSA_KEY_SIZE} bits, "
            f"got {private_key.key_size}"
        )
    return private_key


def sign_token(private_key: RSAPrivateKey, kid: str, claims: Mapping[str, Any]) -> str:
    """Create a compact RS256-signed JWT from a final claim set."""
    header = build_header(kid)
    payload = build_payload(claims)
    key = check_signing_key(private_key)
    try:
        token = jwt.encode(
            payload,
            key,
            algorithm=header.alg,
            headers=header.model_dump(),
        )
    except (jwt.PyJWTError, TypeError, ValueError) as exc:
        raise SigningError(f"Failed to sign token: {exc}") from exc
    logger.debug("token_signed", kid=kid, claims=sorted(payload))
    return token
