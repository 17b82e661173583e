"""Assembly of the final claim set from layered sources."""

import time
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

import json5
import structlog

from devjwt.core.errors import ParseError

logger = structlog.get_logger(__name__)

TOKEN_LIFETIME_SECS = 300

Clock = Callable[[], int]
ClaimSet = Mapping[str, Any]


def current_time_in_secs() -> int:
    """Return the current wall-clock time in whole seconds since the epoch."""
    return int(time.time())


def parse_claims_document(content: bytes) -> dict[str, Any]:
    """Parse a relaxed JSON (JSON5) claims document into a dict."""
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Claims document is not UTF-8: {exc}") from exc
    try:
        document = json5.loads(text)
    except (ValueError, RecursionError) as exc:
        raise ParseError(f"Malformed claims document: {exc}") from exc
    if not isinstance(document, dict):
        raise ParseError(
            f"Claims document must be a JSON object, got {type(document).__name__}"
        )
    return document


def timing_claims(now_secs: int) -> dict[str, int]:
    """Expiry, issued-at and auth-time claims for a token issued at now_secs."""
    return {
        "exp": now_secs + TOKEN_LIFETIME_SECS,
        "iat": now_secs,
        "auth_time": now_secs,
    }


def merge_claim_layers(*layers: Mapping[str, Any]) -> ClaimSet:
    """Merge layers in order into a new read-only mapping; later layers win."""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    return MappingProxyType(merged)


def build_claims(
    content: bytes,
    additional_claims: Mapping[str, Any] | None = None,
    now: Clock = current_time_in_secs,
) -> ClaimSet:
    """Build the claim set: base document, then timing claims, then overrides."""
    base = parse_claims_document(content)
    overrides = additional_claims or {}
    claims = merge_claim_layers(base, timing_claims(now()), overrides)
    logger.debug(
        "claims_built",
        base=len(base),
        overrides=sorted(overrides),
    )
    return claims
