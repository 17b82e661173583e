"""Command line entry point that prints a signed test token.

Usage:
  devjwt /claims.json --root tests/resources --claim iss=https://issuer.test
  DEVJWT_RESOURCE_ROOT=src/test/resources devjwt /Token1.json --claim groups='["admin"]'
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import json5
import structlog
from pydantic import ValidationError

from devjwt.core.errors import TokenIssueError
from devjwt.core.logging import configure_logging
from devjwt.core.settings import IssuerSettings
from devjwt.issuer import TokenIssuer

logger = structlog.get_logger(__name__)


def parse_claim(raw: str) -> tuple[str, Any]:
    """Split NAME=VALUE; VALUE is read as a JSON5 literal, else kept as text."""
    name, sep, value = raw.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {raw!r}")
    try:
        return name, json5.loads(value)
    except ValueError:
        return name, value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="devjwt",
        description="Issue an RS256-signed JWT from a claims resource.",
    )
    ap.add_argument("claims", help="claims resource name, e.g. /Token1.json")
    ap.add_argument("--key", help="PEM private key resource name")
    ap.add_argument("--kid", help="key id header (defaults to the key resource)")
    ap.add_argument("--root", type=Path, help="resource root directory")
    ap.add_argument(
        "--claim",
        action="append",
        type=parse_claim,
        default=[],
        metavar="NAME=VALUE",
        help="additional claim overriding the document; repeatable",
    )
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides: dict[str, Any] = {}
    if args.root is not None:
        overrides["resource_root"] = args.root
    if args.key is not None:
        overrides["default_key_resource"] = args.key
    try:
        settings = IssuerSettings(**overrides)
    except ValidationError as exc:
        print(f"error: invalid settings: {exc}", file=sys.stderr)
        return 2
    configure_logging(settings.log_level, settings.log_json)

    issuer = TokenIssuer.from_settings(settings)
    additional_claims = dict(args.claim)
    try:
        if args.kid is None:
            token = issuer.generate_token_string(args.claims, additional_claims)
        else:
            key = issuer.read_private_key(settings.default_key_resource)
            token = issuer.generate_token_string_with_key(
                key, args.kid, args.claims, additional_claims
            )
    except TokenIssueError as exc:
        logger.error("token_issue_failed", error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
