"""End-to-end tests: PEM resource and claims document to a verified token."""

import base64
import json
import time
from pathlib import Path

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from devjwt.issuer import TokenIssuer
from devjwt.resources.loader import ResourceLoader


@pytest.fixture
def alice_resource(resource_root: Path) -> str:
    (resource_root / "alice.json").write_text('{"sub":"alice","groups":["user"]}')
    return "/alice.json"


@pytest.fixture
def token(loader: ResourceLoader, alice_resource: str) -> str:
    return TokenIssuer(loader).generate_token_string(
        alice_resource, {"iss": "https://issuer.test"}
    )


def test_token_header_and_payload(token: str, rsa_key: RSAPrivateKey) -> None:
    now = int(time.time())
    assert len(token.split(".")) == 3
    assert jwt.get_unverified_header(token)["alg"] == "RS256"

    claims = jwt.decode(
        token,
        rsa_key.public_key(),
        algorithms=["RS256"],
        issuer="https://issuer.test",
    )
    assert claims["sub"] == "alice"
    assert claims["iss"] == "https://issuer.test"
    assert claims["groups"] == ["user"]
    assert abs(claims["iat"] - now) <= 1
    assert claims["auth_time"] == claims["iat"]
    assert claims["exp"] == claims["iat"] + 300


def test_tampered_payload_fails_verification(
    token: str, rsa_key: RSAPrivateKey
) -> None:
    header, payload, signature = token.split(".")
    raw = base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4))
    tampered = json.loads(raw)
    tampered["sub"] = "mallory"
    forged = base64.urlsafe_b64encode(
        json.dumps(tampered, separators=(",", ":")).encode()
    ).rstrip(b"=")
    forged_token = ".".join([header, forged.decode(), signature])

    with pytest.raises(jwt.InvalidSignatureError):
        jwt.decode(forged_token, rsa_key.public_key(), algorithms=["RS256"])


def test_single_byte_change_fails_verification(
    token: str, rsa_key: RSAPrivateKey
) -> None:
    header, payload, signature = token.split(".")
    raw = bytearray(base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4)))
    index = raw.index(b"alice")
    raw[index] = ord("A")
    altered = base64.urlsafe_b64encode(bytes(raw)).rstrip(b"=").decode()

    with pytest.raises(jwt.InvalidSignatureError):
        jwt.decode(
            ".".join([header, altered, signature]),
            rsa_key.public_key(),
            algorithms=["RS256"],
        )
