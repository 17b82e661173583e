"""Shared test fixtures for devjwt."""

import shutil
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from devjwt.resources.loader import ResourceLoader

RESOURCES_DIR = Path(__file__).parent / "resources"


def to_pkcs8_pem(key: rsa.RSAPrivateKey | ec.EllipticCurvePrivateKey) -> str:
    """Serialize a private key as unencrypted PKCS#8 PEM."""
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of settings."""
    for name in (
        "DEVJWT_RESOURCE_ROOT",
        "DEVJWT_DEFAULT_KEY_RESOURCE",
        "DEVJWT_LOG_LEVEL",
        "DEVJWT_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def rsa_key() -> RSAPrivateKey:
    """A 2048-bit RSA key shared by the whole session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_pem(rsa_key: RSAPrivateKey) -> str:
    return to_pkcs8_pem(rsa_key)


@pytest.fixture
def resource_root(tmp_path: Path, rsa_pem: str) -> Path:
    """A resource directory holding the claim fixtures and privateKey.pem."""
    root = tmp_path / "resources"
    shutil.copytree(RESOURCES_DIR, root)
    (root / "privateKey.pem").write_text(rsa_pem)
    return root


@pytest.fixture
def loader(resource_root: Path) -> ResourceLoader:
    return ResourceLoader(resource_root)
