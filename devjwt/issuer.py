"""Token issuance from named key and claims resources."""

from collections.abc import Mapping
from typing import Any

import structlog
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from devjwt.claims.builder import Clock, build_claims, current_time_in_secs
from devjwt.core.errors import DecodeError
from devjwt.core.settings import DEFAULT_KEY_RESOURCE, IssuerSettings
from devjwt.crypto.pem import decode_private_key
from devjwt.crypto.signer import sign_token
from devjwt.resources.loader import ResourceLoader

logger = structlog.get_logger(__name__)


class TokenIssuer:
    """Generates signed test tokens from claims resources."""

    def __init__(
        self,
        loader: ResourceLoader,
        now: Clock = current_time_in_secs,
        default_key_resource: str = DEFAULT_KEY_RESOURCE,
    ) -> None:
        self._loader = loader
        self._now = now
        self._default_key_resource = default_key_resource

    @classmethod
    def from_settings(cls, settings: IssuerSettings | None = None) -> "TokenIssuer":
        """Build an issuer from environment-driven settings."""
        settings = settings or IssuerSettings()
        return cls(
            ResourceLoader(settings.resource_root),
            default_key_resource=settings.default_key_resource,
        )

    def read_private_key(self, pem_res_name: str) -> RSAPrivateKey:
        """Read a PEM encoded private key resource and decode it."""
        content = self._loader.read(pem_res_name)
        try:
            pem = content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Key resource {pem_res_name} is not UTF-8") from exc
        return decode_private_key(pem)

    def generate_token_string(
        self,
        json_res_name: str,
        additional_claims: Mapping[str, Any] | None = None,
    ) -> str:
        """Sign the claims resource with the default key resource.

        The key resource name doubles as the ``kid`` header.
        """
        private_key = self.read_private_key(self._default_key_resource)
        return self.generate_token_string_with_key(
            private_key,
            self._default_key_resource,
            json_res_name,
            additional_claims,
        )

    def generate_token_string_with_key(
        self,
        private_key: RSAPrivateKey,
        kid: str,
        json_res_name: str,
        additional_claims: Mapping[str, Any] | None = None,
    ) -> str:
        """Sign the claims resource, merged with overrides, using private_key."""
        content = self._loader.read(json_res_name)
        claims = build_claims(content, additional_claims, now=self._now)
        token = sign_token(private_key, kid, claims)
        logger.info(
            "token_issued",
            kid=kid,
            claims_resource=json_res_name,
            claims=sorted(claims),
        )
        return token
