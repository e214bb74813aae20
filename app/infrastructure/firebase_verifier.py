"""Firebase Token Verifier: turns a Firebase ID token into verified Claims.

Invariants:
    - Only RS256 accepted; iss must be https://securetoken.google.com/<project_id>
    - aud must equal project_id; sub, exp and iat are essential
    - Every verification failure (expired, malformed, unknown kid, bad signature)
      raises UnauthenticatedError: no partial trust
    - Failure to fetch the public key set raises IdentityProviderError (infrastructure)

Design Decisions:
    - joserfc over the Firebase Admin SDK: the core only needs signature and
      claim checks, and the verifier stays an async IdentityVerifier implementation
    - Public keys cached in a TTLCache: the key set is shared by every request;
      tokens themselves are never cached
    - httpx.AsyncClient injected or owned: tests pass a MockTransport-backed client
"""

import logging
from datetime import datetime, timezone
from typing import Any

import httpx
from joserfc import jwt
from joserfc.errors import JoseError
from joserfc.jwk import KeySet
from joserfc.jwt import JWTClaimsRegistry
from cachetools import TTLCache

from app.core.domain_types import SubjectId
from app.core.entities import Claims
from app.core.errors import IdentityProviderError, UnauthenticatedError

logger = logging.getLogger(__name__)

GOOGLE_JWKS_URL = (
    "https://www.googleapis.com/service_accounts/v1/jwk/"
    "securetoken@system.gserviceaccount.com"
)
ISSUER_PREFIX = "https://securetoken.google.com/"

ALGORITHMS = ["RS256"]

_JWKS_CACHE_KEY = "jwks"


class FirebaseTokenVerifier:
    """IdentityVerifier for Firebase Authentication ID tokens."""

    def __init__(
        self,
        project_id: str,
        jwks_url: str = GOOGLE_JWKS_URL,
        jwks_ttl_seconds: int = 3600,
        clock_skew_seconds: int = 60,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.project_id = project_id
        self.jwks_url = jwks_url
        self.clock_skew_seconds = clock_skew_seconds
        self._jwks_cache: TTLCache[str, dict[str, Any]] = TTLCache(
            maxsize=1, ttl=jwks_ttl_seconds,
        )
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=10.0)

    @property
    def issuer(self) -> str:
        return f"{ISSUER_PREFIX}{self.project_id}"

    async def verify(self, credential: str) -> Claims:
        """Verify signature and registered claims. Raises UnauthenticatedError."""
        if not credential:
            raise UnauthenticatedError("Missing credential")

        jwks = await self._fetch_jwks()
        try:
            key_set = KeySet.import_key_set(jwks)
        except (JoseError, ValueError) as exc:
            self._jwks_cache.pop(_JWKS_CACHE_KEY, None)
            raise IdentityProviderError("signing key set is malformed") from exc
        registry = JWTClaimsRegistry(
            leeway=self.clock_skew_seconds,
            iss={"essential": True, "value": self.issuer},
            aud={"essential": True, "value": self.project_id},
            sub={"essential": True},
            exp={"essential": True},
            iat={"essential": True},
        )
        try:
            token = jwt.decode(credential, key_set, algorithms=ALGORITHMS)
            registry.validate(token.claims)
        except (JoseError, ValueError) as exc:
            logger.info(f"Token rejected: {exc}")
            raise UnauthenticatedError("Invalid or expired credential") from exc

        claims = token.claims
        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject.strip():
            raise UnauthenticatedError("Credential has no subject")

        return Claims(
            subject_id=SubjectId(subject),
            email=claims.get("email"),
            expires_at=datetime.fromtimestamp(int(claims["exp"]), tz=timezone.utc),
            display_name=claims.get("name"),
        )

    async def _fetch_jwks(self) -> dict[str, Any]:
        """Return the provider key set, refreshing it when the cache entry expired."""
        jwks = self._jwks_cache.get(_JWKS_CACHE_KEY)
        if jwks is not None:
            return jwks
        try:
            response = await self._http.get(self.jwks_url)
            response.raise_for_status()
            jwks = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error(f"JWKS fetch failed: {exc}")
            raise IdentityProviderError("could not fetch signing keys") from exc
        if not isinstance(jwks, dict) or not jwks.get("keys"):
            raise IdentityProviderError("signing key set is empty")
        self._jwks_cache[_JWKS_CACHE_KEY] = jwks
        logger.info(f"Fetched {len(jwks['keys'])} signing keys")
        return jwks

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()
