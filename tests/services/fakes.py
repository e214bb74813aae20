"""Test doubles for the identity verifier and the auth repository.

FakeVerifier: deterministic claims per token, records every verify() call.
InMemoryAuthRepository: enforces external_id uniqueness like the DB constraint and
yields to the event loop inside every method so concurrent callers interleave.
"""

import asyncio
from dataclasses import replace
from datetime import datetime, timedelta, timezone

from app.core.domain_types import IdentityId, SubjectId
from app.core.entities import Claims, Identity
from app.core.errors import (
    ConflictError, IdentityProviderError, ResourceNotFoundError, UnauthenticatedError,
)


def make_claims(
    subject: str, email: str | None = None, display_name: str | None = None,
) -> Claims:
    return Claims(
        subject_id=SubjectId(subject),
        email=email if email is not None else f"{subject}@example.com",
        expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
        display_name=display_name,
    )


class FakeVerifier:
    """Token → Claims lookup; unknown tokens are unauthenticated."""

    def __init__(self, tokens: dict[str, Claims] | None = None):
        self.tokens: dict[str, Claims] = dict(tokens or {})
        self.calls: list[str] = []
        self.provider_down = False

    def issue(self, token: str, subject: str, **kwargs) -> str:
        self.tokens[token] = make_claims(subject, **kwargs)
        return token

    async def verify(self, credential: str) -> Claims:
        self.calls.append(credential)
        if self.provider_down:
            raise IdentityProviderError("signing keys unavailable")
        claims = self.tokens.get(credential)
        if claims is None:
            raise UnauthenticatedError("Invalid or expired credential")
        return claims


class InMemoryAuthRepository:
    """AuthRepository with a uniqueness check and cooperative yield points."""

    def __init__(self):
        self.rows: dict[int, Identity] = {}
        self.create_calls = 0
        self.find_calls = 0
        self.update_calls = 0
        self._next_id = 1

    async def find_by_external_id(self, subject_id: SubjectId) -> Identity | None:
        self.find_calls += 1
        await asyncio.sleep(0)
        for identity in self.rows.values():
            if identity.external_id == subject_id:
                return identity
        return None

    async def create(self, identity: Identity) -> Identity:
        self.create_calls += 1
        await asyncio.sleep(0)
        if any(i.external_id == identity.external_id for i in self.rows.values()):
            raise ConflictError("Identity", identity.external_id)
        now = datetime.now(timezone.utc)
        stored = replace(
            identity, id=IdentityId(self._next_id), created_at=now, updated_at=now,
        )
        self.rows[stored.id] = stored
        self._next_id += 1
        return stored

    async def update(self, identity: Identity) -> Identity:
        self.update_calls += 1
        await asyncio.sleep(0)
        if identity.id not in self.rows:
            raise ResourceNotFoundError("Identity", str(identity.id))
        stored = replace(identity, updated_at=datetime.now(timezone.utc))
        self.rows[stored.id] = stored
        return stored

    @property
    def touched(self) -> bool:
        return bool(self.create_calls or self.find_calls or self.update_calls)
