"""Auth Schemas: identity views and self-service profile edits.

Invariants:
    - IdentityResponse exposes external_id so clients can correlate with the provider
    - ProfileUpdate.display_name: 1-200 chars, stripped
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.core.entities import DISPLAY_NAME_MAX_LENGTH, Identity, ProfilePatch


class IdentityResponse(BaseModel):
    """Identity response: the caller's own record."""
    id: int
    external_id: str
    email: str | None
    display_name: str | None
    created_at: datetime | None

    @classmethod
    def from_entity(cls, identity: Identity) -> "IdentityResponse":
        return cls(
            id=identity.id,
            external_id=identity.external_id,
            email=identity.email,
            display_name=identity.display_name,
            created_at=identity.created_at,
        )


class ProfileUpdate(BaseModel):
    """Profile update: only display metadata is user-editable."""
    display_name: str | None = Field(
        None, min_length=1, max_length=DISPLAY_NAME_MAX_LENGTH,
    )

    @field_validator("display_name")
    @classmethod
    def strip_display_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("display_name cannot be empty or whitespace")
        return v

    def to_patch(self) -> ProfilePatch:
        return ProfilePatch(display_name=self.display_name)
