"""Request/response schemas for auth endpoints and the authenticated identity."""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.user import Role, UserPublic


class Identity(BaseModel):
    """Authenticated caller (id, role) consumed by the authorization policy."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class AuthResponse(BaseModel):
    """Envelope returned by sign-up and sign-in."""

    message: str
    user: UserPublic
    access_token: str = Field(..., description="JWT access token (also set as a cookie)")
    token_type: str = Field(default="bearer", description="Token type")


class MessageResponse(BaseModel):
    message: str
