from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from shopfront.domain.users.entities import AccessToken, ByEmail, ByUsername, LoginIdentity


class LoginRequestDTO(BaseModel):
    """Exactly one of ``username`` or ``email``, plus a password."""

    username: str | None = Field(None, min_length=1, max_length=128)
    email: str | None = Field(None, min_length=1, max_length=256)
    password: str = Field(min_length=1, max_length=128)

    @model_validator(mode="after")
    def _exactly_one_identity(self) -> "LoginRequestDTO":
        if (self.username is None) == (self.email is None):
            raise ValueError("exactly one of username or email is required")
        return self

    def identity(self) -> LoginIdentity:
        if self.username is not None:
            return ByUsername(self.username)
        return ByEmail(self.email or "")


class AccessTokenDTO(BaseModel):
    access_token: str = Field(serialization_alias="accessToken")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_entity(cls, token: AccessToken) -> "AccessTokenDTO":
        return cls(access_token=token.token)

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
