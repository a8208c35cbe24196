from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from bhashaconnect.models.enums import Role


SELF_ASSIGNABLE_ROLES = (Role.entrepreneur, Role.jobseeker)


def _validate_email_like(v: str) -> str:
    value = (v or "").strip()
    if "@" not in value:
        raise ValueError("email must contain '@'")
    left, right = value.split("@", 1)
    if not left or not right:
        raise ValueError("email must have text before and after '@'")
    return value.lower()


class UserCreate(BaseModel):
    name: str
    email: str
    password: str
    role: Role = Role.jobseeker

    @field_validator("name")
    @classmethod
    def _validate_name(cls, v: str) -> str:
        value = (v or "").strip()
        if len(value) < 2:
            raise ValueError("name must be at least 2 characters long")
        return value

    @field_validator("email")
    @classmethod
    def _validate_email(cls, v: str) -> str:
        return _validate_email_like(v)

    @field_validator("password")
    @classmethod
    def _validate_password(cls, v: str) -> str:
        if len(v or "") < 6:
            raise ValueError("password must be at least 6 characters long")
        return v

    @field_validator("role")
    @classmethod
    def _validate_role(cls, v: Role) -> Role:
        if v not in SELF_ASSIGNABLE_ROLES:
            raise ValueError("role must be one of [entrepreneur, jobseeker]")
        return v


class UserLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _validate_email(cls, v: str) -> str:
        return _validate_email_like(v)


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    role: Role
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserItem(BaseModel):
    user: UserRead


class Token(BaseModel):
    access_token: str
    token_type: str
    user: UserRead


class TokenData(BaseModel):
    user_id: int
