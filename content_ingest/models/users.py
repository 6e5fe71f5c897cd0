"""User account schemas."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from content_ingest.models.common import FlexibleDatetime, RequiredStr

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
MIN_PASSWORD_LENGTH = 8


class SocialLinks(BaseModel):
    twitter: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None


class UserProfile(BaseModel):
    bio: Optional[str] = None
    avatar: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    phone_number: Optional[str] = None
    date_of_birth: Optional[FlexibleDatetime] = None
    interests: list[str] = Field(default_factory=list)
    social_links: Optional[SocialLinks] = None


class _EmailNormalizing(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    @field_validator("email", mode="before", check_fields=False)
    @classmethod
    def lowercase_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class UserCreate(_EmailNormalizing):
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    first_name: RequiredStr
    last_name: RequiredStr
    role: Literal["user", "admin"] = "user"
    profile: UserProfile = Field(default_factory=UserProfile)


class UserUpdate(_EmailNormalizing):
    email: Optional[str] = Field(default=None, pattern=EMAIL_PATTERN)
    password: Optional[str] = Field(default=None, min_length=MIN_PASSWORD_LENGTH)
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    role: Optional[Literal["user", "admin"]] = None
    profile: Optional[UserProfile] = None


class LoginRequest(_EmailNormalizing):
    email: str
    password: str
