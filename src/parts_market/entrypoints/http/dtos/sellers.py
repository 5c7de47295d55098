from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class UserResponseDTO(BaseModel):
    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    business_name: str | None = None
    seller_type: str | None = None
    location: str | None = None
    phone_number: str | None = None
    whatsapp_number: str | None = None
    is_verified: bool = False
    is_admin: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserWithStatsResponseDTO(UserResponseDTO):
    total_listings: int = Field(description="Active listings of the seller")
    average_rating: str = Field(
        description="Average rating as decimal string, '0.00' without ratings",
        examples=["4.50"],
    )
    total_ratings: int


class UpdateProfileDTO(BaseModel):
    """Partial update of the caller's own profile."""

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    profile_image_url: str | None = None
    business_name: str | None = Field(default=None, max_length=200)
    seller_type: Literal["private", "business"] | None = None
    location: str | None = Field(default=None, max_length=200, examples=["Westlands, Nairobi"])
    phone_number: str | None = Field(default=None, max_length=30)
    whatsapp_number: str | None = Field(default=None, max_length=30)


class SellerVerificationDTO(BaseModel):
    is_verified: bool


class IdentityClaimsDTO(BaseModel):
    """Claims of the signed-in identity, forwarded by the auth proxy."""

    email: str | None = Field(default=None, max_length=255, examples=["amina@example.com"])
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    profile_image_url: str | None = None
