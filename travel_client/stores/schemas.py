"""
Schemas for session state.

Pydantic models for the user profile and the auth responses the session
store consumes. Field aliases follow the backend's camelCase wire names.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Profile(BaseModel):
    """
    User attributes held by the session.

    After register/login this is a minimal stub (id, email, status);
    profile setup or fetch replaces it with the full detail.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    user_id: Optional[int] = Field(default=None, alias="userId")
    email: Optional[str] = Field(default=None)
    status: Optional[str] = Field(default=None)
    language: Optional[str] = Field(default=None)
    location: Optional[str] = Field(default=None, description="Home location")
    age_range: Optional[str] = Field(default=None, alias="ageRange")
    travel_style: Optional[str] = Field(
        default=None, alias="travelStyle", description="Preferred travel style"
    )
    interests: Optional[List[str]] = Field(default=None)
    budget_preference: Optional[int] = Field(default=None, alias="budgetPreference")

    @property
    def is_complete(self) -> bool:
        """Location and travel style are what gate the profiled state."""
        return self.location is not None and self.travel_style is not None


class AuthResponse(BaseModel):
    """Payload returned by /auth/register and /auth/login."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    user_id: int = Field(alias="userId")
    token: str = Field(description="Bearer token for subsequent calls")
    email: Optional[str] = Field(default=None)
    status: Optional[str] = Field(default=None)
    has_profile: bool = Field(default=False, alias="hasProfile")

    def profile_stub(self) -> Profile:
        return Profile(user_id=self.user_id, email=self.email, status=self.status)


class Session(BaseModel):
    """Snapshot of the session store."""

    token: str = ""
    user_id: Optional[int] = None
    profile: Optional[Profile] = None
