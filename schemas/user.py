"""User collection schema."""

from pydantic import Field
from typing import Optional
from schemas.common import Document
from schemas.enums import Role


class User(Document):
    """User collection model."""
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    email: Optional[str] = Field(None, description="Contact email")
    role: Role = Field(Role.ATHLETE, description="athlete, coach or admin")
    is_active: bool = Field(True, description="Deactivated accounts cannot authenticate")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
