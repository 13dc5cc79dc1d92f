"""User entity.

Users are created and authenticated by the external auth service. This API
reads them for author attribution and lets them update their avatar.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from dealort.domain.model.common import DomainModel, utcnow
from dealort.domain.value import UserId


class User(DomainModel):
    """A registered user."""

    id: UserId
    name: str
    username: Optional[str] = None
    display_username: Optional[str] = None
    email: str
    image: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
