"""Waitlist entry entity."""

from datetime import datetime

from pydantic import Field

from dealort.domain.model.common import DomainModel, utcnow
from dealort.domain.value import Email, WaitlistEntryId


class WaitlistEntry(DomainModel):
    id: WaitlistEntryId
    name: str = Field(min_length=1, max_length=200)
    email: Email
    ip_address: str = ""
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
