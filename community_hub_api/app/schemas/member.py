"""
Pydantic models for community members.

``Member`` is the record held by the member directory.  ``MemberRead``
is what the API returns: the profile plus derived presence
(``is_online``/``last_seen``).  Presence is computed from
``last_active`` against the directory clock, never stored.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .common import CamelModel


class MemberProfile(CamelModel):
    name: str = Field(..., examples=["Marcus"])
    age: int = Field(..., ge=0, examples=[28])
    location: str = Field(..., examples=["South London"])
    # Tags are a set; duplicates collapse but first-seen order is kept
    # so shared interests read naturally.
    interests: List[str] = Field(default_factory=list)
    # Ordered by provenance, not importance.
    contributions: List[str] = Field(default_factory=list)
    bio: str = ""
    looking_for: str = ""
    member_since: date
    profile_pic: Optional[str] = None

    @field_validator("interests")
    @classmethod
    def collapse_duplicate_interests(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v))


class Member(MemberProfile):
    """A member as stored in the directory."""

    id: str
    last_active: datetime


class MemberRead(MemberProfile):
    """A member as returned by the directory listing."""

    id: str
    is_online: bool
    last_seen: datetime


class ActiveMembers(CamelModel):
    total_members: int
    online_now: int
    members: List[MemberRead]
