# tests/helpers.py
from datetime import date, datetime, timedelta, timezone

from community_hub_api.app.schemas.member import Member

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def fixed_clock():
    return NOW


def make_member(member_id, **overrides):
    """Build a member with neutral defaults; override only what a test cares about."""
    fields = dict(
        id=member_id,
        name=member_id.title(),
        age=30,
        # Distinct per member so defaults never count as the same area
        location=f"Place {member_id}",
        interests=[],
        contributions=[],
        bio="",
        looking_for="",
        member_since=date(2024, 1, 1),
        last_active=NOW - timedelta(hours=1),
    )
    fields.update(overrides)
    return Member(**fields)
