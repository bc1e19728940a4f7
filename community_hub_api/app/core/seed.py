"""
Initial dataset loaded at application start.

There is no persistence: every process starts from these four members
and three hotseats.  Timestamps are computed relative to the clock
passed in, so seeded presence and start times stay meaningful whenever
the service starts (and are fixed in tests).
"""

from datetime import date, datetime, timedelta
from typing import List

from ..schemas.hotseat import HotseatSession, SessionStatus
from ..schemas.member import Member


def seed_members(now: datetime) -> List[Member]:
    return [
        Member(
            id="mem_001",
            name="Marcus",
            age=28,
            location="South London",
            interests=["activism", "music", "community organizing"],
            profile_pic="🎤",
            bio="Community organizer passionate about liberation through arts",
            member_since=date(2024, 1, 15),
            contributions=["Organized 3 community events", "Led storytelling workshop"],
            looking_for="Community connections and collaboration opportunities",
            last_active=now - timedelta(minutes=2),
        ),
        Member(
            id="mem_002",
            name="Jordan",
            age=32,
            location="Birmingham",
            interests=["tech", "education", "mental health"],
            profile_pic="💻",
            bio="Tech worker building tools for community empowerment",
            member_since=date(2024, 2, 20),
            contributions=["Built member directory app", "Mentored 5 young developers"],
            looking_for="Technical collaborators and mentorship opportunities",
            last_active=now - timedelta(minutes=9),
        ),
        Member(
            id="mem_003",
            name="Kai",
            age=25,
            location="Manchester",
            interests=["writing", "poetry", "social justice"],
            profile_pic="✍️",
            bio="Writer and poet documenting our liberation journey",
            member_since=date(2024, 3, 10),
            contributions=["Published 12 liberation stories", "Hosted 2 poetry nights"],
            looking_for="Creative collaborators and storytelling partners",
            last_active=now - timedelta(minutes=47),
        ),
        Member(
            id="mem_004",
            name="Devon",
            age=29,
            location="Leeds",
            interests=["fitness", "wellness", "community building"],
            profile_pic="💪",
            bio="Wellness coach focused on holistic community health",
            member_since=date(2024, 1, 8),
            contributions=["Led 15 wellness workshops", "Created fitness groups"],
            looking_for="Wellness collaborators and community health advocates",
            last_active=now - timedelta(hours=3),
        ),
    ]


def seed_hotseats(now: datetime) -> List[HotseatSession]:
    return [
        HotseatSession(
            id="hotseat_001",
            title="Liberation Through Tech",
            host="Jordan",
            topic="Building community-owned digital platforms",
            participant_ids=["mem_001", "mem_003"],
            max_participants=6,
            status=SessionStatus.LIVE,
            start_time=now,
            description="Discussing how technology can serve liberation rather than exploitation",
        ),
        HotseatSession(
            id="hotseat_002",
            title="Community Organizing Stories",
            host="Marcus",
            topic="Sharing experiences from the frontlines of liberation work",
            participant_ids=["mem_004"],
            max_participants=8,
            status=SessionStatus.STARTING_SOON,
            start_time=now + timedelta(minutes=30),
            description="Real talk about community organizing successes and challenges",
        ),
        HotseatSession(
            id="hotseat_003",
            title="Wellness & Resistance",
            host="Devon",
            topic="Maintaining mental health while fighting for justice",
            participant_ids=[],
            max_participants=5,
            status=SessionStatus.SCHEDULED,
            start_time=now + timedelta(hours=2),
            description="How do we stay healthy while doing liberation work?",
        ),
    ]
