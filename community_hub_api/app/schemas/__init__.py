"""
Pydantic schema definitions for API payloads and in-memory records.

Every schema derives from ``CamelModel`` so JSON uses camelCase field
names (``maxParticipants``) while Python code keeps snake_case.
"""
