"""
Endpoint modules for API v1.

Each module defines an ``APIRouter`` for one domain (members,
hotseats); they are aggregated in ``router.py``.
"""
