"""
FastAPI dependencies.

Services are created once per application by ``create_app`` and kept
on ``app.state``; these helpers hand them to route handlers, which
keeps handlers free of global state and lets tests build isolated
applications.
"""

from fastapi import HTTPException, Request

from ..core.errors import Failure
from ..services.hotseat_service import HotseatService
from ..services.member_service import MemberService


def get_member_service(request: Request) -> MemberService:
    return request.app.state.member_service


def get_hotseat_service(request: Request) -> HotseatService:
    return request.app.state.hotseat_service


def raise_for_failure(failure: Failure) -> None:
    """Translate a service failure into an HTTP error response."""
    raise HTTPException(status_code=failure.http_status, detail=failure.as_detail())
