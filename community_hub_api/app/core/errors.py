"""
Typed failure values returned by the service layer.

Services never raise for expected business conditions (unknown
member, unknown session, full session).  They return a ``Failure``
instead so the caller can branch on ``isinstance(result, Failure)``
and read a machine-readable ``kind`` plus a human-readable
``message``.  The HTTP layer turns a failure into an error response
with ``http_status``.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    INVALID_INPUT = "invalid_input"


_HTTP_STATUS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CAPACITY_EXCEEDED: 409,
    ErrorKind.INVALID_INPUT: 422,
}


class Failure(BaseModel):
    """A failed operation: what went wrong and why."""

    kind: ErrorKind
    code: str
    message: str

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self.kind]

    def as_detail(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "code": self.code, "message": self.message}

    @classmethod
    def member_not_found(cls, member_id: str) -> "Failure":
        return cls(kind=ErrorKind.NOT_FOUND, code="member_not_found", message=f"Member {member_id} not found")

    @classmethod
    def session_not_found(cls, session_id: str) -> "Failure":
        return cls(kind=ErrorKind.NOT_FOUND, code="session_not_found", message=f"Session {session_id} not found")

    @classmethod
    def session_full(cls, session_id: str, max_participants: int) -> "Failure":
        return cls(
            kind=ErrorKind.CAPACITY_EXCEEDED,
            code="session_full",
            message=f"Session {session_id} is full ({max_participants} participants)",
        )

    @classmethod
    def invalid_input(cls, message: str) -> "Failure":
        return cls(kind=ErrorKind.INVALID_INPUT, code="invalid_input", message=message)
