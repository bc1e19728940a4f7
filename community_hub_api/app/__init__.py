"""
Application package initializer.

The service is organised in layers: ``core`` holds configuration,
logging, typed failures, locks and the in-memory stores; ``schemas``
the pydantic payloads; ``services`` the matching engine and the
hotseat coordinator; ``api/v1`` the FastAPI routers that expose them.
"""

from .main import app, create_app  # noqa: F401
