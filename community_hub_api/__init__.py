"""
Top-level package for the Community Hub API.

Makes ``community_hub_api`` importable with fully qualified names such
as ``community_hub_api.app.main``.  All functionality lives in
submodules under ``app``.
"""

__all__ = []
