"""
API package containing versioned routes.

A version subpackage (``v1``) exposes a top-level ``router`` which
includes its domain-specific endpoints.
"""
