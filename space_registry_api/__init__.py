"""
Top-level package for the Space Registry API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``space_registry_api.app.main:app``.
"""

__all__ = []
