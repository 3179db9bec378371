"""
Application package initializer.

The code is organised in layers: ``models`` holds the domain classes,
``services`` the validation, rating and query logic, ``repositories``
the storage implementations, ``schemas`` the API payloads and
``api/v1`` the HTTP routes.  Versioning is handled by grouping routers
under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
