"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain models in ``app.models`` to
decouple the API representation (camelCase, epoch milliseconds) from
the in-process one.
"""
