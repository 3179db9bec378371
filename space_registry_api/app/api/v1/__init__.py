"""
Version 1 of the Space Registry API.

Breaking changes to the ship resource should be introduced in a new
version subpackage (e.g. ``v2``) to preserve backwards compatibility.
"""
