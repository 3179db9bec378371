"""
Service layer.

``ship_service`` orchestrates the pure building blocks that live next
to it: ``validation`` (field bounds), ``rating`` (derived score) and
``query_engine`` (filtering, ordering and pagination).  API handlers
only talk to ``ShipService``.
"""
