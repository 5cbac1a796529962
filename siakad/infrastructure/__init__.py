"""Infrastructure Layer — persistence adapters, outbound messaging and cross-cutting concerns.

Invariants:
    - Adapters implement the Protocols in core/repository_protocols.py
    - Driver and transport exceptions mapped to core errors (DatabaseError, NotificationError)

Design Decisions:
    - Adapters translate ORM rows into core records at the boundary
"""
