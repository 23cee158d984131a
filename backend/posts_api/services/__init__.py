"""Services Layer — controllers orchestrating store IO around core rules.

Invariants:
    - Services return Outcomes; HTTP concerns stay in api/

Design Decisions:
    - One controller per resource (only posts today)
"""
