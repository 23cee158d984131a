"""Core Layer — pure domain logic, no IO, no web framework, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validation and merge rules are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the controller
      orchestrates store IO around these pure rules
"""
