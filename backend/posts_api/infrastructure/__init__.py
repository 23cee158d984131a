"""Infrastructure Layer — post stores, database sessions and logging setup.

Invariants:
    - Infrastructure imports core/ types, never the api/ layer
    - All driver exceptions mapped to StoreError before leaving this layer

Design Decisions:
    - One module per store implementation, selected by build_store()
"""
