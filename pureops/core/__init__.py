"""Core Layer — pure domain logic, no IO, no configuration.

Invariants:
    - No module in core/ imports from services/, infrastructure/, config or cli
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (runner, CLI)
"""
