"""Services Layer — check programs and the runner that executes them.

Invariants:
    - Programs are registered explicitly (no auto-discovery)
    - Services call into core/ only; no settings or logging setup happens here
"""
