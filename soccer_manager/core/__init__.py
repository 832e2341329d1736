"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or db/
    - All functions are pure; randomness only through an injected random.Random

Design Decisions:
    - Functional core separated from imperative shell: services do IO, core decides
"""
