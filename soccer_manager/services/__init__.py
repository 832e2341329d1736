"""Services Layer — Team Economy workflows over repository and cache protocols.

Invariants:
    - Services own the transaction: repositories flush, services commit or roll back
    - Team cache failures are logged and swallowed, never surfaced to callers
    - Services depend only on core/repository_protocols.py, never on SQL or Redis types

Design Decisions:
    - One service per aggregate the caller acts on (team, player, transfer market)
    - Wiring lives in service_factory.py so routes and tests build services the same way
"""
