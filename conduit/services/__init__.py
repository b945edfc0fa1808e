"""Services Layer — stores, graphs and composers over one AsyncSession.

Invariants:
    - Every service is constructed per unit of work with the request's AsyncSession
    - Expected IntegrityErrors are translated to domain errors here, before they
      reach the session manager's catch-all mapping
    - Wiring is explicit (services/wiring.py), no auto-discovery

Design Decisions:
    - One service file per component for locality
"""
