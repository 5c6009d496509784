"""Calculator API Package — stateless arithmetic and health endpoints over HTTP.

Invariants:
    - Package root has no import side effects beyond the version string

Design Decisions:
    - Explicit imports only, no star exports
"""

__version__ = "1.0.0"
