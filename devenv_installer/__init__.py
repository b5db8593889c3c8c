"""Ubuntu developer-environment installer.

Core design goals:
- Ordered steps, fail fast on the first error
- Idempotent where a marker directory says the work is done
- One interactive confirmation, for the only destructive step
- Centralized logging
"""

__all__ = []
