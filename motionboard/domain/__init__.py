"""
Domain layer - Pure motion logic for motionboard.

This layer contains:
- Motion, delegate and sort order models (immutable)
- Domain errors
- Ports (abstract interfaces)
- Domain services (schema and ordering engines, time strings)

CRITICAL: This layer must NOT import from application, infrastructure, or config.
Only stdlib, typing and structlog imports are allowed.
"""

from motionboard.domain.exceptions import MotionboardError

__all__: list[str] = ["MotionboardError"]
