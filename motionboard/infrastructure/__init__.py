"""
Infrastructure layer - Adapters for motionboard.

This layer contains:
- The in-memory delegate directory and roster preset loading
- Pydantic codecs for persisted settings shapes
- Observability (structlog configuration)

May import from domain and application.
"""
