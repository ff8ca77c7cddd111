"""
motionboard - Motion engine for simulated deliberative assemblies

Validates procedural motions (moderated and unmoderated caucuses,
round robins and other motions) submitted by delegates, and orders
them by a configurable priority for display and selection.

Layers:
- domain: motion/delegate models, time strings, schema and ordering engines
- application: session-level motion board service
- infrastructure: in-memory delegate directory, persisted-shape codecs, logging
- config: environment-driven session configuration
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
