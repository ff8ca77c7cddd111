"""
Application layer - Use cases for motionboard.

Services here orchestrate the domain engines for a running session.
May import from domain only.
"""
