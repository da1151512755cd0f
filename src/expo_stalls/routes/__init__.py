"""HTTP routes."""

from expo_stalls.routes import stalls, status, submissions

__all__ = ["stalls", "status", "submissions"]
