"""Service layer consumed by the API routes."""

from expo_stalls.services.session import StallSession

__all__ = ["StallSession"]
