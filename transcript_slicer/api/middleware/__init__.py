"""API middleware."""

from .correlation import CorrelationMiddleware

__all__ = ["CorrelationMiddleware"]
