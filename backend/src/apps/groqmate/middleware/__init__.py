"""
Middleware package for the relay server.
"""
from .body_limit import JSONBodyLimitMiddleware

__all__ = ["JSONBodyLimitMiddleware"]
