"""
Django middleware for masked-multivalue.
"""

from .request_logging import RequestDataLoggingMiddleware

__all__ = ["RequestDataLoggingMiddleware"]
