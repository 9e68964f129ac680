"""
HTTP layer: routers and global error handlers.
"""
from .error_handlers import register_error_handlers

__all__ = ["register_error_handlers"]
