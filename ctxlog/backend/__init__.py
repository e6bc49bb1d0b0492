"""
Leveled structlog backend shared by every ContextualLogger in a process.
"""

from ctxlog.backend.logger import Backend, new_backend

__all__ = ["Backend", "new_backend"]
