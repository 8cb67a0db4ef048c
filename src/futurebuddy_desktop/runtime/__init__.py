"""Runtime module - Bootstrap and lifecycle management"""

from .base import RuntimeBackend
from .bootstrap import BootState, get_state, run
from .builder import Builder
from .factory import create_backend, detect_backend, register_backend

__all__ = [
    "run",
    "get_state",
    "BootState",
    "Builder",
    "RuntimeBackend",
    "create_backend",
    "detect_backend",
    "register_backend",
]
