# Common utilities and shared modules
"""
Shared components used across ContentForge:
- Data models (Pydantic schemas)
- Logging configuration
- Project configuration
"""

from .config import PROJECT_ROOT, SERVER_NAME, SERVER_VERSION, Settings
from .logging import setup_logging

__all__ = [
    "PROJECT_ROOT",
    "SERVER_NAME",
    "SERVER_VERSION",
    "Settings",
    "setup_logging",
]
