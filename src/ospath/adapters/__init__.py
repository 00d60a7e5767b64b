"""System adapters for different operating environments."""
import sys
from typing import Optional

from ..core.models import Config
from .base import SystemAdapter
from .local import LocalSystemAdapter


def create_adapter(config: Optional[Config] = None) -> SystemAdapter:
    """
    Create the system adapter for the running platform.

    Args:
        config: Configuration object

    Returns:
        Appropriate SystemAdapter instance

    Raises:
        ValueError: If the platform has no POSIX password database
    """
    if sys.platform.startswith('win'):
        raise ValueError(
            f"Unsupported platform: {sys.platform}\n"
            "Expected: a POSIX system"
        )
    return LocalSystemAdapter(config)


__all__ = ["SystemAdapter", "LocalSystemAdapter", "create_adapter"]
