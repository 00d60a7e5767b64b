"""Utility modules for ospath."""

from .string_ops import StringOps
from .console_base import ConsoleManager, StatusType

__all__ = ["StringOps", "ConsoleManager", "StatusType"]
