"""
Utility modules for the speedtest preflight check.

Provides constants, command execution, and logging setup.
"""

from .log import setup_logging
from .system import run_command_safe
from .common import validate_hostname, is_wan_name

__all__ = [
    "setup_logging",
    "run_command_safe",
    "validate_hostname",
    "is_wan_name",
]
