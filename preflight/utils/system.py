"""
System command helpers for the speedtest preflight check.

Every external tool is invoked through ``run_command_safe`` so that a
missing binary, a timeout, or an OS error becomes a return code instead
of an exception.

Security Note: commands are always passed as argument lists and never
through a shell.
"""

import logging
import subprocess
from typing import List, Tuple

from .common import COMMAND_TIMEOUT

log = logging.getLogger("system")


def run_command_safe(
    args: List[str],
    timeout: int = COMMAND_TIMEOUT,
) -> Tuple[int, str, str]:
    """
    Execute a system command without a shell.

    Undecodable bytes in the output are replaced rather than raised.

    Args:
        args: Command as list of strings
        timeout: Timeout in seconds

    Returns:
        Tuple of (return_code, stdout, stderr). The return code is -1
        when the command could not be run to completion.
    """
    log.debug("Running: %s", " ".join(args))
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout
        )
        return result.returncode, result.stdout or "", result.stderr or ""
    except subprocess.TimeoutExpired:
        log.warning("Command timed out after %ss: %s", timeout, args[0])
        return -1, "", f"Timeout after {timeout}s"
    except FileNotFoundError:
        log.warning("Command not found: %s", args[0])
        return -1, "", "Command not found"
    except OSError as e:
        log.error("Command failed: %s: %s", args[0], e)
        return -1, "", str(e)
