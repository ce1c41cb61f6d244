"""
Centralized logging configuration for the speedtest preflight check.

Call setup_logging() once at startup (speedtest_preflight.py). Individual
modules obtain their own loggers via logging.getLogger() with a
descriptive name.

Log records go to stderr so the report on stdout stays clean. There is
no log file.
"""
import logging
import sys

_configured = False

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level=logging.WARNING, stream=None):
    """Configure project-wide logging.  Safe to call multiple times.

    Args:
        level: Root logger level (default WARNING so only degraded
               measurements and tool failures are shown).
        stream: Output stream for the console handler (default stderr).
    """
    global _configured
    if _configured:
        return
    _configured = True

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)

    console = logging.StreamHandler(stream or sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)
