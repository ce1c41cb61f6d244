"""
Version information for Speedtest Preflight.
"""

MAJOR = 1
MINOR = 0
PATCH = 0


def get_version() -> str:
    """Get the full version string."""
    return f"{MAJOR}.{MINOR}.{PATCH}"

