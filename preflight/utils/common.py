"""
Centralized thresholds, ping settings, and project constants.
Single source of truth -- all modules import from here.
"""
import re

# ── Thresholds (strict upper bounds) ─────────────────────────
MAX_LATENCY_MS = 50.0
MAX_PACKET_LOSS_PCT = 1.0
MAX_RX_THROUGHPUT_KBPS = 10.0
MAX_CPU_USAGE_PCT = 20.0

# ── Failure sentinels (substituted for unmeasured values) ────
SENTINEL_LATENCY_MS = 9999.0
SENTINEL_PACKET_LOSS_PCT = 100.0
SENTINEL_RX_THROUGHPUT_KBPS = 999999.0
SENTINEL_CPU_USAGE_PCT = 100.0

# ── Latency ──────────────────────────────────────────────────
PING_TARGET = "8.8.8.8"
PING_COUNT = 10
PING_TIMEOUT = 20

# ── Sampling windows (seconds) ───────────────────────────────
THROUGHPUT_WINDOW = 1.0
CPU_SAMPLE_WINDOW = 1.0

# ── QoS ──────────────────────────────────────────────────────
QOS_STATUS_COMMAND = ["tc", "qdisc", "show"]
QOS_MARKER = "htb"

# ── WAN detection ────────────────────────────────────────────
LINK_LIST_COMMAND = ["ip", "-o", "link", "show"]
WAN_NAME_PATTERNS = (
    re.compile(r'^red0$'),
    re.compile(r'^ppp\S*$'),
    re.compile(r'^ens\S*$'),
    re.compile(r'^vlan\S*$'),
)

COMMAND_TIMEOUT = 10

_HOSTNAME_RE = re.compile(r'^[a-zA-Z0-9._:\-]+$')


def validate_hostname(host):
    """Validate a hostname/IP string before handing it to a command.

    Rejects flag-injection attempts (leading '-'), overly long values,
    and characters outside the safe set.

    Returns:
        (ok: bool, error_message: str)
    """
    if not host or not isinstance(host, str):
        return False, "hostname must be a non-empty string"
    if host.startswith('-'):
        return False, "hostname must not start with '-' (flag injection)"
    if len(host) > 253:
        return False, "hostname exceeds 253 characters"
    if not _HOSTNAME_RE.match(host):
        return False, f"hostname contains invalid characters: {host!r}"
    return True, ""


def is_wan_name(name):
    """True if *name* follows one of the WAN interface naming conventions."""
    return any(p.match(name) for p in WAN_NAME_PATTERNS)
