"""
Terminal styling primitives for the preflight report.

ANSI colors are applied only when enabled, so the same rendering code
produces plain text for pipes and log captures.
"""


# ── ANSI Styling ─────────────────────────────────────────────
class C:
    """Terminal color codes."""
    RST  = '\033[0m'
    BOLD = '\033[1m'
    DIM  = '\033[2m'
    RED  = '\033[91m'
    GRN  = '\033[92m'
    YLW  = '\033[93m'
    CYN  = '\033[96m'


RULE_CHAR = '─'

_TAGS = {
    "pass": ("PASS", C.GRN),
    "fail": ("FAIL", C.RED),
    "warn": ("WARN", C.YLW),
}


# ── Helpers ──────────────────────────────────────────────────
def paint(text, color, enabled=True):
    """Wrap *text* in *color* when *enabled*."""
    if not enabled:
        return text
    return f"{color}{text}{C.RST}"


def status_tag(status, enabled=True):
    """Bracketed indicator for a check status value ("pass"/"fail"/"warn")."""
    label, color = _TAGS.get(status, (status.upper(), C.DIM))
    return "[" + paint(label, color, enabled) + "]"


def rule(width=48, enabled=True):
    return paint(RULE_CHAR * width, C.DIM, enabled)


def kv(key, value, key_width=20):
    """Left-aligned key/value row."""
    return f"  {key + ':':<{key_width}} {value}"
