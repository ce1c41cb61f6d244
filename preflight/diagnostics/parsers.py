"""
Output parsers for the external tools used by the preflight stages.

Each parser takes raw tool output and returns a typed result, using
``None`` for anything it could not find. No threshold logic lives here.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..utils.common import QOS_MARKER
from .context import QosStatus

# Accepts "12.5", "12,5" (decimal comma locales) and plain integers.
_NUMBER = r'(\d+(?:[.,]\d+)?)'

_LOSS_RE = re.compile(_NUMBER + r'\s*%?\s*packet loss', re.IGNORECASE)
_RTT_RE = re.compile(
    r'(?:rtt|round-trip)\s+min/avg/max(?:/\w+)?\s*=\s*'
    + _NUMBER + '/' + _NUMBER + '/',
    re.IGNORECASE,
)
_LINK_RE = re.compile(
    r'^(\d+):\s+([^:\s]+):\s+(?:<([^>]*)>)?.*?\bstate\s+(\S+)'
)
_QOS_MARKER_RE = re.compile(r'\b' + re.escape(QOS_MARKER) + r'\b')


@dataclass
class PingSummary:
    """Parsed ping summary. Fields are None when not present in the output."""
    avg_latency_ms: Optional[float] = None
    packet_loss_pct: Optional[float] = None


@dataclass
class LinkEntry:
    """One line of ``ip -o link show``."""
    index: int
    name: str
    operstate: str
    flags: Tuple[str, ...] = ()

    @property
    def is_up(self) -> bool:
        """UP, or UNKNOWN with carrier (PPP devices never report UP)."""
        state = self.operstate.upper()
        if state == "UP":
            return True
        return state == "UNKNOWN" and "LOWER_UP" in self.flags


def _to_float(text):
    return float(text.replace(",", "."))


def parse_ping_output(output: str) -> PingSummary:
    """Extract average RTT and loss percentage from ping output.

    Handles iputils (``rtt min/avg/max/mdev``) and BusyBox/BSD
    (``round-trip min/avg/max``) summary lines. The loss figure may
    appear with or without a trailing percent sign.
    """
    summary = PingSummary()
    if not output:
        return summary

    loss = _LOSS_RE.search(output)
    if loss:
        summary.packet_loss_pct = _to_float(loss.group(1))

    rtt = _RTT_RE.search(output)
    if rtt:
        summary.avg_latency_ms = _to_float(rtt.group(2))

    return summary


def parse_link_list(output: str) -> List[LinkEntry]:
    """Parse ``ip -o link show`` output, keeping the tool's ifindex order.

    Names carrying a parent suffix (``vlan10@eth0``) are reduced to the
    interface's own name.
    """
    links = []
    for line in output.splitlines():
        m = _LINK_RE.match(line.strip())
        if not m:
            continue
        name = m.group(2).split("@", 1)[0]
        flags = tuple(m.group(3).split(",")) if m.group(3) else ()
        links.append(LinkEntry(int(m.group(1)), name, m.group(4), flags))
    return links


def parse_qos_status(returncode: int, output: str) -> QosStatus:
    """Map the traffic-control query result to a QoS status.

    A failed query is UNKNOWN, not INACTIVE.
    """
    if returncode != 0:
        return QosStatus.UNKNOWN
    if _QOS_MARKER_RE.search(output or ""):
        return QosStatus.ACTIVE
    return QosStatus.INACTIVE
