"""
Preflight measurement stages.

Each stage takes the run's EvaluationContext, performs one measurement,
and records its own field(s). Stages never raise for a failed
measurement; they record None and log a warning. WAN detection is the
exception: it raises WanInterfaceNotFound, which aborts the run.
"""

import logging
import time
from typing import Optional, Tuple

import psutil

from ..utils.common import (
    CPU_SAMPLE_WINDOW,
    LINK_LIST_COMMAND,
    PING_COUNT,
    PING_TARGET,
    PING_TIMEOUT,
    QOS_STATUS_COMMAND,
    THROUGHPUT_WINDOW,
    is_wan_name,
    validate_hostname,
)
from ..utils.system import run_command_safe
from .context import EvaluationContext, QosStatus, WanInterfaceNotFound
from .parsers import parse_link_list, parse_ping_output, parse_qos_status

log = logging.getLogger("checks")


# ── 1. QoS ───────────────────────────────────────────────────

def check_qos_status(ctx: EvaluationContext) -> QosStatus:
    """Query traffic shaping state and record ``qos_status``."""
    rc, stdout, stderr = run_command_safe(QOS_STATUS_COMMAND)
    status = parse_qos_status(rc, stdout)
    if status is QosStatus.UNKNOWN:
        log.warning("QoS status unknown (tc query failed: %s)",
                    stderr.strip() or f"rc={rc}")
    else:
        log.debug("QoS status: %s", status.value)
    ctx.record("qos_status", status)
    return status


# ── 2. WAN interface ─────────────────────────────────────────

def detect_wan_interface(ctx: EvaluationContext) -> str:
    """Find the first UP interface with a WAN-style name.

    Links are considered in ``ip link`` (ifindex) order, so the lowest
    index wins when several match.

    Raises:
        WanInterfaceNotFound: no matching interface is up, or the link
            list could not be read.
    """
    rc, stdout, stderr = run_command_safe(LINK_LIST_COMMAND)
    if rc != 0:
        raise WanInterfaceNotFound(
            f"cannot enumerate network links: {stderr.strip() or f'rc={rc}'}"
        )

    for link in parse_link_list(stdout):
        if is_wan_name(link.name) and link.is_up:
            log.debug("WAN interface: %s (index %d)", link.name, link.index)
            ctx.record("wan_interface", link.name)
            return link.name

    raise WanInterfaceNotFound("no active WAN interface found (red0, ppp*, ens*, vlan*)")


# ── 3. Latency / loss ────────────────────────────────────────

def measure_latency(
    ctx: EvaluationContext,
    host: str = PING_TARGET,
    count: int = PING_COUNT,
) -> Tuple[Optional[float], Optional[float]]:
    """Ping *host* *count* times; record average RTT and loss percentage."""
    ok, err = validate_hostname(host)
    if not ok:
        log.warning("Latency measurement skipped: %s", err)
        latency, loss = None, None
    else:
        # ping exits non-zero on partial loss, so parse regardless of rc
        rc, stdout, _ = run_command_safe(
            ["ping", "-c", str(count), host], timeout=PING_TIMEOUT,
        )
        summary = parse_ping_output(stdout)
        latency, loss = summary.avg_latency_ms, summary.packet_loss_pct
        if latency is None or loss is None:
            log.warning("Ping summary incomplete for %s (rc=%d): latency=%s loss=%s",
                        host, rc, latency, loss)

    ctx.record("avg_latency_ms", latency)
    ctx.record("packet_loss_pct", loss)
    return latency, loss


# ── 4. Throughput ────────────────────────────────────────────

def read_rx_bytes(interface: str) -> Optional[int]:
    """Return the cumulative received-byte counter for *interface*."""
    try:
        counters = psutil.net_io_counters(pernic=True, nowrap=False)
    except (psutil.Error, OSError) as e:
        log.warning("Cannot read interface counters: %s", e)
        return None
    nic = counters.get(interface)
    if nic is None:
        log.warning("Interface %s has no counters", interface)
        return None
    return nic.bytes_recv


def kbps_from_counters(before: Optional[int], after: Optional[int],
                       window: float = THROUGHPUT_WINDOW) -> Optional[float]:
    """Convert two byte-counter readings into Kbps.

    Returns None when either reading is missing or the counter went
    backwards (wrap or reset).
    """
    if before is None or after is None:
        return None
    if after < before:
        log.warning("Byte counter decreased (%d -> %d); discarding sample",
                    before, after)
        return None
    return (after - before) * 8 / 1024 / window


def sample_throughput(ctx: EvaluationContext) -> Optional[float]:
    """Sample inbound throughput on the detected WAN interface."""
    kbps = None
    interface = ctx.wan_interface
    if interface:
        before = read_rx_bytes(interface)
        time.sleep(THROUGHPUT_WINDOW)
        after = read_rx_bytes(interface)
        kbps = kbps_from_counters(before, after)
    else:
        log.warning("Throughput sample skipped: no WAN interface recorded")

    ctx.record("rx_throughput_kbps", kbps)
    return kbps


# ── 5. CPU ───────────────────────────────────────────────────

def sample_cpu_usage(ctx: EvaluationContext) -> Optional[float]:
    """Record CPU busy percentage (100 - idle) over a one-second window."""
    usage = None
    try:
        times = psutil.cpu_times_percent(interval=CPU_SAMPLE_WINDOW)
        idle = getattr(times, "idle", None)
        if idle is not None:
            usage = min(100.0, max(0.0, 100.0 - idle))
        else:
            log.warning("CPU sample has no idle figure")
    except (psutil.Error, OSError) as e:
        log.warning("Cannot sample CPU usage: %s", e)

    ctx.record("cpu_usage_pct", usage)
    return usage
