"""
Threshold evaluation for a completed preflight context.

All comparisons are strict (value < threshold). Unmeasured values are
replaced by fixed failure sentinels before comparison, so missing data
can never pass.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..utils.common import (
    MAX_CPU_USAGE_PCT,
    MAX_LATENCY_MS,
    MAX_PACKET_LOSS_PCT,
    MAX_RX_THROUGHPUT_KBPS,
    SENTINEL_CPU_USAGE_PCT,
    SENTINEL_LATENCY_MS,
    SENTINEL_PACKET_LOSS_PCT,
    SENTINEL_RX_THROUGHPUT_KBPS,
)
from .context import EvaluationContext, QosStatus


class CheckStatus(Enum):
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


@dataclass
class DiagnosticResult:
    """Result of a single sub-check."""

    name: str
    status: CheckStatus
    message: str
    value: Optional[float] = None
    threshold: Optional[float] = None
    measured: bool = True

    @property
    def passed(self) -> bool:
        """WARN is non-blocking and counts as passed."""
        return self.status is not CheckStatus.FAIL


@dataclass
class Verdict:
    """Aggregate outcome of a preflight run."""

    results: List[DiagnosticResult] = field(default_factory=list)

    @property
    def favorable(self) -> bool:
        return bool(self.results) and all(r.passed for r in self.results)

    @property
    def failed(self) -> List[DiagnosticResult]:
        return [r for r in self.results if not r.passed]


def below_threshold(value: Optional[float], threshold: float,
                    sentinel: float) -> Tuple[bool, float]:
    """Compare *value* strictly against *threshold*.

    Returns (passed, effective_value) where the effective value is the
    sentinel when *value* is None.
    """
    effective = sentinel if value is None else value
    return effective < threshold, effective


def _threshold_result(name, value, threshold, sentinel, unit):
    passed, effective = below_threshold(value, threshold, sentinel)
    if value is None:
        message = f"unavailable (treated as {effective:g} {unit})"
    else:
        message = f"{value:.1f} {unit} (limit < {threshold:g} {unit})"
    return DiagnosticResult(
        name,
        CheckStatus.PASS if passed else CheckStatus.FAIL,
        message,
        value=effective,
        threshold=threshold,
        measured=value is not None,
    )


def check_qos(status: Optional[QosStatus]) -> DiagnosticResult:
    if status is QosStatus.ACTIVE:
        return DiagnosticResult("QoS", CheckStatus.FAIL, "traffic shaping active")
    if status is QosStatus.INACTIVE:
        return DiagnosticResult("QoS", CheckStatus.PASS, "traffic shaping inactive")
    return DiagnosticResult("QoS", CheckStatus.WARN,
                            "status unknown (tc query failed)", measured=False)


def check_latency(latency_ms: Optional[float]) -> DiagnosticResult:
    return _threshold_result("Latency", latency_ms, MAX_LATENCY_MS,
                             SENTINEL_LATENCY_MS, "ms")


def check_packet_loss(loss_pct: Optional[float]) -> DiagnosticResult:
    return _threshold_result("Packet Loss", loss_pct, MAX_PACKET_LOSS_PCT,
                             SENTINEL_PACKET_LOSS_PCT, "%")


def check_throughput(kbps: Optional[float]) -> DiagnosticResult:
    return _threshold_result("WAN Throughput", kbps, MAX_RX_THROUGHPUT_KBPS,
                             SENTINEL_RX_THROUGHPUT_KBPS, "Kbps")


def check_cpu(usage_pct: Optional[float]) -> DiagnosticResult:
    return _threshold_result("CPU Usage", usage_pct, MAX_CPU_USAGE_PCT,
                             SENTINEL_CPU_USAGE_PCT, "%")


def evaluate(ctx: EvaluationContext) -> Verdict:
    """Run every sub-check against the context and aggregate the verdict."""
    return Verdict([
        check_qos(ctx.qos_status),
        check_latency(ctx.avg_latency_ms),
        check_packet_loss(ctx.packet_loss_pct),
        check_throughput(ctx.rx_throughput_kbps),
        check_cpu(ctx.cpu_usage_pct),
    ])
