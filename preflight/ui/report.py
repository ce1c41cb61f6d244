"""
Human-readable preflight report.

One line per sub-check followed by the verdict. An unfavorable verdict
adds a diagnostic block listing every sampled value and the WAN
interface.
"""
import sys
from typing import List

from ..diagnostics.context import EvaluationContext
from ..diagnostics.verdict import Verdict
from .widgets import C, kv, paint, rule, status_tag

UNAVAILABLE = "unavailable"


def _fmt(value, unit):
    if value is None:
        return UNAVAILABLE
    return f"{value:.1f} {unit}"


def diagnostic_lines(ctx: EvaluationContext) -> List[str]:
    """Sampled values for diagnosis, raw (unmeasured shown as unavailable)."""
    qos = ctx.qos_status.value if ctx.qos_status else UNAVAILABLE
    return [
        kv("WAN interface", ctx.wan_interface or UNAVAILABLE),
        kv("QoS", qos),
        kv("Avg latency", _fmt(ctx.avg_latency_ms, "ms")),
        kv("Packet loss", _fmt(ctx.packet_loss_pct, "%")),
        kv("RX throughput", _fmt(ctx.rx_throughput_kbps, "Kbps")),
        kv("CPU usage", _fmt(ctx.cpu_usage_pct, "%")),
    ]


def render_report(verdict: Verdict, ctx: EvaluationContext,
                  color: bool = False) -> List[str]:
    """Build the report as a list of lines."""
    lines = [
        paint("Speedtest Preflight", C.BOLD, color),
        rule(enabled=color),
    ]
    for result in verdict.results:
        tag = status_tag(result.status.value, color)
        lines.append(f"{tag} {result.name:<16} {result.message}")
    lines.append(rule(enabled=color))

    if verdict.favorable:
        lines.append(paint("Verdict: FAVORABLE - conditions suitable for a speed test",
                           C.GRN, color))
        return lines

    failed = ", ".join(r.name for r in verdict.failed)
    lines.append(paint(f"Verdict: UNFAVORABLE - failed: {failed}", C.RED, color))
    lines.append("")
    lines.append(paint("Diagnostics", C.CYN, color))
    lines.extend(diagnostic_lines(ctx))
    return lines


def print_report(verdict: Verdict, ctx: EvaluationContext,
                 color: bool = False, stream=None) -> None:
    out = stream or sys.stdout
    for line in render_report(verdict, ctx, color):
        print(line, file=out)
