"""Tests for preflight.ui.report — report lines and diagnostic dump."""
import io

from preflight.diagnostics.context import EvaluationContext, QosStatus
from preflight.diagnostics.verdict import evaluate
from preflight.ui.report import print_report, render_report
from preflight.ui.widgets import C


def _ctx(**overrides):
    values = dict(
        qos_status=QosStatus.INACTIVE,
        wan_interface="red0",
        avg_latency_ms=35.0,
        packet_loss_pct=0.0,
        rx_throughput_kbps=5.0,
        cpu_usage_pct=12.0,
    )
    values.update(overrides)
    c = EvaluationContext()
    for name, value in values.items():
        c.record(name, value)
    return c


def _text(ctx, color=False):
    return "\n".join(render_report(evaluate(ctx), ctx, color))


class TestFavorableReport:
    def test_one_line_per_check(self):
        text = _text(_ctx())
        for name in ("QoS", "Latency", "Packet Loss", "WAN Throughput", "CPU Usage"):
            assert name in text
        assert text.count("[PASS]") == 5

    def test_no_diagnostic_dump(self):
        text = _text(_ctx())
        assert "Verdict: FAVORABLE" in text
        assert "Diagnostics" not in text
        assert "WAN interface" not in text


class TestUnfavorableReport:
    def test_high_latency_dumps_all_values(self):
        text = _text(_ctx(avg_latency_ms=60.0))
        assert "UNFAVORABLE" in text
        assert "failed: Latency" in text
        assert "[FAIL] Latency" in text
        assert "Diagnostics" in text
        assert "Avg latency:" in text and "60.0 ms" in text
        assert "0.0 %" in text
        assert "5.0 Kbps" in text
        assert "12.0 %" in text
        assert "red0" in text

    def test_qos_active_is_only_failure(self):
        text = _text(_ctx(qos_status=QosStatus.ACTIVE))
        assert "failed: QoS" in text
        assert text.count("[FAIL]") == 1
        assert "active" in text

    def test_unmeasured_values_shown_as_unavailable(self):
        text = _text(_ctx(rx_throughput_kbps=None))
        assert "[FAIL] WAN Throughput" in text
        assert "RX throughput:" in text
        assert "unavailable" in text


class TestQosUnknown:
    def test_warn_tag(self):
        text = _text(_ctx(qos_status=QosStatus.UNKNOWN))
        assert "[WARN] QoS" in text
        assert "Verdict: FAVORABLE" in text


class TestColor:
    def test_plain_by_default(self):
        text = _text(_ctx())
        assert "\033[" not in text

    def test_colored_output(self):
        ctx = _ctx(avg_latency_ms=60.0)
        text = _text(ctx, color=True)
        assert f"[{C.RED}FAIL{C.RST}] Latency" in text
        assert f"[{C.GRN}PASS{C.RST}] CPU Usage" in text
        assert C.RED + "Verdict: UNFAVORABLE" in text


class TestPrintReport:
    def test_writes_to_stream(self):
        ctx = _ctx()
        buf = io.StringIO()
        print_report(evaluate(ctx), ctx, stream=buf)
        assert "Verdict: FAVORABLE" in buf.getvalue()
