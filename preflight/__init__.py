"""
Speedtest Preflight

Samples QoS state, latency, packet loss, WAN throughput and CPU load on
a router/gateway and decides whether conditions are suitable for a
bandwidth speed test.

License: GPL-3.0
"""

__version__ = "1.0.0"
__author__ = "nursedude"
__license__ = "GPL-3.0"

from .diagnostics import SpeedtestPreflight, EvaluationContext, Verdict

__all__ = [
    "SpeedtestPreflight",
    "EvaluationContext",
    "Verdict",
]
