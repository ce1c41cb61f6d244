"""
Speedtest preflight orchestrator.

Runs the five measurement stages in order against a fresh
EvaluationContext and evaluates the verdict. WAN detection failure
propagates and ends the run before any later stage.
"""

import logging
from typing import Optional

from .checks import (
    check_qos_status,
    detect_wan_interface,
    measure_latency,
    sample_cpu_usage,
    sample_throughput,
)
from .context import EvaluationContext
from .verdict import Verdict, evaluate

log = logging.getLogger("preflight")


class SpeedtestPreflight:
    """
    Decides whether conditions are suitable for a bandwidth speed test.

    Usage:
        preflight = SpeedtestPreflight()
        verdict = preflight.run()      # may raise WanInterfaceNotFound
        preflight.context.wan_interface
    """

    def __init__(self):
        self.context = EvaluationContext()
        self.verdict: Optional[Verdict] = None

    def run(self) -> Verdict:
        """Run all stages once and return the verdict.

        Raises:
            WanInterfaceNotFound: no active WAN interface; later stages
                are not attempted.
        """
        ctx = self.context

        log.info("Checking QoS status")
        check_qos_status(ctx)

        log.info("Detecting WAN interface")
        detect_wan_interface(ctx)

        log.info("Probing latency and packet loss")
        measure_latency(ctx)

        log.info("Sampling throughput on %s", ctx.wan_interface)
        sample_throughput(ctx)

        log.info("Sampling CPU usage")
        sample_cpu_usage(ctx)

        self.verdict = evaluate(ctx)
        log.info("Verdict: %s",
                 "favorable" if self.verdict.favorable else "unfavorable")
        return self.verdict
