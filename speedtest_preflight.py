"""
Speedtest Preflight: check whether now is a good time to run a speed test.

Samples QoS state, latency/loss, WAN inbound throughput and CPU load,
prints a pass/fail line per check and an overall verdict.

Usage:
    python speedtest_preflight.py [--debug] [--no-color]

Exit status is 0 whenever a verdict is printed and 1 when no active WAN
interface exists.
"""
import argparse
import logging
import sys

from preflight.diagnostics import SpeedtestPreflight, WanInterfaceNotFound
from preflight.ui import print_report
from preflight.utils import setup_logging
from version import get_version

log = logging.getLogger("speedtest_preflight")

EXIT_OK = 0
EXIT_NO_WAN = 1


def run_preflight(color=False):
    """Run the preflight once and print the report.

    Returns:
        EXIT_OK when a verdict was printed, EXIT_NO_WAN otherwise.
    """
    preflight = SpeedtestPreflight()
    try:
        verdict = preflight.run()
    except WanInterfaceNotFound as e:
        log.debug("Aborting: %s", e)
        print(f"ERROR: {e}. Aborting preflight.", file=sys.stderr)
        return EXIT_NO_WAN

    print_report(verdict, preflight.context, color=color)
    return EXIT_OK


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Check whether conditions are suitable for a bandwidth speed test",
    )
    parser.add_argument('--debug', action='store_true',
                        help="Show diagnostic logging on stderr")
    parser.add_argument('--no-color', action='store_true',
                        help="Disable colored output")
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {get_version()}")
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.debug else logging.WARNING)

    color = not args.no_color and sys.stdout.isatty()
    sys.exit(run_preflight(color=color))


if __name__ == "__main__":
    main()
