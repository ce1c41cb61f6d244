import os
import sys
from collections import namedtuple

import pytest

# Ensure project root is on sys.path so preflight.* imports work
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from preflight.diagnostics.context import EvaluationContext  # noqa: E402

NicCounters = namedtuple("NicCounters", "bytes_sent bytes_recv")
CpuTimes = namedtuple("CpuTimes", "user system idle")


PING_OK = """\
PING 8.8.8.8 (8.8.8.8) 56(84) bytes of data.
64 bytes from 8.8.8.8: icmp_seq=1 ttl=117 time=34.8 ms
64 bytes from 8.8.8.8: icmp_seq=2 ttl=117 time=35.2 ms

--- 8.8.8.8 ping statistics ---
10 packets transmitted, 10 received, 0% packet loss, time 9013ms
rtt min/avg/max/mdev = 33.912/35.004/36.201/0.612 ms
"""

PING_BUSYBOX = """\
PING 8.8.8.8 (8.8.8.8): 56 data bytes
64 bytes from 8.8.8.8: seq=0 ttl=117 time=61.402 ms

--- 8.8.8.8 ping statistics ---
10 packets transmitted, 9 packets received, 10% packet loss
round-trip min/avg/max = 58.101/60.250/64.880 ms
"""

PING_UNREACHABLE = """\
PING 8.8.8.8 (8.8.8.8) 56(84) bytes of data.

--- 8.8.8.8 ping statistics ---
10 packets transmitted, 0 received, 100% packet loss, time 9212ms
"""

LINKS = """\
1: lo: <LOOPBACK,UP,LOWER_UP> mtu 65536 qdisc noqueue state UNKNOWN mode DEFAULT group default qlen 1000\\    link/loopback 00:00:00:00:00:00 brd 00:00:00:00:00:00
2: green0: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 qdisc fq_codel state UP mode DEFAULT group default qlen 1000\\    link/ether 52:54:00:12:34:56 brd ff:ff:ff:ff:ff:ff
3: red0: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 qdisc htb state UP mode DEFAULT group default qlen 1000\\    link/ether 52:54:00:12:34:57 brd ff:ff:ff:ff:ff:ff
"""

TC_HTB = """\
qdisc noqueue 0: dev lo root refcnt 2
qdisc htb 1: dev red0 root refcnt 2 r2q 10 default 0x210 direct_packets_stat 0 direct_qlen 1000
qdisc fq_codel 0: dev green0 root refcnt 2 limit 10240p flows 1024
"""

TC_PLAIN = """\
qdisc noqueue 0: dev lo root refcnt 2
qdisc fq_codel 0: dev red0 root refcnt 2 limit 10240p flows 1024
"""


@pytest.fixture
def ctx():
    """A fresh evaluation context."""
    return EvaluationContext()


