"""
Evaluation context shared by the preflight stages.

One context is built per run. Each stage records its own fields exactly
once; a field that is still ``None`` after its stage means "no data" and
is treated as a failing value by the verdict.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Optional, Set


class PreflightError(Exception):
    """Base class for preflight errors."""


class WanInterfaceNotFound(PreflightError):
    """No WAN interface matching the naming conventions is up."""


class ContextError(PreflightError):
    """A context field was written twice or does not exist."""


class QosStatus(Enum):
    """Traffic shaping state reported by the QoS check."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    UNKNOWN = "unknown"


@dataclass
class EvaluationContext:
    """Measurements gathered during a single preflight run."""

    qos_status: Optional[QosStatus] = None
    wan_interface: Optional[str] = None
    avg_latency_ms: Optional[float] = None
    packet_loss_pct: Optional[float] = None
    rx_throughput_kbps: Optional[float] = None
    cpu_usage_pct: Optional[float] = None

    _recorded: Set[str] = field(default_factory=set, repr=False, compare=False)

    def record(self, name: str, value) -> None:
        """Write *value* into field *name*. Each field may be written once."""
        if name.startswith("_") or name not in self._field_names():
            raise ContextError(f"unknown context field: {name!r}")
        if name in self._recorded:
            raise ContextError(f"context field already recorded: {name!r}")
        setattr(self, name, value)
        self._recorded.add(name)

    def is_recorded(self, name: str) -> bool:
        return name in self._recorded

    @property
    def qos_active(self) -> bool:
        return self.qos_status is QosStatus.ACTIVE

    @classmethod
    def _field_names(cls):
        return {f.name for f in fields(cls) if not f.name.startswith("_")}
