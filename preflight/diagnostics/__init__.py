"""
Preflight diagnostics: measurement stages, evaluation context,
and threshold verdict.
"""

from .context import (
    EvaluationContext,
    QosStatus,
    PreflightError,
    WanInterfaceNotFound,
    ContextError,
)
from .preflight import SpeedtestPreflight
from .verdict import Verdict, DiagnosticResult, CheckStatus, evaluate

__all__ = [
    "EvaluationContext",
    "QosStatus",
    "PreflightError",
    "WanInterfaceNotFound",
    "ContextError",
    "SpeedtestPreflight",
    "Verdict",
    "DiagnosticResult",
    "CheckStatus",
    "evaluate",
]
