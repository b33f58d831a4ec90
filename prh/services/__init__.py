"""Services composing the release checker into hook gates and reports."""

from .gates import PreCommitGate, PrePushGate
from .hooks import HookInstaller, HookInstallError
from .outcome import Configured, GateOutcome, Invalid, ProjectFinding, Unconfigured
from .status import ProjectStatus, StatusReport, StatusService

__all__ = [
    "Configured",
    "GateOutcome",
    "HookInstallError",
    "HookInstaller",
    "Invalid",
    "PreCommitGate",
    "PrePushGate",
    "ProjectFinding",
    "ProjectStatus",
    "StatusReport",
    "StatusService",
    "Unconfigured",
]
