"""
Error taxonomy for plan parsing and session handling.
"""

from __future__ import annotations

from pathlib import Path


class XcPlanError(Exception):
    """Base class for all xcplan errors."""


class ParseError(XcPlanError):
    """Plan document bytes do not conform to the expected shape."""

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        self.path = str(path) if path is not None else None
        if self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)


class SessionError(XcPlanError):
    """Invalid operation on the caller-held plan selection."""


class NoPlanSelectedError(SessionError):
    pass


class UnknownTargetError(SessionError):
    def __init__(self, target_name: str, plan_name: str) -> None:
        self.target_name = target_name
        self.plan_name = plan_name
        super().__init__(f"target {target_name!r} not found in test plan {plan_name!r}")
