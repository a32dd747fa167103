"""
Plan repository.

Aggregates the plans found under one workspace root. Discovery happens
elsewhere; this module parses the candidate paths it is given, in order, and
isolates failures so that one bad document never aborts the batch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from xcplan.core.domain.errors import ParseError
from xcplan.plans.parser import ParsedPlan, find_target, parse_test_plan

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlanLoadFailure:
    """
    A candidate path that could not be parsed during a batch load.
    """

    path: str
    error: ParseError


@dataclass(frozen=True, slots=True)
class PlanLoadResult:
    plans: list[ParsedPlan]
    failures: list[PlanLoadFailure]


def load_all_with_failures(
    candidate_paths: Iterable[str | Path],
    *,
    validate_schema: bool = False,
) -> PlanLoadResult:
    """
    Parse every candidate, returning the successes and the failures.

    The order of ``plans`` follows ``candidate_paths`` minus skipped entries.
    """
    plans: list[ParsedPlan] = []
    failures: list[PlanLoadFailure] = []

    for candidate in candidate_paths:
        try:
            parsed = parse_test_plan(candidate, validate_schema=validate_schema)
        except ParseError as exc:
            LOGGER.error(
                "Error parsing test plan %s: %s",
                candidate,
                exc,
                extra={"path": str(candidate)},
            )
            failures.append(PlanLoadFailure(path=str(candidate), error=exc))
            continue

        plans.append(parsed)

    if failures:
        LOGGER.warning(
            "loaded %d test plan(s), skipped %d malformed",
            len(plans),
            len(failures),
        )

    return PlanLoadResult(plans=plans, failures=failures)


def load_all(
    candidate_paths: Iterable[str | Path],
    *,
    validate_schema: bool = False,
) -> list[ParsedPlan]:
    """Parse every candidate; malformed ones are logged and skipped."""
    return load_all_with_failures(candidate_paths, validate_schema=validate_schema).plans


@dataclass(slots=True)
class PlanRepository:
    """
    In-memory plan list for one workspace root.

    Each ``reload`` is a full rebuild that replaces the previous list.
    """

    workspace_root: Path | None = None
    validate_schema: bool = False

    _plans: list[ParsedPlan] = field(default_factory=list, init=False, repr=False)
    _failures: list[PlanLoadFailure] = field(default_factory=list, init=False, repr=False)

    def reload(self, candidate_paths: Iterable[str | Path]) -> list[ParsedPlan]:
        result = load_all_with_failures(candidate_paths, validate_schema=self.validate_schema)
        self._plans = result.plans
        self._failures = result.failures
        return list(self._plans)

    @property
    def plans(self) -> list[ParsedPlan]:
        return list(self._plans)

    @property
    def failures(self) -> list[PlanLoadFailure]:
        return list(self._failures)

    def __len__(self) -> int:
        return len(self._plans)

    def find_plan_by_path(self, path: str | Path) -> ParsedPlan | None:
        wanted = str(path)
        for plan in self._plans:
            if plan.path == wanted:
                return plan
        return None

    def plans_named(self, name: str) -> list[ParsedPlan]:
        """All plans whose derived name equals ``name``. Names are not unique."""
        return [plan for plan in self._plans if plan.name == name]

    def plans_with_target(self, target_name: str) -> list[ParsedPlan]:
        return [
            plan for plan in self._plans
            if find_target(plan.plan, target_name) is not None
        ]
