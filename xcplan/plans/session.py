"""
Caller-held plan selection.

Holds the "currently selected test plan" and "currently selected target"
explicitly so the resolution core stays stateless. One session per caller;
it is not synchronised.
"""

from __future__ import annotations

import logging

from xcplan.core.domain.errors import NoPlanSelectedError, UnknownTargetError
from xcplan.core.domain.types import TestTargetConfig
from xcplan.core.resolution.inclusion import is_test_included
from xcplan.plans.parser import ParsedPlan, find_target

LOGGER = logging.getLogger(__name__)


class TestPlanSession:
    """Selected plan and target for one caller."""

    __test__ = False

    def __init__(self, plan: ParsedPlan | None = None) -> None:
        self._plan: ParsedPlan | None = plan
        self._target_name: str | None = None

    @property
    def selected_plan(self) -> ParsedPlan | None:
        return self._plan

    @property
    def selected_target_name(self) -> str | None:
        return self._target_name

    def is_current(self, plan: ParsedPlan) -> bool:
        """Plans are identified by path, never by their derived name."""
        return self._plan is not None and self._plan.path == plan.path

    def select_plan(self, plan: ParsedPlan | None) -> None:
        """Select ``plan`` (``None`` means run all tests without a plan)."""
        if plan is None or self._plan is None or self._plan.path != plan.path:
            self._target_name = None
        elif self._target_name is not None and find_target(plan.plan, self._target_name) is None:
            self._target_name = None
        self._plan = plan

        if plan is None:
            LOGGER.info("test plan selection cleared")
        else:
            LOGGER.info("selected test plan %s (%s)", plan.name, plan.path)

    def select_target(self, target_name: str | None) -> TestTargetConfig | None:
        if target_name is None:
            self._target_name = None
            return None

        if self._plan is None:
            raise NoPlanSelectedError("select a test plan before selecting a target")

        target = find_target(self._plan.plan, target_name)
        if target is None:
            raise UnknownTargetError(target_name, self._plan.name)

        self._target_name = target_name
        return target

    def clear(self) -> None:
        self._plan = None
        self._target_name = None

    def selected_target(self) -> TestTargetConfig | None:
        if self._plan is None or self._target_name is None:
            return None
        return find_target(self._plan.plan, self._target_name)

    def is_test_included(self, test_id: str, target_name: str | None = None) -> bool:
        """
        Resolve ``test_id`` against the selected plan.

        Without a plan every test runs. A target absent from the plan is not
        constrained by it either.
        """
        if self._plan is None:
            return True

        name = target_name if target_name is not None else self._target_name
        if name is None:
            return True

        target = find_target(self._plan.plan, name)
        if target is None:
            return True

        return is_test_included(test_id, target)
