"""
Test inclusion resolution.

Decides whether a test identifier runs under a target's selection rules.

Precedence is fixed:
1. ``selected_tests`` non-empty -> only matching tests run
   (``skipped_tests`` is not consulted at all)
2. ``skipped_tests`` non-empty -> every test except matching ones runs
3. otherwise -> every test runs
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterable

from xcplan.core.domain.identifiers import (
    HIERARCHY_SEPARATOR,
    NormalizedTestId,
    normalize_test_id,
)

if TYPE_CHECKING:
    from xcplan.core.domain.types import TestTargetConfig


class SelectionMode(str, Enum):
    ALL = "all"
    SELECTED = "selected"
    SKIPPED = "skipped"


def selection_mode(target: TestTargetConfig) -> SelectionMode:
    """Return which rule list governs ``target``."""
    if target.selected_tests:
        return SelectionMode.SELECTED
    if target.skipped_tests:
        return SelectionMode.SKIPPED
    return SelectionMode.ALL


def matches_rule(test_id: NormalizedTestId, rule: str) -> bool:
    """
    True if ``rule`` names the test itself, its class, or a parent of it.
    """
    return (
        test_id.normalized == rule
        or test_id.normalized.startswith(rule + HIERARCHY_SEPARATOR)
        or rule == test_id.class_name
    )


def _matches_any(test_id: NormalizedTestId, rules: Iterable[str]) -> bool:
    return any(matches_rule(test_id, rule) for rule in rules)


def is_test_included(test_id: str, target: TestTargetConfig) -> bool:
    """Return True if ``test_id`` should run under ``target``.

    ``test_id`` may use ``Class.method`` or ``Class/method`` notation.
    """
    normalized = normalize_test_id(test_id)
    mode = selection_mode(target)

    if mode is SelectionMode.SELECTED:
        return _matches_any(normalized, target.selected_tests or ())

    if mode is SelectionMode.SKIPPED:
        return not _matches_any(normalized, target.skipped_tests or ())

    return True


def filter_included(test_ids: Iterable[str], target: TestTargetConfig) -> list[str]:
    """Return the included identifiers, preserving input order."""
    return [test_id for test_id in test_ids if is_test_included(test_id, target)]
