"""
Semantic test: a target without selection rules includes every test.

Invariant:
selectedTests and skippedTests both absent or empty -> every identifier is
included.
"""

from __future__ import annotations

import pytest

from xcplan.core.domain.types import TargetReference, TestTargetConfig
from xcplan.core.resolution.inclusion import (
    SelectionMode,
    is_test_included,
    selection_mode,
)


def make_target(**overrides) -> TestTargetConfig:
    data = {
        "target": TargetReference(
            container_path="container:MyApp.xcodeproj",
            identifier="ABC123",
            name="MyAppTests",
        ),
    }
    data.update(overrides)
    return TestTargetConfig(**data)


@pytest.mark.parametrize(
    "target",
    [
        make_target(),
        make_target(selected_tests=[], skipped_tests=[]),
        make_target(selected_tests=None, skipped_tests=[]),
    ],
)
@pytest.mark.parametrize("test_id", ["ClassA", "ClassA/testX", "ClassB.testY", "", "/"])
def test_every_identifier_included_without_rules(target: TestTargetConfig, test_id: str) -> None:
    assert selection_mode(target) is SelectionMode.ALL
    assert is_test_included(test_id, target) is True
