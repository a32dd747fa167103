"""
Semantic test: exclusion mode.

Invariant:
With empty selectedTests and non-empty skippedTests every test runs except
those matching a skipped entry (same match rules as selection).
"""

from __future__ import annotations

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


def test_skipped_method_is_excluded_and_siblings_run() -> None:
    target = make_target(skipped_tests=["ClassA/testX"])

    assert selection_mode(target) is SelectionMode.SKIPPED
    assert not is_test_included("ClassA/testX", target)
    assert is_test_included("ClassA/testY", target)
    assert is_test_included("ClassB/testX", target)


def test_skipped_class_excludes_all_its_methods() -> None:
    target = make_target(skipped_tests=["ClassA"])

    assert not is_test_included("ClassA", target)
    assert not is_test_included("ClassA/testX", target)
    assert not is_test_included("ClassA.testY", target)
    assert is_test_included("ClassB/testX", target)


def test_empty_selected_list_falls_through_to_skipped() -> None:
    target = make_target(selected_tests=[], skipped_tests=["ClassA"])

    assert selection_mode(target) is SelectionMode.SKIPPED
    assert not is_test_included("ClassA/testX", target)
    assert is_test_included("ClassB/testX", target)
