"""
Semantic test: target accessors.

Invariant:
get_target_names keeps document order and duplicates; find_target returns
the first exact, case-sensitive match or None.
"""

from __future__ import annotations

from xcplan.core.domain.types import TestPlanDocument
from xcplan.plans.parser import find_target, get_target_name, get_target_names


def make_target_obj(name: str, identifier: str, **extra) -> dict:
    data = {
        "target": {
            "containerPath": "container:MyApp.xcodeproj",
            "identifier": identifier,
            "name": name,
        },
    }
    data.update(extra)
    return data


def make_plan() -> TestPlanDocument:
    return TestPlanDocument.from_json_obj(
        {
            "testTargets": [
                make_target_obj("UnitTests", "1", selectedTests=["A"]),
                make_target_obj("UITests", "2"),
                make_target_obj("UnitTests", "3", skippedTests=["B"]),
            ],
            "version": 1,
        }
    )


def test_target_names_keep_order_and_duplicates() -> None:
    assert get_target_names(make_plan()) == ["UnitTests", "UITests", "UnitTests"]


def test_target_names_of_empty_plan() -> None:
    assert get_target_names(TestPlanDocument()) == []


def test_find_target_returns_first_match() -> None:
    target = find_target(make_plan(), "UnitTests")

    assert target is not None
    assert target.target.identifier == "1"
    assert get_target_name(target) == "UnitTests"


def test_find_target_absent_or_case_mismatch_is_none() -> None:
    plan = make_plan()

    assert find_target(plan, "IntegrationTests") is None
    assert find_target(plan, "unittests") is None
    assert find_target(plan, "UnitTests ") is None
