"""
Semantic test: shaping a document keeps every field.

Invariant:
Dumping a parsed plan yields the original JSON object: recognised fields
come back under their camelCase keys, unknown keys are preserved, and
fields that were absent stay absent.
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from xcplan.plans.parser import dump_test_plan, parse_test_plan_bytes

XCODE_PLAN = {
    "configurations": [
        {
            "id": "F00D",
            "name": "Configuration 1",
            "options": {
                "locationScenario": {"identifier": "London, England", "referenceType": "built-in"},
                "threadSanitizer": {"enabled": True},
                "undefinedBehaviorSanitizer": {"enabled": False},
            },
        }
    ],
    "defaultOptions": {
        "codeCoverage": {"targets": [{"containerPath": "container:App.xcodeproj", "identifier": "X", "name": "App"}]},
        "environmentVariableEntries": [{"key": "MODE", "value": "ci"}],
        "maximumTestExecutionTimeAllowance": 600,
        "targetForVariableExpansion": {"containerPath": "container:App.xcodeproj", "identifier": "X", "name": "App"},
    },
    "testTargets": [
        {
            "parallelizable": True,
            "skippedTests": ["NetworkTests", "LoginTests/testSlow()"],
            "target": {"containerPath": "container:App.xcodeproj", "identifier": "Y", "name": "AppTests"},
        }
    ],
    "version": 1,
}


def test_dump_returns_the_original_document() -> None:
    parsed = parse_test_plan_bytes(json.dumps(XCODE_PLAN), path="App.xctestplan")

    assert dump_test_plan(parsed.plan) == XCODE_PLAN


def test_unknown_keys_are_reachable_as_extras() -> None:
    parsed = parse_test_plan_bytes(json.dumps(XCODE_PLAN), path="App.xctestplan")

    extras = parsed.plan.default_options.model_extra or {}
    assert extras["environmentVariableEntries"] == [{"key": "MODE", "value": "ci"}]


def test_parsed_models_are_immutable() -> None:
    parsed = parse_test_plan_bytes(json.dumps(XCODE_PLAN), path="App.xctestplan")

    with pytest.raises(ValidationError):
        parsed.plan.test_targets[0].target.name = "Other"  # type: ignore[misc]


def test_snake_case_keys_are_not_fields() -> None:
    target = {"target": {"containerPath": "c", "identifier": "i", "name": "UnitTests"}}
    document = {"test_targets": [target], "version": 1}

    parsed = parse_test_plan_bytes(json.dumps(document), path="Snake.xctestplan")

    assert parsed.plan.test_targets == ()
    dumped = dump_test_plan(parsed.plan)
    assert dumped == document
    assert "testTargets" not in dumped
