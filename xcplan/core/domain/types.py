"""Test plan document models.

This module defines the Pydantic models for an ``.xctestplan`` document.
JSON keys are camelCase; attributes are snake_case and bound through field
aliases. Models are immutable once parsed and retain unrecognised keys so
that a re-serialised document loses nothing.
"""

# pylint: disable=line-too-long,missing-class-docstring
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ---------------------------------------------------------------------------
# Common base
# ---------------------------------------------------------------------------


class PlanModel(BaseModel):
    """Base for all plan document models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_alias=True,
        validate_by_name=True,
        extra="allow",
        frozen=True,
    )

    def to_json_obj(self) -> dict[str, Any]:
        """Dump to a camelCase JSON object, omitting fields never set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


# ---------------------------------------------------------------------------
# Targets
# ---------------------------------------------------------------------------


class TargetReference(PlanModel):
    """
    Reference to the buildable unit owning the tests.

    ``name`` is a lookup key only; resolving it against real build targets is
    the caller's job.
    """

    container_path: str = Field(..., description='e.g. "container:MyApp.xcodeproj"')
    identifier: str
    name: str


class TestTargetConfig(PlanModel):
    """
    Per-target test selection and execution flags.

    ``selected_tests`` and ``skipped_tests`` hold identifiers in
    ``Class`` or ``Class/method`` form.
    """

    __test__ = False

    target: TargetReference
    selected_tests: tuple[str, ...] | None = None
    skipped_tests: tuple[str, ...] | None = None
    parallelizable: bool | None = None
    random_execution_ordering: bool | None = None

    @property
    def name(self) -> str:
        return self.target.name


# ---------------------------------------------------------------------------
# Configurations and default options
# ---------------------------------------------------------------------------


class SanitizerOption(PlanModel):
    enabled: bool


class LocationScenario(PlanModel):
    identifier: str
    reference_type: str


TestExecutionOrdering = Literal["lexical", "random"]
TestRepetitionMode = Literal["none", "untilFailure", "retryOnFailure", "fixedIterations"]


class ConfigurationOptions(PlanModel):
    language: str | None = None
    region: str | None = None
    test_execution_ordering: TestExecutionOrdering | None = None
    address_sanitizer: SanitizerOption | None = None
    thread_sanitizer: SanitizerOption | None = None
    undefined_behavior_sanitizer: SanitizerOption | None = None
    location_scenario: LocationScenario | None = None


class PlanConfiguration(PlanModel):
    """
    Named execution-option bundle. Applies plan-wide, not per target.
    """

    name: str
    options: ConfigurationOptions = Field(default_factory=ConfigurationOptions)


class DefaultOptions(PlanModel):
    """
    Plan-wide defaults. Descriptive only; nothing here affects inclusion.
    """

    # Xcode writes either a flag or an object listing coverage targets.
    code_coverage: bool | dict[str, Any] | None = None
    test_timeouts_enabled: bool | None = None
    default_test_execution_time_allowance: int | None = Field(default=None, ge=0)
    maximum_test_execution_time_allowance: int | None = Field(default=None, ge=0)
    test_repetition_mode: TestRepetitionMode | None = None
    maximum_test_repetitions: int | None = Field(default=None, ge=0)


# ---------------------------------------------------------------------------
# Root document
# ---------------------------------------------------------------------------


class TestPlanDocument(PlanModel):
    """
    Root aggregate of an ``.xctestplan`` file.

    Absent top-level keys are treated as unset rather than as errors.
    """

    __test__ = False

    configurations: tuple[PlanConfiguration, ...] = ()
    default_options: DefaultOptions = Field(default_factory=DefaultOptions)
    test_targets: tuple[TestTargetConfig, ...] = ()
    version: int | None = None

    @classmethod
    def from_json_obj(cls, obj: dict[str, Any]) -> TestPlanDocument:
        """Create a TestPlanDocument from a JSON-compatible object.

        Only camelCase keys bind to fields; snake_case keys stay extras.
        """
        return cls.model_validate(obj, by_alias=True, by_name=False)
