"""Public API for the xcplan package.

Only symbols imported here are considered part of the stable,
supported external interface.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

# ----------------------------------------------------------------------
# Errors
# ----------------------------------------------------------------------
from xcplan.core.domain.errors import (
    NoPlanSelectedError,
    ParseError,
    SessionError,
    UnknownTargetError,
    XcPlanError,
)

# ----------------------------------------------------------------------
# Identifiers and inclusion
# ----------------------------------------------------------------------
from xcplan.core.domain.identifiers import NormalizedTestId, normalize_test_id

# ----------------------------------------------------------------------
# Plan document model
# ----------------------------------------------------------------------
from xcplan.core.domain.types import (
    ConfigurationOptions,
    DefaultOptions,
    PlanConfiguration,
    TargetReference,
    TestPlanDocument,
    TestTargetConfig,
)
from xcplan.core.resolution.inclusion import (
    SelectionMode,
    filter_included,
    is_test_included,
    selection_mode,
)

# ----------------------------------------------------------------------
# Parsing, repository and session
# ----------------------------------------------------------------------
from xcplan.plans.parser import (
    ParsedPlan,
    dump_test_plan,
    find_target,
    get_target_name,
    get_target_names,
    parse_test_plan,
    parse_test_plan_bytes,
    plan_name_from_path,
    validate_against_schema,
)
from xcplan.plans.repository import (
    PlanLoadFailure,
    PlanLoadResult,
    PlanRepository,
    load_all,
    load_all_with_failures,
)
from xcplan.plans.session import TestPlanSession
from xcplan.plans.summary import PlanSummary, describe_plan, summarize_plan

# ----------------------------------------------------------------------
# Public API definition
# ----------------------------------------------------------------------

__all__ = [
    # Errors
    "XcPlanError",
    "ParseError",
    "SessionError",
    "NoPlanSelectedError",
    "UnknownTargetError",

    # Identifiers and inclusion
    "NormalizedTestId",
    "normalize_test_id",
    "SelectionMode",
    "selection_mode",
    "is_test_included",
    "filter_included",

    # Model
    "TargetReference",
    "TestTargetConfig",
    "ConfigurationOptions",
    "PlanConfiguration",
    "DefaultOptions",
    "TestPlanDocument",

    # Parsing
    "ParsedPlan",
    "parse_test_plan",
    "parse_test_plan_bytes",
    "plan_name_from_path",
    "validate_against_schema",
    "dump_test_plan",
    "get_target_name",
    "get_target_names",
    "find_target",

    # Repository and session
    "PlanLoadFailure",
    "PlanLoadResult",
    "PlanRepository",
    "load_all",
    "load_all_with_failures",
    "TestPlanSession",

    # Summary
    "PlanSummary",
    "summarize_plan",
    "describe_plan",

    # Version
    "__version__",
]

# ----------------------------------------------------------------------
# Package version
# ----------------------------------------------------------------------

try:
    __version__ = version("xcplan")
except PackageNotFoundError:
    __version__ = "0.0.0"
