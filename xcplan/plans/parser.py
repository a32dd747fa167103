"""
Test plan parsing and read-only accessors.

Turns raw ``.xctestplan`` bytes into a ``ParsedPlan``. Locating plan files is
the caller's concern; this module only reads the paths it is handed.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match
from pydantic import ValidationError

from xcplan.core.domain.errors import ParseError
from xcplan.core.domain.types import TestPlanDocument, TestTargetConfig

LOGGER = logging.getLogger(__name__)

TEST_PLAN_SUFFIX = ".xctestplan"
SCHEMA_PATH = Path(__file__).resolve().parent.parent / "core" / "schemas" / "xctestplan.schema.json"


@dataclass(frozen=True, slots=True)
class ParsedPlan:
    """
    A plan document tagged with where it came from.

    ``name`` is cosmetic and not unique; ``path`` identifies the plan.
    """

    name: str
    path: str
    plan: TestPlanDocument


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------

def plan_name_from_path(path: str | Path, *, suffix: str = TEST_PLAN_SUFFIX) -> str:
    """Return the base name of ``path`` with ``suffix`` stripped."""
    base = Path(path).name
    if suffix and base.endswith(suffix) and len(base) > len(suffix):
        return base[: -len(suffix)]
    return base


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

@lru_cache(maxsize=1)
def load_plan_schema() -> dict[str, Any]:
    """Load the packaged JSON Schema for plan documents."""
    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)


def validate_against_schema(obj: Any, *, path: str | Path | None = None) -> None:
    """Raise ParseError if ``obj`` violates the plan document schema."""
    validator = Draft202012Validator(load_plan_schema())
    error = best_match(validator.iter_errors(obj))
    if error is None:
        return

    location = "/".join(str(p) for p in error.absolute_path) or "<root>"
    raise ParseError(f"schema violation at {location}: {error.message}", path=path)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_test_plan_bytes(
    data: bytes | str,
    *,
    path: str | Path,
    validate_schema: bool = False,
) -> ParsedPlan:
    """
    Parse plan document content read from ``path``.

    Missing top-level keys are tolerated. Malformed JSON, a non-object root,
    or fields of the wrong shape raise ParseError.
    """
    try:
        obj = json.loads(data)
    except (ValueError, RecursionError) as exc:
        raise ParseError(f"not a well-formed JSON document: {exc}", path=path) from exc

    if not isinstance(obj, dict):
        raise ParseError(
            f"expected a JSON object at the top level, got {type(obj).__name__}",
            path=path,
        )

    if validate_schema:
        validate_against_schema(obj, path=path)

    try:
        plan = TestPlanDocument.from_json_obj(obj)
    except ValidationError as exc:
        raise ParseError(f"unexpected document shape: {exc}", path=path) from exc

    parsed = ParsedPlan(name=plan_name_from_path(path), path=str(path), plan=plan)

    LOGGER.debug(
        "parsed test plan %s (%d target(s))",
        parsed.path,
        len(plan.test_targets),
    )
    return parsed


def parse_test_plan(path: str | Path, *, validate_schema: bool = False) -> ParsedPlan:
    """Read and parse the plan document at ``path``."""
    try:
        data = Path(path).read_bytes()
    except (OSError, ValueError) as exc:
        raise ParseError(f"cannot read test plan: {exc}", path=path) from exc

    return parse_test_plan_bytes(data, path=path, validate_schema=validate_schema)


def dump_test_plan(plan: TestPlanDocument) -> dict[str, Any]:
    """Serialize a plan back into its JSON object form."""
    return plan.to_json_obj()


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------

def get_target_name(target: TestTargetConfig) -> str:
    return target.target.name


def get_target_names(plan: TestPlanDocument) -> list[str]:
    """Target names in document order. Duplicates are kept."""
    return [get_target_name(t) for t in plan.test_targets]


def find_target(plan: TestPlanDocument, target_name: str) -> TestTargetConfig | None:
    """
    First target whose name equals ``target_name`` exactly (case-sensitive).
    """
    for target in plan.test_targets:
        if get_target_name(target) == target_name:
            return target
    return None
