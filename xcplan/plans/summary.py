from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List

from xcplan.core.resolution.inclusion import selection_mode
from xcplan.plans.parser import ParsedPlan, get_target_names

# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TargetSummary:
    name: str
    mode: str
    rule_count: int


@dataclass(frozen=True, slots=True)
class PlanSummary:
    name: str
    path: str
    target_count: int
    target_names: List[str]
    configuration_names: List[str]
    targets: List[TargetSummary]
    warnings: List[str]


# ---------------------------------------------------------------------------
# Summary builder
# ---------------------------------------------------------------------------

def describe_plan(parsed: ParsedPlan) -> str:
    return f"{len(parsed.plan.test_targets)} test target(s) - {parsed.path}"


def summarize_plan(parsed: ParsedPlan) -> PlanSummary:
    warnings: list[str] = []
    targets: list[TargetSummary] = []

    plan = parsed.plan
    names = get_target_names(plan)

    if not plan.test_targets:
        warnings.append("Test plan contains no test targets")

    duplicates = sorted(name for name, count in Counter(names).items() if count > 1)
    for name in duplicates:
        warnings.append(
            f"Target {name} appears more than once; only the first entry is used"
        )

    for target in plan.test_targets:
        mode = selection_mode(target)
        selected = target.selected_tests or ()
        skipped = target.skipped_tests or ()

        if selected and skipped:
            warnings.append(
                f"Target {target.target.name} has both selectedTests and "
                f"skippedTests; skippedTests is ignored"
            )

        targets.append(
            TargetSummary(
                name=target.target.name,
                mode=mode.value,
                rule_count=len(selected) if selected else len(skipped),
            )
        )

    return PlanSummary(
        name=parsed.name,
        path=parsed.path,
        target_count=len(plan.test_targets),
        target_names=names,
        configuration_names=[c.name for c in plan.configurations],
        targets=targets,
        warnings=warnings,
    )


# ---------------------------------------------------------------------------
# Pretty printer
# ---------------------------------------------------------------------------

def print_plan_summary(summary: PlanSummary) -> None:
    print()
    print(f"Test plan: {summary.name}")
    print("=" * 60)
    print(f"Path           : {summary.path}")
    print(f"Targets        : {summary.target_count}")
    if summary.configuration_names:
        print(f"Configurations : {', '.join(summary.configuration_names)}")
    print()

    for target in summary.targets:
        print(f"  {target.name:<30} {target.mode:<9} rules={target.rule_count}")

    if summary.warnings:
        print()
        print("Warnings:")
        for warning in summary.warnings:
            print(f"  - {warning}")
