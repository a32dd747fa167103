"""
Test identifier normalization.

Identifiers are at most two levels deep (class, class/method) and may be
written either as ``Class.method`` or ``Class/method``.
"""

from __future__ import annotations

from dataclasses import dataclass

HIERARCHY_SEPARATOR = "/"
DOT_SEPARATOR = "."


@dataclass(frozen=True, slots=True)
class NormalizedTestId:
    """
    Canonical slash-separated test identifier.
    """

    normalized: str
    class_name: str


def normalize_test_id(test_id: str) -> NormalizedTestId:
    """Convert ``Class.method`` or ``Class/method`` into canonical form.

    Only the first ``.`` is treated as the hierarchy separator.
    """
    normalized = test_id.replace(DOT_SEPARATOR, HIERARCHY_SEPARATOR, 1)
    class_name = normalized.split(HIERARCHY_SEPARATOR, 1)[0]
    return NormalizedTestId(normalized=normalized, class_name=class_name)
