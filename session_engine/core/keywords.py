"""Title keyword classification for staff reports.

Rules are checked in order and the first marker found in the title wins, so a
title such as ``"PT 상담"`` is a PT session.  Matching is case-sensitive.
"""
from __future__ import annotations

from typing import Sequence

from session_engine.core.schema import KeywordLabel

KeywordRule = tuple[str, str]

KEYWORD_RULES: tuple[KeywordRule, ...] = (
    ("PT", "PT"),
    ("OT", "OT"),
    ("Consulting", "상담"),
)
FALLBACK_LABEL: KeywordLabel = "Other"


def classify_title(title: str | None, rules: Sequence[KeywordRule] = KEYWORD_RULES) -> str:
    text = title or ""
    for label, marker in rules:
        if marker in text:
            return label
    return FALLBACK_LABEL


def rule_labels(rules: Sequence[KeywordRule] = KEYWORD_RULES) -> tuple[str, ...]:
    """Output domain of a rule set, in check order, ending with the fallback."""

    labels: list[str] = []
    for label, _ in rules:
        if label not in labels:
            labels.append(label)
    if FALLBACK_LABEL not in labels:
        labels.append(FALLBACK_LABEL)
    return tuple(labels)
