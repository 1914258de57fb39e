from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tally:
    """Per-label counts over the sessions that passed every predicate.

    ``total`` always equals ``sum(counts.values())``.  Labels outside the
    classifier's domain are kept apart in ``unrecognized``.
    """

    counts: dict[str, int]
    total: int = 0
    unrecognized: dict[str, int] = field(default_factory=dict)

    def __getitem__(self, label: str) -> int:
        return self.counts[label]


def aggregate(
    sessions: Iterable[T],
    classifier: Callable[[T], Hashable | None],
    *predicates: Callable[[T], bool],
    labels: Sequence[str],
) -> Tally:
    counts = {label: 0 for label in labels}
    unrecognized: dict[str, int] = {}
    total = 0

    for session in sessions:
        if not all(predicate(session) for predicate in predicates):
            continue
        label = classifier(session)
        if label in counts:
            counts[label] += 1
            total += 1
        else:
            key = str(label)
            unrecognized[key] = unrecognized.get(key, 0) + 1

    if unrecognized:
        logger.warning(
            "ignored %d session(s) with labels outside %s: %s",
            sum(unrecognized.values()),
            list(labels),
            unrecognized,
        )
    return Tally(counts=counts, total=total, unrecognized=unrecognized)
