"""Domain records produced by the temporal-label backfill job."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from session_engine.core.schema import WorkSession


@dataclass(slots=True)
class LabelChange:
    """A session whose stored temporal label differs from the current rules."""

    session_id: str | int | None
    before: str | None
    after: str


@dataclass(slots=True)
class ReclassificationReport:
    """Outcome of a reclassification run over a batch of sessions."""

    classifier_version: str
    sessions: list["WorkSession"] = field(default_factory=list)
    changes: list[LabelChange] = field(default_factory=list)
    skipped: int = 0

    @property
    def changed(self) -> int:
        return len(self.changes)
