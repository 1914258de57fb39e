"""Domain layer definitions."""

from .reclassification import LabelChange, ReclassificationReport

__all__ = [
    "LabelChange",
    "ReclassificationReport",
]
