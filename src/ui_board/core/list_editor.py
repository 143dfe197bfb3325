"""Deferred list mutation for index-addressed list editors.

Rows are walked by index while rendering, so removing an entry mid-walk
would shift every later index. Removal intents are collected during the
walk and applied once it has finished.

// [LAW:single-enforcer] EditPass.apply is the only place rows are deleted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import MutableSequence, TypeVar

T = TypeVar("T")


@dataclass
class EditPass:
    """Mutation intents collected during one traversal of a list."""

    removals: set[int] = field(default_factory=set)

    def mark_removed(self, index: int) -> None:
        self.removals.add(index)

    @property
    def structural(self) -> bool:
        return bool(self.removals)

    def apply(self, entries: MutableSequence[T]) -> list[T]:
        """Delete marked rows, highest index first. Returns removed entries in list order.

        Indices outside the list are dropped.
        """
        valid = sorted((i for i in self.removals if 0 <= i < len(entries)), reverse=True)
        removed = [entries.pop(i) for i in valid]
        self.removals.clear()
        removed.reverse()
        return removed
