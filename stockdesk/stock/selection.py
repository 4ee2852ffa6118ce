"""Bulk selection of alerting parts for a single requisition hand-off.

States: EMPTY <-> HAS_SELECTION -> COMMITTED (terminal).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class SelectionState(str, Enum):
    EMPTY = "empty"
    HAS_SELECTION = "has_selection"
    COMMITTED = "committed"


class BulkSelection:
    """Selection set over part ids; insertion order is kept for the hand-off."""

    def __init__(self) -> None:
        self._selected: dict[str, None] = {}
        self._committed = False

    @property
    def state(self) -> SelectionState:
        if self._committed:
            return SelectionState.COMMITTED
        if self._selected:
            return SelectionState.HAS_SELECTION
        return SelectionState.EMPTY

    @property
    def selected(self) -> list[str]:
        return list(self._selected)

    @property
    def can_commit(self) -> bool:
        return self.state is SelectionState.HAS_SELECTION

    def __contains__(self, part_id: str) -> bool:
        return part_id in self._selected

    def __len__(self) -> int:
        return len(self._selected)

    def toggle(self, part_id: str) -> SelectionState:
        if self._committed:
            logger.debug("Selection already committed, ignoring toggle of %s", part_id)
            return self.state
        if part_id in self._selected:
            del self._selected[part_id]
        else:
            self._selected[part_id] = None
        return self.state

    def clear(self) -> None:
        if not self._committed:
            self._selected.clear()

    def commit(self, composer: Callable[[list[str]], Any]) -> Optional[Any]:
        """Hands the selected ids to `composer` once; no-op when not committable."""
        if not self.can_commit:
            logger.debug("Commit ignored in state %s", self.state.value)
            return None
        part_ids = self.selected
        logger.info("Committing selection of %d parts", len(part_ids))
        # a raising composer leaves the selection intact for a retry
        result = composer(part_ids)
        self._committed = True
        return result
