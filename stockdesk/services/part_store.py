"""Part snapshot fetch from the hosted Parts table.

The fetch is modelled as an explicit request/response boundary with three
observable states: loading, ready(parts) and failed(error).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from stockdesk.models.inventory import Part
from stockdesk.services.base_service import BaseService

logger = logging.getLogger(__name__)

FAILURE_NOTICE = "Could not load parts from the inventory store."


class FetchState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult:
    state: FetchState
    parts: list[Part] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def loading(cls) -> "FetchResult":
        return cls(state=FetchState.LOADING)

    @classmethod
    def ready(cls, parts: list[Part]) -> "FetchResult":
        return cls(state=FetchState.READY, parts=list(parts))

    @classmethod
    def failed(cls, error: str) -> "FetchResult":
        return cls(state=FetchState.FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.state is FetchState.READY


class PartStore(BaseService):
    """Reads the Parts table; never mutates it."""

    def __init__(self, **kwargs: Any):
        super().__init__(service_name="PartStore", **kwargs)

    def _scan_all(self, **scan_kwargs: Any) -> list[dict]:
        items: list[dict] = []
        response = self.parts_table.scan(**scan_kwargs)
        items.extend(response.get("Items", []))
        while "LastEvaluatedKey" in response:
            response = self.parts_table.scan(
                ExclusiveStartKey=response["LastEvaluatedKey"], **scan_kwargs
            )
            items.extend(response.get("Items", []))
        return items

    def fetch_parts(self) -> FetchResult:
        """Fetches the full parts snapshot; failures come back as FAILED results."""
        try:
            items = self._scan_all()
        except (ClientError, BotoCoreError) as e:
            logger.error("Parts fetch error: %s", e)
            return FetchResult.failed(str(e))

        parts = []
        for item in items:
            if "id" not in item:
                logger.warning("Skipping part row without id: %s", item.get("sku", "?"))
                continue
            parts.append(Part.from_item(item))

        logger.info("%d parts loaded", len(parts))
        return FetchResult.ready(parts)

    def get_part(self, part_id: str) -> Optional[Part]:
        try:
            response = self.parts_table.get_item(Key={"id": part_id})
        except (ClientError, BotoCoreError) as e:
            logger.error("Part read error [%s]: %s", part_id, e)
            return None
        item = response.get("Item")
        return Part.from_item(item) if item else None

    def check_connection(self) -> bool:
        """True when a one-row scan of the Parts table succeeds."""
        try:
            self.parts_table.scan(Limit=1, ProjectionExpression="id")
            return True
        except (ClientError, BotoCoreError) as e:
            logger.warning("Inventory store unreachable: %s", e)
            return False


class PartsLoader:
    """Tracks one fetch cycle: starts LOADING, ends READY or FAILED."""

    def __init__(self, store: PartStore):
        self._store = store
        self.result = FetchResult.loading()

    @property
    def state(self) -> FetchState:
        return self.result.state

    def load(self) -> FetchResult:
        self.result = FetchResult.loading()
        self.result = self._store.fetch_parts()
        return self.result
