"""Requisition hand-off: turns a committed part selection into purchase requests."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from botocore.exceptions import BotoCoreError, ClientError

from stockdesk.exceptions import RequisitionError
from stockdesk.models.inventory import (
    Part,
    PurchaseRequest,
    RequestPriority,
    StockStatus,
)
from stockdesk.services.base_service import BaseService
from stockdesk.stock.classifier import STATUS_LABELS

logger = logging.getLogger(__name__)


def handoff_query(part_ids: Iterable[str]) -> str:
    """Query string understood by the requisition form."""
    return "partId=" + ",".join(part_ids)


@dataclass(frozen=True)
class RequisitionDraft:
    part_ids: list[str]

    @property
    def query(self) -> str:
        return handoff_query(self.part_ids)


class RequisitionComposer(BaseService):
    """Commit target for BulkSelection; also writes the resulting requests."""

    def __init__(self, **kwargs: Any):
        super().__init__(service_name="RequisitionComposer", **kwargs)

    def __call__(self, part_ids: list[str]) -> RequisitionDraft:
        draft = RequisitionDraft(part_ids=list(part_ids))
        logger.info("Requisition draft for %d parts: %s", len(draft.part_ids), draft.query)
        return draft

    def build_requests(
        self,
        draft: RequisitionDraft,
        parts_by_id: dict[str, Part],
        user_id: Optional[str] = None,
    ) -> list[PurchaseRequest]:
        """One request per known part, sized to bring it back to threshold."""
        requests = []
        for part_id in draft.part_ids:
            part = parts_by_id.get(part_id)
            if part is None:
                logger.warning("Unknown part in requisition: %s", part_id)
                continue
            status = part.status
            priority = RequestPriority.URGENT if status is StockStatus.CRITICAL else RequestPriority.NORMAL
            requests.append(
                PurchaseRequest(
                    request_id=f"REQ-{uuid.uuid4().hex[:8].upper()}",
                    part_id=part.id,
                    part_name=part.name,
                    sku=part.sku,
                    quantity=max(part.min_quantity - part.quantity, 1),
                    unit=part.unit,
                    priority=priority,
                    justification=(
                        f"{STATUS_LABELS[status]}: {part.quantity}/{part.min_quantity} {part.unit} on hand"
                    ),
                    user_id=user_id,
                )
            )
        return requests

    def submit(self, requests: list[PurchaseRequest]) -> list[str]:
        """Writes the requests and their notifications; returns the request ids."""
        written = []
        for request in requests:
            try:
                self.requests_table.put_item(Item=request.to_item())
            except (ClientError, BotoCoreError) as e:
                logger.error("Requisition write error [%s]: %s", request.request_id, e)
                raise RequisitionError(
                    f"Could not submit {request.request_id}: {e}", written_ids=written
                ) from e
            written.append(request.request_id)

            try:
                self.notifications_table.put_item(Item=self._notification_for(request))
            except (ClientError, BotoCoreError) as e:
                logger.error("Notification write error [%s]: %s", request.request_id, e)
                raise RequisitionError(
                    f"Stored {request.request_id} but could not notify: {e}", written_ids=written
                ) from e

        logger.info("%d purchase requests submitted", len(written))
        return written

    @staticmethod
    def _notification_for(request: PurchaseRequest) -> dict:
        item = {
            "id": str(uuid.uuid4()),
            "title": f"New purchase request: {request.part_name}",
            "message": f"{request.quantity} {request.unit} of {request.sku} requested ({request.priority.value}).",
            "type": "critical" if request.priority is RequestPriority.URGENT else "info",
            "read": False,
            "created_at": request.created_at,
        }
        if request.user_id:
            item["user_id"] = request.user_id
        return item
