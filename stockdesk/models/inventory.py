"""Maintenance inventory data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class StockStatus(str, Enum):
    CRITICAL = "critical"
    LOW_STOCK = "low_stock"
    IN_STOCK = "in_stock"


class Category(str, Enum):
    MECHANICAL = "mechanical"
    ELECTRICAL = "electrical"
    HYDRAULIC = "hydraulic"
    TRANSMISSION = "transmission"
    LUBRICANTS = "lubricants"
    SUPPLIES = "supplies"


class RequestPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    URGENT = "urgent"


class RequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    PURCHASED = "purchased"


class RequestCategory(str, Enum):
    MATERIAL = "material"
    SERVICE = "service"


class UserRole(str, Enum):
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"
    MANAGER = "manager"
    TECHNICIAN = "technician"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


def to_native(obj: Any) -> Any:
    """Converts DynamoDB Decimal values (nested) to int/float."""
    if isinstance(obj, Decimal):
        return int(obj) if obj == int(obj) else float(obj)
    if isinstance(obj, dict):
        return {k: to_native(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [to_native(i) for i in obj]
    return obj


@dataclass(frozen=True)
class Part:
    id: str
    quantity: int
    min_quantity: int
    name: str = ""
    sku: str = ""
    category: str = ""
    location: str = ""
    unit: str = "UN"
    cost: float = 0.0
    supplier: str = ""
    lead_time: int = 0
    manufacturer: str = ""
    model: str = ""
    image_url: Optional[str] = None

    @property
    def status(self) -> StockStatus:
        # Derived on every read so it never drifts from quantity.
        from stockdesk.stock.classifier import classify

        return classify(self.quantity, self.min_quantity)

    @classmethod
    def from_item(cls, item: dict) -> "Part":
        """Builds a Part from a store row (snake_case keys)."""
        item = to_native(item)
        min_quantity = item.get("min_quantity")
        return cls(
            id=str(item["id"]),
            quantity=int(item.get("quantity") or 0),
            min_quantity=int(min_quantity) if min_quantity is not None else 0,
            name=item.get("name", ""),
            sku=item.get("sku", ""),
            category=item.get("category", ""),
            location=item.get("location", ""),
            unit=item.get("unit", "UN"),
            cost=float(item.get("cost") or 0.0),
            supplier=item.get("supplier", ""),
            lead_time=int(item.get("lead_time") or 0),
            manufacturer=item.get("manufacturer", ""),
            model=item.get("model", ""),
            image_url=item.get("image_url"),
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass
class PurchaseRequest:
    request_id: str
    part_id: str
    part_name: str
    sku: str
    quantity: int
    unit: str
    priority: RequestPriority = RequestPriority.NORMAL
    justification: str = ""
    status: RequestStatus = RequestStatus.PENDING
    request_category: RequestCategory = RequestCategory.MATERIAL
    user_id: Optional[str] = None
    created_at: str = field(default_factory=lambda: datetime.utcnow().isoformat())

    def to_item(self) -> dict:
        item = {
            "id": self.request_id,
            "part_id": self.part_id,
            "part_name": self.part_name,
            "sku": self.sku,
            "quantity": self.quantity,
            "unit": self.unit,
            "priority": self.priority.value,
            "justification": self.justification,
            "status": self.status.value,
            "request_category": self.request_category.value,
            "created_at": self.created_at,
        }
        if self.user_id:
            item["user_id"] = self.user_id
        return item


@dataclass(frozen=True)
class UserProfile:
    user_id: str
    name: str
    email: str
    role: UserRole = UserRole.TECHNICIAN
    status: UserStatus = UserStatus.ACTIVE
    department: Optional[str] = None
