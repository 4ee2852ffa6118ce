from stockdesk.models.inventory import (
    Category,
    Part,
    PurchaseRequest,
    RequestCategory,
    RequestPriority,
    RequestStatus,
    StockStatus,
    UserProfile,
    UserRole,
    UserStatus,
)

__all__ = [
    "Category",
    "Part",
    "PurchaseRequest",
    "RequestCategory",
    "RequestPriority",
    "RequestStatus",
    "StockStatus",
    "UserProfile",
    "UserRole",
    "UserStatus",
]
