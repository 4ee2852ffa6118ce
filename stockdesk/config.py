"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_REGION = "us-west-2"


@dataclass(frozen=True)
class Settings:
    region_name: str = DEFAULT_REGION
    parts_table: str = "Parts"
    requests_table: str = "PurchaseRequests"
    profiles_table: str = "Profiles"
    notifications_table: str = "Notifications"
    alert_preview_limit: int = 5

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            region_name=os.environ.get("AWS_DEFAULT_REGION", DEFAULT_REGION),
            parts_table=os.environ.get("STOCKDESK_PARTS_TABLE", "Parts"),
            requests_table=os.environ.get("STOCKDESK_REQUESTS_TABLE", "PurchaseRequests"),
            profiles_table=os.environ.get("STOCKDESK_PROFILES_TABLE", "Profiles"),
            notifications_table=os.environ.get("STOCKDESK_NOTIFICATIONS_TABLE", "Notifications"),
            alert_preview_limit=int(os.environ.get("STOCKDESK_ALERT_PREVIEW_LIMIT", "5")),
        )
