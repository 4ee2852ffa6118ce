"""Base class for services backed by the hosted DynamoDB tables."""

from __future__ import annotations

import logging
from typing import Any, Optional

import boto3

from stockdesk.config import Settings

logger = logging.getLogger(__name__)


class BaseService:
    """Holds the DynamoDB resource and table references."""

    def __init__(
        self,
        service_name: str,
        settings: Optional[Settings] = None,
        dynamodb_resource: Optional[Any] = None,
    ):
        self.service_name = service_name
        self.settings = settings or Settings.from_env()

        # AWS resource, injectable for tests
        self.dynamodb = dynamodb_resource or boto3.resource(
            "dynamodb", region_name=self.settings.region_name
        )

        self.parts_table = self.dynamodb.Table(self.settings.parts_table)
        self.requests_table = self.dynamodb.Table(self.settings.requests_table)
        self.profiles_table = self.dynamodb.Table(self.settings.profiles_table)
        self.notifications_table = self.dynamodb.Table(self.settings.notifications_table)

        logger.debug("Service started: %s (region: %s)", service_name, self.settings.region_name)
