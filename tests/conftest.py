"""Shared fixtures: DynamoDB resource mocks."""

import pytest
from unittest.mock import MagicMock

from stockdesk.config import Settings


@pytest.fixture
def tables():
    return {}


@pytest.fixture
def dynamodb(tables):
    """DynamoDB resource mock returning one table mock per table name."""
    resource = MagicMock()
    resource.Table.side_effect = lambda name: tables.setdefault(name, MagicMock(name=name))
    return resource


@pytest.fixture
def settings():
    return Settings(region_name="us-east-1")
