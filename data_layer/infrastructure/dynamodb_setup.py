"""DynamoDB table creation and data loading.

4 tables: Parts, PurchaseRequests, Profiles, Notifications (names come from Settings)
"""
import boto3
import json
from decimal import Decimal
from botocore.exceptions import ClientError
from botocore.config import Config

import env_loader  # noqa: F401
from stockdesk.config import Settings

REGION = Settings.from_env().region_name
BOTO_CONFIG = Config(retries={"max_attempts": 3})


def table_definitions(settings: Settings = None) -> list:
    """Table specs named after the Settings the services read from."""
    settings = settings or Settings.from_env()
    return [
        {
            "TableName": settings.parts_table,
            "KeySchema": [
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
            "AttributeDefinitions": [
                {"AttributeName": "id", "AttributeType": "S"},
                {"AttributeName": "category", "AttributeType": "S"},
            ],
            "GlobalSecondaryIndexes": [
                {
                    "IndexName": "CategoryIndex",
                    "KeySchema": [
                        {"AttributeName": "category", "KeyType": "HASH"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                },
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
        {
            "TableName": settings.requests_table,
            "KeySchema": [
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
            "AttributeDefinitions": [
                {"AttributeName": "id", "AttributeType": "S"},
                {"AttributeName": "request_category", "AttributeType": "S"},
                {"AttributeName": "created_at", "AttributeType": "S"},
            ],
            "GlobalSecondaryIndexes": [
                {
                    "IndexName": "CategoryTimeIndex",
                    "KeySchema": [
                        {"AttributeName": "request_category", "KeyType": "HASH"},
                        {"AttributeName": "created_at", "KeyType": "RANGE"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                },
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
        {
            "TableName": settings.profiles_table,
            "KeySchema": [
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
            "AttributeDefinitions": [
                {"AttributeName": "id", "AttributeType": "S"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
        {
            "TableName": settings.notifications_table,
            "KeySchema": [
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
            "AttributeDefinitions": [
                {"AttributeName": "id", "AttributeType": "S"},
                {"AttributeName": "user_id", "AttributeType": "S"},
                {"AttributeName": "created_at", "AttributeType": "S"},
            ],
            "GlobalSecondaryIndexes": [
                {
                    "IndexName": "UserTimeIndex",
                    "KeySchema": [
                        {"AttributeName": "user_id", "KeyType": "HASH"},
                        {"AttributeName": "created_at", "KeyType": "RANGE"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                },
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
    ]


def convert_floats(obj):
    """DynamoDB rejects float; store Decimal instead."""
    if isinstance(obj, float):
        return Decimal(str(obj))
    if isinstance(obj, dict):
        return {k: convert_floats(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [convert_floats(i) for i in obj]
    return obj


def create_tables(region: str = REGION, client=None, settings: Settings = None):
    """Creates every table that does not exist yet."""
    dynamodb = client or boto3.client("dynamodb", region_name=region, config=BOTO_CONFIG)

    for table_def in table_definitions(settings):
        table_name = table_def["TableName"]
        try:
            dynamodb.describe_table(TableName=table_name)
            print(f"  ⏭️  {table_name} already exists, skipping")
        except ClientError as e:
            if e.response["Error"]["Code"] == "ResourceNotFoundException":
                print(f"  🔨 creating {table_name}...")
                dynamodb.create_table(**table_def)
                waiter = dynamodb.get_waiter("table_exists")
                waiter.wait(TableName=table_name)
                print(f"  ✓  {table_name} created")
            else:
                raise


def load_data_to_table(table_name: str, data: list, region: str = REGION, resource=None):
    """Writes rows with the batch writer."""
    dynamodb = resource or boto3.resource("dynamodb", region_name=region, config=BOTO_CONFIG)
    table = dynamodb.Table(table_name)
    rows = convert_floats(data)
    with table.batch_writer() as batch:
        for item in rows:
            batch.put_item(Item=item)
    print(f"  ✓  {table_name}: {len(rows)} rows loaded")


def _table_has_data(table_name: str, region: str = REGION, client=None) -> bool:
    dynamodb = client or boto3.client("dynamodb", region_name=region, config=BOTO_CONFIG)
    resp = dynamodb.scan(TableName=table_name, Limit=1, Select="COUNT")
    return resp.get("Count", 0) > 0


def load_all_data(data_dir: str = "data_layer/data", region: str = REGION, settings: Settings = None,
                  client=None, resource=None):
    """Loads parts.json and profiles.json (tables that already hold data are skipped)."""
    settings = settings or Settings.from_env()
    print("\n📤 Loading data into DynamoDB...\n")

    seeds = ((settings.parts_table, "parts.json"), (settings.profiles_table, "profiles.json"))
    for table_name, file_name in seeds:
        if _table_has_data(table_name, region, client=client):
            print(f"  ⏭️  {table_name} already populated, skipping")
            continue
        with open(f"{data_dir}/{file_name}", "r", encoding="utf-8") as f:
            load_data_to_table(table_name, json.load(f), region, resource=resource)

    print("\n✅ Seed data loaded")


def delete_tables(region: str = REGION, client=None, settings: Settings = None):
    """Deletes every table (use with care)."""
    dynamodb = client or boto3.client("dynamodb", region_name=region, config=BOTO_CONFIG)
    for table_def in table_definitions(settings):
        table_name = table_def["TableName"]
        try:
            dynamodb.delete_table(TableName=table_name)
            print(f"  🗑️  {table_name} deleted")
        except ClientError:
            print(f"  ⏭️  {table_name} not found, skipping")
