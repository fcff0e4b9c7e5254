"""DynamoDB repository for FAQ usage events."""

from typing import Dict, Any
import boto3


class DynamoDbRepository:
    """Thin wrapper so callers never touch the boto3 table directly."""

    def __init__(self, table_name: str, resource=None):
        self.table = (resource or boto3.resource("dynamodb")).Table(table_name)

    def put(self, item: Dict[str, Any]) -> None:
        """Insert an item."""
        self.table.put_item(Item=item)
