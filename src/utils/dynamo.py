"""
DynamoDB utility functions for data access.

All homestead records share a single table. Every record a user owns lives in
that user's partition (``USER#<user_id>``), so a query can only ever return
rows belonging to the user whose identifier built the key.
"""
import os
import json
from decimal import Decimal
from typing import Dict, List, Optional, Any
import boto3
from boto3.dynamodb.conditions import Key

# Singleton instance
_dynamo_instance = None

def get_dynamo() -> 'DynamoDBClient':
    """
    Get the process-wide DynamoDB client for the homestead table.

    The client is created on first use and reused across warm invocations.
    Services resolve it lazily so tests can patch this function per module.

    Raises:
        EnvironmentError: If HOMESTEAD_TABLE_NAME is not set
    """
    global _dynamo_instance
    if _dynamo_instance is None:
        table_name = os.environ.get('HOMESTEAD_TABLE_NAME')
        if not table_name:
            raise EnvironmentError(
                "HOMESTEAD_TABLE_NAME environment variable not set; "
                "it must name the homestead DynamoDB table."
            )
        _dynamo_instance = DynamoDBClient(table_name)
    return _dynamo_instance

def to_dynamo(item: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert a JSON-compatible dict into DynamoDB attribute values.

    boto3 rejects floats, so every float is turned into a Decimal.
    """
    return json.loads(json.dumps(item, default=str), parse_float=Decimal)

def from_dynamo(value: Any) -> Any:
    """Convert Decimals returned by boto3 back into int or float."""
    if isinstance(value, dict):
        return {k: from_dynamo(v) for k, v in value.items()}
    if isinstance(value, list):
        return [from_dynamo(v) for v in value]
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value

class DynamoDBClient:
    """Client for interacting with DynamoDB table."""

    def __init__(self, table_name: str):
        self.dynamodb = boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)

    def put_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put a single item into the table.

        Args:
            item: Dictionary containing item attributes

        Returns:
            Response from DynamoDB
        """
        return self.table.put_item(Item=to_dynamo(item))

    def get_item(self, key: Dict[str, str]) -> Optional[Dict[str, Any]]:
        """
        Get a single item from the table.

        Args:
            key: Dictionary containing partition key and sort key

        Returns:
            Item if found, None otherwise
        """
        response = self.table.get_item(Key=key)
        item = response.get('Item')
        return from_dynamo(item) if item else None

    def query_items(
        self,
        partition_key: str,
        partition_value: str,
        sort_key_condition: Optional[Key] = None
    ) -> List[Dict[str, Any]]:
        """
        Query items using partition key and optional sort key condition.

        Follows LastEvaluatedKey until the partition is exhausted.

        Args:
            partition_key: Name of partition key
            partition_value: Value of partition key
            sort_key_condition: Optional sort key condition

        Returns:
            List of matching items
        """
        key_condition = Key(partition_key).eq(partition_value)
        if sort_key_condition:
            key_condition = key_condition & sort_key_condition

        query_kwargs = {"KeyConditionExpression": key_condition}
        items: List[Dict[str, Any]] = []
        while True:
            response = self.table.query(**query_kwargs)
            items.extend(response.get('Items', []))
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                break
            query_kwargs["ExclusiveStartKey"] = last_key
        return [from_dynamo(item) for item in items]

    def update_item(
        self,
        key: Dict[str, str],
        update_expression: str,
        expression_values: Dict[str, Any],
        expression_names: Optional[Dict[str, str]] = None,
        condition_expression: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Update an item in the table.

        Args:
            key: Dictionary containing partition key and sort key
            update_expression: Update expression
            expression_values: Expression attribute values
            expression_names: Optional expression attribute names
            condition_expression: Optional condition the existing item must meet

        Returns:
            Updated item attributes
        """
        update_kwargs = {
            "Key": key,
            "UpdateExpression": update_expression,
            "ExpressionAttributeValues": to_dynamo(expression_values),
            "ReturnValues": "ALL_NEW"
        }
        if expression_names:
            update_kwargs["ExpressionAttributeNames"] = expression_names
        if condition_expression:
            update_kwargs["ConditionExpression"] = condition_expression
        response = self.table.update_item(**update_kwargs)
        return from_dynamo(response.get('Attributes', {}))

    def delete_item(self, key: Dict[str, str]) -> Dict[str, Any]:
        """
        Delete an item from the table.

        Args:
            key: Dictionary containing partition key and sort key

        Returns:
            Response from DynamoDB
        """
        return self.table.delete_item(Key=key)

def create_pk(user_id: str) -> str:
    """Create partition key from user ID."""
    return f"USER#{user_id}"

def create_record_sk(entity: str, record_id: str) -> str:
    """
    Create sort key for a user-owned record.

    Args:
        entity: Record prefix, e.g. "BREEDING" or "INVENTORY"
        record_id: Record identifier

    Returns:
        Sort key in format "{entity}#{record_id}"
    """
    return f"{entity}#{record_id}"

def create_profile_sk() -> str:
    """Create sort key for the user's profile."""
    return "PROFILE"
