"""Base repository class with common DynamoDB operations."""

import logging
from typing import Any

import aioboto3
from botocore.exceptions import ClientError

from src.config import settings

logger = logging.getLogger(__name__)


def get_dynamodb_config() -> dict[str, Any]:
    """
    Build DynamoDB resource configuration based on environment.

    For AWS Lambda with an IAM role, returns the region only and lets boto3
    use the default credential chain. For LocalStack, includes endpoint_url
    and explicit credentials.

    Returns:
        Dictionary of boto3 resource parameters
    """
    config: dict[str, Any] = {"region_name": settings.aws_region}

    if settings.dynamodb_endpoint_url:
        config["endpoint_url"] = settings.dynamodb_endpoint_url
        logger.debug(f"DynamoDB config: Using endpoint_url={settings.dynamodb_endpoint_url}")

    # Lambda temporary credentials only work when all three are passed together
    if settings.aws_access_key_id:
        config["aws_access_key_id"] = settings.aws_access_key_id
    if settings.aws_secret_access_key:
        config["aws_secret_access_key"] = settings.aws_secret_access_key
    if settings.aws_session_token:
        config["aws_session_token"] = settings.aws_session_token

    if "aws_access_key_id" not in config:
        logger.debug("DynamoDB config: Using default credential chain")

    return config


def is_conditional_check_failure(exc: ClientError) -> bool:
    """Tell whether a ClientError comes from a failed ConditionExpression."""
    return exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


class BaseRepository:
    """
    Base repository providing common DynamoDB operations.

    All repository methods are async and use aioboto3 for
    non-blocking database operations. Every call opens its own
    resource context.
    """

    def __init__(self, table_name: str) -> None:
        """
        Initialize repository with table name.

        Args:
            table_name: Name of the DynamoDB table
        """
        self.table_name = table_name
        self.session = aioboto3.Session()

    async def put_item(self, item: dict[str, Any]) -> None:
        """
        Put item into DynamoDB table.

        Args:
            item: Dictionary representing the item to store
        """
        async with self.session.resource("dynamodb", **get_dynamodb_config()) as dynamodb:
            table = await dynamodb.Table(self.table_name)
            await table.put_item(Item=item)

    async def delete_item(
        self, key: dict[str, Any], condition_expression: str | None = None
    ) -> None:
        """
        Delete item from DynamoDB table.

        Args:
            key: Dictionary with partition key and optionally sort key
            condition_expression: Optional condition the stored item must meet

        Raises:
            ClientError: ConditionalCheckFailedException if the condition fails
        """
        async with self.session.resource("dynamodb", **get_dynamodb_config()) as dynamodb:
            table = await dynamodb.Table(self.table_name)
            delete_params: dict[str, Any] = {"Key": key}
            if condition_expression:
                delete_params["ConditionExpression"] = condition_expression
            await table.delete_item(**delete_params)

    async def update_item(
        self,
        key: dict[str, Any],
        update_expression: str,
        expression_values: dict[str, Any],
        expression_names: dict[str, str] | None = None,
        condition_expression: str | None = None,
    ) -> dict[str, Any]:
        """
        Update item in DynamoDB table.

        Args:
            key: Dictionary with partition key and optionally sort key
            update_expression: DynamoDB update expression
            expression_values: Values for the update expression
            expression_names: Optional attribute name mappings for reserved keywords
            condition_expression: Optional condition the stored item must meet

        Returns:
            Updated item attributes

        Raises:
            ClientError: ConditionalCheckFailedException if the condition fails
        """
        async with self.session.resource("dynamodb", **get_dynamodb_config()) as dynamodb:
            table = await dynamodb.Table(self.table_name)
            update_params: dict[str, Any] = {
                "Key": key,
                "UpdateExpression": update_expression,
                "ExpressionAttributeValues": expression_values,
                "ReturnValues": "ALL_NEW",
            }
            if expression_names:
                update_params["ExpressionAttributeNames"] = expression_names
            if condition_expression:
                update_params["ConditionExpression"] = condition_expression

            response = await table.update_item(**update_params)
            return response.get("Attributes", {})

    async def query_all(self, **query_params: Any) -> list[dict[str, Any]]:
        """
        Run a query and follow LastEvaluatedKey until every page is read.

        Args:
            **query_params: Keyword arguments for Table.query

        Returns:
            All matching items, in the order DynamoDB returned them
        """
        items: list[dict[str, Any]] = []
        async with self.session.resource("dynamodb", **get_dynamodb_config()) as dynamodb:
            table = await dynamodb.Table(self.table_name)
            while True:
                response = await table.query(**query_params)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    return items
                query_params["ExclusiveStartKey"] = last_key
