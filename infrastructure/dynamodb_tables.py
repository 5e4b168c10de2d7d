"""Script to create the todos DynamoDB table for LocalStack or AWS."""

import asyncio
from typing import Any

import aioboto3
from botocore.exceptions import ClientError


async def create_todos_table(dynamodb: Any, table_name: str) -> None:
    """
    Create the Todos table keyed by owner and todo id.

    Args:
        dynamodb: DynamoDB resource
        table_name: Name of the todos table
    """
    try:
        table = await dynamodb.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "user_id", "KeyType": "HASH"},
                {"AttributeName": "todo_id", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "user_id", "AttributeType": "S"},
                {"AttributeName": "todo_id", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        await table.wait_until_exists()
        print(f"✓ Created table: {table_name}")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"→ Table already exists: {table_name}")
        else:
            raise


async def main() -> None:
    """Create all required DynamoDB tables."""
    from src.config import settings
    from src.repositories.base import get_dynamodb_config

    print("Creating DynamoDB tables...")
    print(f"Region: {settings.aws_region}")
    print(f"Endpoint: {settings.dynamodb_endpoint_url or 'AWS'}")
    print()

    session = aioboto3.Session()
    async with session.resource("dynamodb", **get_dynamodb_config()) as dynamodb:
        await create_todos_table(dynamodb, settings.dynamodb_table_todos)

    print()
    print("✓ All tables created successfully!")


if __name__ == "__main__":
    asyncio.run(main())
