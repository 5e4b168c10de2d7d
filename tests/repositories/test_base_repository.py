"""Unit tests for BaseRepository and DynamoDB configuration."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.repositories.base import BaseRepository, get_dynamodb_config


@pytest.fixture
def table() -> AsyncMock:
    """Mock DynamoDB Table."""
    return AsyncMock()


@pytest.fixture
def repository(table) -> BaseRepository:
    """BaseRepository whose session hands out a resource backed by ``table``."""
    dynamodb = MagicMock()
    dynamodb.Table = AsyncMock(return_value=table)

    @asynccontextmanager
    async def resource(*args, **kwargs):
        yield dynamodb

    repo = BaseRepository("todos-test")
    repo.session = MagicMock()
    repo.session.resource = resource
    return repo


def test_dynamodb_config_localstack():
    """Test that LocalStack endpoint and explicit credentials are passed."""
    with patch("src.repositories.base.settings") as mock_settings:
        mock_settings.aws_region = "us-east-1"
        mock_settings.dynamodb_endpoint_url = "http://localhost:4566"
        mock_settings.aws_access_key_id = "test"
        mock_settings.aws_secret_access_key = "test"
        mock_settings.aws_session_token = None

        config = get_dynamodb_config()

    assert config == {
        "region_name": "us-east-1",
        "endpoint_url": "http://localhost:4566",
        "aws_access_key_id": "test",
        "aws_secret_access_key": "test",
    }


def test_dynamodb_config_lambda_role():
    """Test that only the region is passed when running under an IAM role."""
    with patch("src.repositories.base.settings") as mock_settings:
        mock_settings.aws_region = "eu-west-1"
        mock_settings.dynamodb_endpoint_url = None
        mock_settings.aws_access_key_id = None
        mock_settings.aws_secret_access_key = None
        mock_settings.aws_session_token = None

        assert get_dynamodb_config() == {"region_name": "eu-west-1"}


@pytest.mark.asyncio
async def test_update_item_passes_condition(repository, table):
    """Test that update_item forwards names and condition to DynamoDB."""
    table.update_item.return_value = {"Attributes": {"todo_id": "a"}}

    result = await repository.update_item(
        {"user_id": "u", "todo_id": "a"},
        "SET #done = :done",
        {":done": True},
        expression_names={"#done": "done"},
        condition_expression="attribute_exists(todo_id)",
    )

    assert result == {"todo_id": "a"}
    table.update_item.assert_awaited_once_with(
        Key={"user_id": "u", "todo_id": "a"},
        UpdateExpression="SET #done = :done",
        ExpressionAttributeValues={":done": True},
        ReturnValues="ALL_NEW",
        ExpressionAttributeNames={"#done": "done"},
        ConditionExpression="attribute_exists(todo_id)",
    )


@pytest.mark.asyncio
async def test_delete_item_without_condition(repository, table):
    """Test that delete_item sends only the key when no condition is given."""
    await repository.delete_item({"user_id": "u", "todo_id": "a"})

    table.delete_item.assert_awaited_once_with(Key={"user_id": "u", "todo_id": "a"})


@pytest.mark.asyncio
async def test_query_all_follows_pages(repository, table):
    """Test that query_all keeps querying until LastEvaluatedKey is gone."""
    table.query.side_effect = [
        {"Items": [{"todo_id": "a"}], "LastEvaluatedKey": {"todo_id": "a"}},
        {"Items": [{"todo_id": "b"}]},
    ]

    items = await repository.query_all(KeyConditionExpression="user_id = :u")

    assert items == [{"todo_id": "a"}, {"todo_id": "b"}]
    assert table.query.await_count == 2
    assert table.query.await_args_list[1].kwargs["ExclusiveStartKey"] == {"todo_id": "a"}
