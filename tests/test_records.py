"""
Tests for user-scoped record storage.
"""
import pytest
from unittest.mock import Mock
from botocore.exceptions import ClientError

from src.models.inventory import InventoryItem, InventoryItemInsert, InventoryItemUpdate
from src.services.exceptions import RecordNotFoundError, RecordStoreError
from src.services.records import UserRecordRepository


@pytest.fixture
def repository():
    """Create an inventory repository with an injected mock client."""
    dynamo = Mock()
    return UserRecordRepository("inventory_item", InventoryItem, dynamo_client=dynamo), dynamo


def conditional_check_failed() -> ClientError:
    return ClientError(
        {"Error": {"Code": "ConditionalCheckFailedException", "Message": "The conditional request failed"}},
        "UpdateItem"
    )


def test_get_returns_record(repository, stored_item):
    repo, dynamo = repository
    dynamo.get_item.return_value = stored_item(
        "u1", "INVENTORY#item-1",
        name="Layer Feed", category="Feed", current_stock=12, unit="bags", reorder_point=4
    )

    item = repo.get("item-1", "u1")

    dynamo.get_item.assert_called_once_with({"PK": "USER#u1", "SK": "INVENTORY#item-1"})
    assert item.name == "Layer Feed"
    assert item.current_stock == 12


def test_get_missing_record_raises_not_found(repository):
    repo, dynamo = repository
    dynamo.get_item.return_value = None

    with pytest.raises(RecordNotFoundError) as exc:
        repo.get("item-404", "u1")
    assert exc.value.record_id == "item-404"


def test_other_users_record_is_not_reachable(repository):
    """A lookup by another user builds a key in that user's partition."""
    repo, dynamo = repository
    dynamo.get_item.return_value = None

    with pytest.raises(RecordNotFoundError):
        repo.get("item-1", "intruder")
    dynamo.get_item.assert_called_once_with({"PK": "USER#intruder", "SK": "INVENTORY#item-1"})


def test_create_assigns_identity_and_timestamps(repository):
    repo, dynamo = repository

    item = repo.create("u1", InventoryItemInsert(
        name="Hay", category="Feed", current_stock=30, unit="bales", reorder_point=10
    ))

    assert item.id
    assert item.user_id == "u1"
    assert item.created_at == item.updated_at
    stored = dynamo.put_item.call_args[0][0]
    assert stored["SK"] == f"INVENTORY#{item.id}"
    assert stored["current_stock"] == 30


def test_update_missing_record_raises_not_found(repository):
    repo, dynamo = repository
    dynamo.update_item.side_effect = conditional_check_failed()

    with pytest.raises(RecordNotFoundError):
        repo.update("item-404", "u1", InventoryItemUpdate(current_stock=1))


def test_update_skips_nulls_for_required_fields(repository, stored_item):
    """Required fields cannot be cleared; optional ones can."""
    repo, dynamo = repository
    dynamo.update_item.return_value = stored_item(
        "u1", "INVENTORY#item-1",
        name="Hay", category="Feed", current_stock=30, unit="bales", reorder_point=10, supplier=None
    )

    repo.update("item-1", "u1", InventoryItemUpdate(name=None, supplier=None))

    fields = set(dynamo.update_item.call_args.kwargs["expression_names"].values())
    assert fields == {"supplier", "updated_at"}


def test_update_without_changes_returns_current_record(repository, stored_item):
    repo, dynamo = repository
    dynamo.get_item.return_value = stored_item(
        "u1", "INVENTORY#item-1",
        name="Hay", category="Feed", current_stock=30, unit="bales", reorder_point=10
    )

    item = repo.update("item-1", "u1", InventoryItemUpdate())

    assert not dynamo.update_item.called
    assert item.name == "Hay"


def test_store_errors_are_wrapped(repository):
    repo, dynamo = repository
    dynamo.query_items.side_effect = Exception("DynamoDB error")

    with pytest.raises(RecordStoreError) as exc:
        repo.list("u1")
    assert "Failed to list inventory_item" in str(exc.value)


def test_other_client_errors_on_update_are_store_errors(repository):
    repo, dynamo = repository
    dynamo.update_item.side_effect = ClientError(
        {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "Slow down"}},
        "UpdateItem"
    )

    with pytest.raises(RecordStoreError):
        repo.update("item-1", "u1", InventoryItemUpdate(current_stock=1))


def test_delete_error_is_wrapped(repository):
    repo, dynamo = repository
    dynamo.delete_item.side_effect = Exception("DynamoDB error")

    with pytest.raises(RecordStoreError):
        repo.delete("item-1", "u1")


def test_invalid_stored_row_is_store_error(repository, stored_item):
    repo, dynamo = repository
    dynamo.get_item.return_value = stored_item(
        "u1", "INVENTORY#item-1",
        name="Hay", category="Not A Category", current_stock=30, unit="bales", reorder_point=10
    )

    with pytest.raises(RecordStoreError) as exc:
        repo.get("item-1", "u1")
    assert "Failed to parse inventory_item" in str(exc.value)
