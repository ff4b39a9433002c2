"""
User-scoped record storage.

Every homestead entity (properties, animals, breeding events, inventory,
finances, infrastructure, tasks) is stored the same way: one DynamoDB item
per record in the owning user's partition, with a sort key of
``<PREFIX>#<record_id>``. The user identifier is an explicit argument of
every call and is the only way to build a key, so one user's calls can never
reach another user's rows.

Typical usage:
    repository = UserRecordRepository("inventory_item", InventoryItem)
    items = repository.list(user_id)
    item = repository.create(user_id, InventoryItemInsert(...))
    repository.update(item.id, user_id, InventoryItemUpdate(current_stock=3))
    repository.delete(item.id, user_id)
"""
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from uuid import uuid4

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError
from pydantic import BaseModel, ValidationError

from src.models.record import OwnedRecord
from src.services.constants import RECORD_PREFIXES
from src.services.exceptions import RecordNotFoundError, RecordStoreError
from src.utils.dynamo import DynamoDBClient, create_pk, create_record_sk, get_dynamo
from src.utils.logging import logger

RecordT = TypeVar("RecordT", bound=OwnedRecord)

STORAGE_KEYS = ("PK", "SK")


class UserRecordRepository(Generic[RecordT]):
    """Insert, select, update and delete records of one entity for one user."""

    def __init__(self, entity: str, model: Type[RecordT], dynamo_client: Optional[DynamoDBClient] = None):
        """
        Initialize repository.

        Args:
            entity: Entity name, a key of RECORD_PREFIXES
            model: Pydantic model records are parsed into
            dynamo_client: Optional DynamoDB client. If not provided, the shared one is used.
        """
        self.entity = entity
        self.prefix = RECORD_PREFIXES[entity]
        self.model = model
        self._dynamo = dynamo_client

    @property
    def dynamo(self) -> DynamoDBClient:
        """Get the injected DynamoDB client, or the shared one."""
        return self._dynamo or get_dynamo()

    def _key(self, record_id: str, user_id: str) -> Dict[str, str]:
        return {
            "PK": create_pk(user_id),
            "SK": create_record_sk(self.prefix, record_id)
        }

    def _to_record(self, item: Dict[str, Any]) -> RecordT:
        try:
            return self.model(**{k: v for k, v in item.items() if k not in STORAGE_KEYS})
        except ValidationError as e:
            raise self._store_error("parse", item.get("user_id"), e, item.get("id")) from e

    def _store_error(self, action: str, user_id: Optional[str], error: Exception, record_id: Optional[str] = None) -> RecordStoreError:
        logger.error(f"Error trying to {action} record", extra={
            "entity": self.entity,
            "user_id": user_id,
            "record_id": record_id,
            "error": str(error),
            "error_type": error.__class__.__name__
        })
        return RecordStoreError(f"Failed to {action} {self.entity}: {str(error)}")

    def list(self, user_id: str) -> List[RecordT]:
        """
        Get every record of this entity owned by the user.

        Args:
            user_id: Owning user's identifier

        Returns:
            Records in no particular order

        Raises:
            RecordStoreError: If the store cannot be queried or a stored row is invalid
        """
        try:
            items = self.dynamo.query_items(
                partition_key="PK",
                partition_value=create_pk(user_id),
                sort_key_condition=Key("SK").begins_with(f"{self.prefix}#")
            )
        except Exception as e:
            raise self._store_error("list", user_id, e) from e

        logger.debug("Listed records", extra={
            "entity": self.entity,
            "user_id": user_id,
            "count": len(items)
        })
        return [self._to_record(item) for item in items]

    def get(self, record_id: str, user_id: str) -> RecordT:
        """
        Get a single record owned by the user.

        Raises:
            RecordNotFoundError: If the user has no such record
            RecordStoreError: If the store cannot be read
        """
        try:
            item = self.dynamo.get_item(self._key(record_id, user_id))
        except Exception as e:
            raise self._store_error("get", user_id, e, record_id) from e

        if not item:
            raise RecordNotFoundError(self.entity, record_id)
        return self._to_record(item)

    def create(self, user_id: str, data: BaseModel) -> RecordT:
        """
        Store a new record for the user.

        Args:
            user_id: Owning user's identifier
            data: Validated insert contract for this entity

        Returns:
            The stored record with its generated id and timestamps
        """
        now = datetime.now(timezone.utc)
        record = self.model(
            id=str(uuid4()),
            user_id=user_id,
            created_at=now,
            updated_at=now,
            **data.model_dump()
        )

        try:
            self.dynamo.put_item({
                **self._key(record.id, user_id),
                **record.model_dump(mode="json")
            })
        except Exception as e:
            raise self._store_error("create", user_id, e, record.id) from e

        logger.info("Created record", extra={
            "entity": self.entity,
            "user_id": user_id,
            "record_id": record.id
        })
        return record

    def update(self, record_id: str, user_id: str, data: BaseModel) -> RecordT:
        """
        Apply the supplied fields to an existing record.

        Only fields explicitly present in ``data`` change. Fields the full
        record requires cannot be cleared to null and are skipped.

        Raises:
            RecordNotFoundError: If the user has no such record
            RecordStoreError: If the store cannot be written
        """
        required = {
            name for name, field in self.model.model_fields.items() if field.is_required()
        }
        changes = {
            k: v for k, v in data.model_dump(mode="json", exclude_unset=True).items()
            if v is not None or k not in required
        }
        if not changes:
            return self.get(record_id, user_id)
        changes["updated_at"] = datetime.now(timezone.utc).isoformat()

        names = {}
        values = {}
        assignments = []
        for index, (field, value) in enumerate(changes.items()):
            names[f"#f{index}"] = field
            values[f":v{index}"] = value
            assignments.append(f"#f{index} = :v{index}")

        try:
            attributes = self.dynamo.update_item(
                key=self._key(record_id, user_id),
                update_expression="SET " + ", ".join(assignments),
                expression_values=values,
                expression_names=names,
                condition_expression="attribute_exists(PK)"
            )
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                raise RecordNotFoundError(self.entity, record_id) from e
            raise self._store_error("update", user_id, e, record_id) from e
        except Exception as e:
            raise self._store_error("update", user_id, e, record_id) from e

        logger.info("Updated record", extra={
            "entity": self.entity,
            "user_id": user_id,
            "record_id": record_id,
            "fields": sorted(changes)
        })
        return self._to_record(attributes)

    def delete(self, record_id: str, user_id: str) -> None:
        """
        Delete a record owned by the user. Deleting a missing record is a no-op.

        Raises:
            RecordStoreError: If the store cannot be written
        """
        try:
            self.dynamo.delete_item(self._key(record_id, user_id))
        except Exception as e:
            raise self._store_error("delete", user_id, e, record_id) from e

        logger.info("Deleted record", extra={
            "entity": self.entity,
            "user_id": user_id,
            "record_id": record_id
        })
