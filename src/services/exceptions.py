"""
Service-level exceptions.

This module contains exceptions that can be raised by various services
in the application.
"""

class RecordStoreError(Exception):
    """Raised when the record store cannot be read or written."""
    pass

class RecordNotFoundError(Exception):
    """Raised when a record does not exist in the requesting user's partition."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")
