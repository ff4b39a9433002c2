"""
Property service for managing homestead land parcels.
"""
from typing import List

from src.models.property import Property, PropertyInsert, PropertyUpdate
from src.services.records import UserRecordRepository

properties = UserRecordRepository("property", Property)


def get_properties(user_id: str) -> List[Property]:
    """Get all properties for a user, newest first."""
    return sorted(properties.list(user_id), key=lambda p: p.created_at, reverse=True)


def get_property(property_id: str, user_id: str) -> Property:
    return properties.get(property_id, user_id)


def create_property(user_id: str, data: PropertyInsert) -> Property:
    return properties.create(user_id, data)


def update_property(property_id: str, user_id: str, data: PropertyUpdate) -> Property:
    return properties.update(property_id, user_id, data)


def delete_property(property_id: str, user_id: str) -> None:
    properties.delete(property_id, user_id)
