"""
Animal service for livestock records.
"""
from typing import List

from src.models.animal import Animal, AnimalInsert, AnimalUpdate
from src.services.records import UserRecordRepository

animals = UserRecordRepository("animal", Animal)


def get_animals(user_id: str) -> List[Animal]:
    """Get all animals for a user, newest first."""
    return sorted(animals.list(user_id), key=lambda a: a.created_at, reverse=True)


def get_animal(animal_id: str, user_id: str) -> Animal:
    return animals.get(animal_id, user_id)


def create_animal(user_id: str, data: AnimalInsert) -> Animal:
    return animals.create(user_id, data)


def update_animal(animal_id: str, user_id: str, data: AnimalUpdate) -> Animal:
    return animals.update(animal_id, user_id, data)


def delete_animal(animal_id: str, user_id: str) -> None:
    animals.delete(animal_id, user_id)
