"""
Base model for records owned by a single user.
"""
from datetime import datetime
from pydantic import BaseModel


class OwnedRecord(BaseModel):
    """
    Fields shared by every stored homestead record.
    """
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime
