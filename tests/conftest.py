"""
Pytest configuration and shared fixtures.
"""
import json
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional
from unittest.mock import Mock, patch

import pytest

from src.models.breeding import BreedingEvent, BreedingEventType

TODAY = date(2025, 6, 30)


@pytest.fixture
def user_id() -> str:
    return "user-123"


@pytest.fixture
def today() -> date:
    """Fixed reference date for date-window calculations."""
    return TODAY


@pytest.fixture
def make_breeding_event():
    """Factory for breeding events with sensible defaults."""
    counter = {"n": 0}

    def _make(animal_id: str, event_type: BreedingEventType, event_date: date, **kwargs) -> BreedingEvent:
        counter["n"] += 1
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        return BreedingEvent(
            id=f"evt-{counter['n']}",
            user_id=kwargs.pop("user_id", "user-123"),
            animal_id=animal_id,
            event_type=event_type,
            date=event_date,
            created_at=now,
            updated_at=now,
            **kwargs
        )
    return _make


@pytest.fixture
def mock_dynamo():
    """Mock DynamoDB client shared by every record repository."""
    with patch('src.services.records.get_dynamo') as mock_get_dynamo:
        dynamo = Mock()
        dynamo.query_items.return_value = []
        mock_get_dynamo.return_value = dynamo
        yield dynamo


@pytest.fixture
def lambda_context():
    """Minimal Lambda context accepted by Logger.inject_lambda_context."""
    @dataclass
    class LambdaContext:
        function_name: str = "homestead-test"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:homestead-test"
        aws_request_id: str = "52fdfc07-2182-454f-963f-5f0f9a621d72"

        def get_remaining_time_in_millis(self) -> int:
            return 5000

    return LambdaContext()


@pytest.fixture
def api_event():
    """Factory for API Gateway proxy events from an authenticated user."""
    def _make(
        method: str,
        path: str,
        body: Optional[Any] = None,
        query: Optional[Dict[str, str]] = None,
        user_id: Optional[str] = "user-123",
        email: Optional[str] = None
    ) -> Dict[str, Any]:
        claims = {"sub": user_id}
        if email:
            claims["email"] = email
        event = {
            "httpMethod": method,
            "path": path,
            "queryStringParameters": query,
            "pathParameters": None,
            "requestContext": {"authorizer": {"claims": claims} if user_id else {}},
            "body": json.dumps(body) if body is not None else None
        }
        return event
    return _make


@pytest.fixture
def stored_item():
    """Factory for DynamoDB items as the client returns them."""
    def _make(user_id: str, sk: str, **attributes) -> Dict[str, Any]:
        return {
            "PK": f"USER#{user_id}",
            "SK": sk,
            "id": sk.split("#", 1)[1],
            "user_id": user_id,
            "created_at": "2025-01-01T00:00:00+00:00",
            "updated_at": "2025-01-01T00:00:00+00:00",
            **attributes
        }
    return _make
