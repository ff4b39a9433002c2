"""Tests for the API Gateway Lambda handlers."""
import json
from unittest.mock import patch

from src.handlers import animals as animals_handler
from src.handlers import breeding as breeding_handler
from src.handlers import finance as finance_handler
from src.handlers import infrastructure as infrastructure_handler
from src.handlers import inventory as inventory_handler
from src.handlers import planning as planning_handler
from src.handlers import profile as profile_handler
from src.handlers import properties as properties_handler
from src.handlers import tasks as tasks_handler
from src.models.breeding import BreedingDashboardData
from src.services.exceptions import RecordNotFoundError


def body_of(response):
    return json.loads(response["body"])


def test_dashboard_endpoint(mock_dynamo, stored_item, api_event, lambda_context, user_id):
    mock_dynamo.query_items.return_value = [
        stored_item(user_id, "BREEDING#1", animal_id="a", event_type="pregnancy_confirmation", date="2025-05-01"),
        stored_item(user_id, "BREEDING#2", animal_id="b", event_type="heat_cycle", date="2025-06-01"),
    ]

    response = breeding_handler.handler(
        api_event("GET", "/breeding-events/dashboard", query={"as_of": "2025-06-30"}), lambda_context
    )

    assert response["statusCode"] == 200
    assert body_of(response) == {"breeding_females": 2, "pregnant": 1, "lactating": 0, "open": 1}


def test_dashboard_passes_as_of_date(api_event, lambda_context):
    with patch('src.handlers.breeding.get_breeding_dashboard_data',
               return_value=BreedingDashboardData()) as mock_dashboard:
        breeding_handler.handler(
            api_event("GET", "/breeding-events/dashboard", query={"as_of": "2025-01-15"}), lambda_context
        )

    assert mock_dashboard.call_args[0][1].isoformat() == "2025-01-15"


def test_dashboard_invalid_as_of_is_bad_request(api_event, lambda_context):
    response = breeding_handler.handler(
        api_event("GET", "/breeding-events/dashboard", query={"as_of": "yesterday"}), lambda_context
    )

    assert response["statusCode"] == 400
    assert "as_of" in body_of(response)["error"]


def test_missing_user_is_unauthorized(api_event, lambda_context):
    response = breeding_handler.handler(api_event("GET", "/breeding-events", user_id=None), lambda_context)

    assert response["statusCode"] == 401


def test_unknown_route(api_event, lambda_context):
    response = breeding_handler.handler(api_event("GET", "/breeding-events/a/b"), lambda_context)

    assert response["statusCode"] == 404


def test_method_not_allowed(api_event, lambda_context):
    response = breeding_handler.handler(api_event("DELETE", "/breeding-events"), lambda_context)

    assert response["statusCode"] == 405


def test_create_breeding_event(mock_dynamo, api_event, lambda_context, user_id):
    response = breeding_handler.handler(api_event("POST", "/breeding-events", body={
        "animal_id": "doe-1",
        "event_type": "birth",
        "date": "2025-06-01",
        "offspring_count": 2
    }), lambda_context)

    assert response["statusCode"] == 201
    body = body_of(response)
    assert body["user_id"] == user_id
    assert body["offspring_count"] == 2
    assert mock_dynamo.put_item.called


def test_create_with_invalid_fields_is_unprocessable(mock_dynamo, api_event, lambda_context):
    response = breeding_handler.handler(api_event("POST", "/breeding-events", body={
        "animal_id": "doe-1",
        "event_type": "weaning",
        "date": "not-a-date"
    }), lambda_context)

    assert response["statusCode"] == 422
    fields = {tuple(d["loc"]) for d in body_of(response)["details"]}
    assert fields == {("event_type",), ("date",)}
    assert not mock_dynamo.put_item.called


def test_invalid_json_body(api_event, lambda_context):
    event = api_event("POST", "/breeding-events")
    event["body"] = "{not json"

    response = breeding_handler.handler(event, lambda_context)

    assert response["statusCode"] == 400


def test_delete_returns_no_content(mock_dynamo, api_event, lambda_context, user_id):
    response = breeding_handler.handler(api_event("DELETE", "/breeding-events/evt-1"), lambda_context)

    assert response["statusCode"] == 204
    assert "body" not in response
    mock_dynamo.delete_item.assert_called_once_with({"PK": f"USER#{user_id}", "SK": "BREEDING#evt-1"})


def test_record_not_found(api_event, lambda_context):
    with patch.object(breeding_handler.RESOURCES[0], "get_record",
                      side_effect=RecordNotFoundError("breeding_event", "evt-404")):
        response = breeding_handler.handler(api_event("GET", "/breeding-events/evt-404"), lambda_context)

    assert response["statusCode"] == 404
    assert "evt-404" in body_of(response)["error"]


def test_store_error_is_server_error(mock_dynamo, api_event, lambda_context):
    mock_dynamo.query_items.side_effect = Exception("DynamoDB error")

    response = inventory_handler.handler(api_event("GET", "/inventory"), lambda_context)

    assert response["statusCode"] == 500
    assert body_of(response)["error"] == "Record store unavailable"


def test_unexpected_error_is_server_error(api_event, lambda_context):
    with patch('src.handlers.planning.get_planning_summary', side_effect=RuntimeError("boom")):
        response = planning_handler.handler(api_event("GET", "/planning/summary"), lambda_context)

    assert response["statusCode"] == 500
    assert body_of(response)["error"] == "Internal server error"


def test_low_stock_endpoint(mock_dynamo, stored_item, api_event, lambda_context, user_id):
    mock_dynamo.query_items.return_value = [
        stored_item(user_id, "INVENTORY#1", name="Hay", category="Feed",
                    current_stock=1, unit="bales", reorder_point=5),
        stored_item(user_id, "INVENTORY#2", name="Nails", category="Tools",
                    current_stock=500, unit="pieces", reorder_point=50),
    ]

    response = inventory_handler.handler(api_event("GET", "/inventory/low-stock"), lambda_context)

    assert response["statusCode"] == 200
    assert [i["name"] for i in body_of(response)] == ["Hay"]


def test_balance_endpoint_applies_filters(mock_dynamo, stored_item, api_event, lambda_context, user_id):
    mock_dynamo.query_items.return_value = [
        stored_item(user_id, "TRANSACTION#1", date="2025-01-02", type="income", amount=100, description="Eggs"),
        stored_item(user_id, "TRANSACTION#2", date="2025-02-02", type="expense", amount=40, description="Feed"),
    ]

    response = finance_handler.handler(
        api_event("GET", "/finance/balance", query={"start_date": "2025-02-01"}), lambda_context
    )

    body = body_of(response)
    assert response["statusCode"] == 200
    assert body["total_income"] == 0
    assert body["total_expense"] == 40
    assert body["transaction_count"] == 1


def test_get_profile_before_saving(api_event, lambda_context):
    with patch('src.handlers.profile.get_profile', return_value=None):
        response = profile_handler.handler(api_event("GET", "/profile"), lambda_context)

    assert response["statusCode"] == 200
    assert body_of(response) == {"profile": None, "initials": "U"}


def test_update_property_through_path_parameter(mock_dynamo, stored_item, api_event, lambda_context, user_id):
    mock_dynamo.update_item.return_value = stored_item(user_id, "PROPERTY#north", name="North Forty", size_acres=40)
    event = api_event("PUT", "/properties/north", body={"size_acres": 40})
    event["pathParameters"] = {"id": "north"}

    response = properties_handler.handler(event, lambda_context)

    assert response["statusCode"] == 200
    assert body_of(response)["size_acres"] == 40
    assert mock_dynamo.update_item.call_args.kwargs["key"] == {"PK": f"USER#{user_id}", "SK": "PROPERTY#north"}


def test_list_animals(mock_dynamo, stored_item, api_event, lambda_context, user_id):
    mock_dynamo.query_items.return_value = [
        stored_item(user_id, "ANIMAL#1", name="Clover", species="Goat"),
    ]

    response = animals_handler.handler(api_event("GET", "/animals"), lambda_context)

    assert [a["name"] for a in body_of(response)] == ["Clover"]


def test_create_task_requires_title(mock_dynamo, api_event, lambda_context):
    response = tasks_handler.handler(api_event("POST", "/tasks", body={"title": ""}), lambda_context)

    assert response["statusCode"] == 422


def test_infrastructure_search_and_overview(mock_dynamo, stored_item, api_event, lambda_context, user_id):
    mock_dynamo.query_items.return_value = [
        stored_item(user_id, "INFRA#1", name="Goat Barn", project_type="barn", status="in_progress", budget=5000),
        stored_item(user_id, "INFRA#2", name="Hoop House", project_type="greenhouse", status="planned", budget=5000),
    ]

    listed = infrastructure_handler.handler(
        api_event("GET", "/infrastructure", query={"search": "barn", "status": "all"}), lambda_context
    )
    overview = infrastructure_handler.handler(api_event("GET", "/infrastructure/overview"), lambda_context)

    assert [p["name"] for p in body_of(listed)] == ["Goat Barn"]
    assert body_of(overview)["budget_progress"] == 50.0
    assert body_of(overview)["total_budget"] == 10000


def test_profile_initials_fall_back_to_signed_in_email(api_event, lambda_context):
    with patch('src.handlers.profile.get_profile', return_value=None):
        response = profile_handler.handler(
            api_event("GET", "/profile", email="grace@example.com"), lambda_context
        )

    assert response["statusCode"] == 200
    assert body_of(response) == {"profile": None, "initials": "G"}


def test_saved_names_take_precedence_over_email(api_event, lambda_context, user_id):
    with patch('src.services.profiles.get_dynamo') as mock_get_dynamo:
        mock_get_dynamo.return_value.get_item.return_value = None
        response = profile_handler.handler(
            api_event("PUT", "/profile", body={"first_name": "Ada", "last_name": "Lovelace"},
                      email="grace@example.com"),
            lambda_context
        )

    assert response["statusCode"] == 200
    assert body_of(response)["initials"] == "AL"


def test_corrupt_stored_row_is_server_error(mock_dynamo, stored_item, api_event, lambda_context, user_id):
    """A stored row that no longer parses is a store fault, not a client validation error."""
    mock_dynamo.query_items.return_value = [
        stored_item(user_id, "BREEDING#1", animal_id="a", event_type="weaning", date="2025-05-01"),
    ]

    response = breeding_handler.handler(api_event("GET", "/breeding-events"), lambda_context)

    assert response["statusCode"] == 500
    assert body_of(response) == {"error": "Record store unavailable"}
