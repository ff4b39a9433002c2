"""
Lambda handler for financial categories, transactions and the balance.
"""
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.handlers.api import CrudResource, handle_request
from src.models.finance import (
    CategoryInsert,
    CategoryUpdate,
    FinancialBalance,
    TransactionFilters,
    TransactionInsert,
    TransactionUpdate,
)
from src.services.finance import (
    calculate_balance,
    create_category,
    create_transaction,
    delete_category,
    delete_transaction,
    get_categories,
    get_category,
    get_transaction,
    get_transactions,
    update_category,
    update_transaction,
)
from src.utils.http import get_query_params
from src.utils.logging import logger

tracer = Tracer()

RESOURCES = [
    CrudResource(
        path="/finance/categories",
        list_records=get_categories,
        get_record=get_category,
        create_record=create_category,
        update_record=update_category,
        delete_record=delete_category,
        insert_model=CategoryInsert,
        update_model=CategoryUpdate,
    ),
    CrudResource(
        path="/finance/transactions",
        list_records=get_transactions,
        get_record=get_transaction,
        create_record=create_transaction,
        update_record=update_transaction,
        delete_record=delete_transaction,
        insert_model=TransactionInsert,
        update_model=TransactionUpdate,
        list_filters=TransactionFilters,
    ),
]


def balance(user_id: str, event: Dict[str, Any]) -> FinancialBalance:
    """Balance over the user's transactions, honouring the same filters as the list."""
    filters = TransactionFilters(**get_query_params(event))
    return calculate_balance(get_transactions(user_id, filters))


ACTIONS = {
    ("GET", "/finance/balance"): balance,
}


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """Handle finance requests."""
    return handle_request(event, RESOURCES, ACTIONS)
