"""Account explanation routes."""

from fastapi import APIRouter, Query

from stellar_explain.core.dependencies import AccountServiceDep
from stellar_explain.schemas.v1.common import ErrorResponse
from stellar_explain.schemas.v1.accounts import (
    AccountExplanationResponse,
    AccountTransactionItem,
    AccountTransactionsResponse,
)
from stellar_explain.utils.dataclass_utils import to_dict

router = APIRouter(
    prefix="/account",
    tags=["accounts"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)


@router.get("/{address}", response_model=AccountExplanationResponse)
async def explain_account(address: str, service: AccountServiceDep):
    """Explain an account's balances, signers and flags."""
    explanation = await service.explain_account(address)
    return AccountExplanationResponse.model_validate(to_dict(explanation))


@router.get("/{address}/transactions", response_model=AccountTransactionsResponse)
async def list_account_transactions(
    address: str,
    service: AccountServiceDep,
    limit: int | None = Query(None, description="Page size, 1-50 (default 10)"),
    cursor: str | None = Query(None),
    order: str | None = Query(None, description="asc or desc (default asc)"),
):
    """List an account's transactions with one-line summaries."""
    page = await service.list_transactions(address, limit=limit, cursor=cursor, order=order)
    return AccountTransactionsResponse(
        items=[AccountTransactionItem.model_validate(to_dict(item)) for item in page.items],
        next_cursor=page.next_cursor,
        prev_cursor=page.prev_cursor,
    )
