"""Transaction explanation routes."""

from fastapi import APIRouter

from stellar_explain.core.dependencies import ExplainServiceDep
from stellar_explain.schemas.v1.common import ErrorResponse
from stellar_explain.schemas.v1.explanations import (
    OperationExplanationSchema,
    OperationListResponse,
    TransactionExplanationResponse,
)
from stellar_explain.services.explain_service import normalize_tx_hash
from stellar_explain.utils.dataclass_utils import to_dict

router = APIRouter(
    prefix="/tx",
    tags=["transactions"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)


@router.get("/{tx_hash}", response_model=TransactionExplanationResponse)
async def explain_transaction(tx_hash: str, service: ExplainServiceDep):
    """Explain a transaction in plain language."""
    explanation = await service.explain_transaction(tx_hash)
    return TransactionExplanationResponse.model_validate(to_dict(explanation))


@router.get("/{tx_hash}/operations", response_model=OperationListResponse)
async def explain_transaction_operations(tx_hash: str, service: ExplainServiceDep):
    """Explain every operation in a transaction, including unsupported ones."""
    operations = await service.explain_operations(tx_hash)
    return OperationListResponse(
        transaction_hash=normalize_tx_hash(tx_hash),
        operations=[OperationExplanationSchema.model_validate(to_dict(op)) for op in operations],
    )
