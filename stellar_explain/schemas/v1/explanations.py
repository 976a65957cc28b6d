"""Transaction and operation explanation response schemas.

Optional fields are always serialised; absent values appear as ``null``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PaymentExplanationSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    operation_id: str
    summary: str
    from_account: str = Field(alias="from")
    to: str
    asset: str
    amount: str
    from_label: str | None = None
    to_label: str | None = None
    fee_note: str | None = None


class TransactionExplanationResponse(BaseModel):
    transaction_hash: str
    successful: bool
    summary: str
    payment_explanations: list[PaymentExplanationSchema] = Field(default_factory=list)
    skipped_operations: int = 0
    memo_explanation: str | None = None
    fee_explanation: str | None = None
    ledger_closed_at: str | None = None
    ledger: int | None = None


class OperationExplanationSchema(BaseModel):
    operation_id: str
    operation_type: str
    summary: str
    details: dict[str, Any] = Field(default_factory=dict)


class OperationListResponse(BaseModel):
    transaction_hash: str
    operations: list[OperationExplanationSchema] = Field(default_factory=list)
