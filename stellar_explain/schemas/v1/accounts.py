"""Account response schemas."""

from pydantic import BaseModel, Field


class AccountExplanationResponse(BaseModel):
    account_id: str
    summary: str
    xlm_balance: str
    asset_count: int
    signer_count: int
    home_domain: str | None = None
    flag_descriptions: list[str] = Field(default_factory=list)


class AccountTransactionItem(BaseModel):
    hash: str
    successful: bool
    summary: str
    ledger: int | None = None
    created_at: str | None = None
    operation_count: int | None = None
    memo: str | None = None


class AccountTransactionsResponse(BaseModel):
    items: list[AccountTransactionItem] = Field(default_factory=list)
    next_cursor: str | None = None
    prev_cursor: str | None = None
