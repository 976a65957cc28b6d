"""Account explanations: balances, signers and flags, plus transaction listings."""

from dataclasses import dataclass, field

from stellar_explain.domain.account import Account
from stellar_explain.domain.memo import MemoType
from stellar_explain.schemas.horizon import HorizonTransaction

_FLAG_DESCRIPTIONS = (
    ("auth_required", "Auth required: accounts must be authorized before holding this asset."),
    ("auth_revocable", "Auth revocable: the issuer can freeze this asset in a holder's account."),
    ("auth_immutable", "Auth immutable: account flags and signers can no longer be changed."),
    (
        "auth_clawback_enabled",
        "Clawback enabled: the issuer can claw back this asset from holders.",
    ),
)


@dataclass(frozen=True)
class AccountExplanation:
    account_id: str
    summary: str
    xlm_balance: str
    asset_count: int
    signer_count: int
    home_domain: str | None = None
    flag_descriptions: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AccountTransactionSummary:
    hash: str
    successful: bool
    summary: str
    ledger: int | None = None
    created_at: str | None = None
    operation_count: int | None = None
    memo: str | None = None


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def explain_account(account: Account) -> AccountExplanation:
    xlm_balance = account.native_balance() or "0"
    asset_count = account.other_asset_count()

    holdings = f"This account holds {xlm_balance} XLM"
    if asset_count:
        holdings += f" and {_plural(asset_count, 'other asset')}"
    domain_part = f" and home domain {account.home_domain}." if account.home_domain else "."
    summary = f"{holdings}. It has {_plural(account.signer_count, 'signer')}{domain_part}"

    flag_descriptions = [
        text for attr, text in _FLAG_DESCRIPTIONS if getattr(account.flags, attr)
    ]

    return AccountExplanation(
        account_id=account.account_id,
        summary=summary,
        xlm_balance=xlm_balance,
        asset_count=asset_count,
        signer_count=account.signer_count,
        home_domain=account.home_domain,
        flag_descriptions=flag_descriptions,
    )


def summarize_account_transaction(record: HorizonTransaction) -> AccountTransactionSummary:
    status = "Successful" if record.successful else "Failed"
    count = record.operation_count or 0
    memo = None
    if record.memo_type and record.memo_type != MemoType.NONE:
        memo = record.memo
    return AccountTransactionSummary(
        hash=record.hash,
        successful=record.successful,
        summary=f"{status} transaction with {_plural(count, 'operation')}.",
        ledger=record.ledger,
        created_at=record.created_at,
        operation_count=record.operation_count,
        memo=memo,
    )
