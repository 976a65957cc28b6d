"""Clawback and clawback_claimable_balance explanations.

Clawbacks are often unexpected by the holder, so every summary carries a
sentence explaining what clawback is.
"""

from dataclasses import dataclass

from stellar_explain.domain.operations import ClawbackClaimableBalanceOperation, ClawbackOperation
from stellar_explain.explain.formatting import shorten_balance_id

CLAWBACK_CONTEXT = (
    "Clawback is a feature of regulated assets that allows issuers "
    "to recover funds under specific conditions."
)
UNKNOWN_ISSUER = "Unknown issuer"


@dataclass(frozen=True)
class ClawbackExplanation:
    summary: str
    issuer: str
    from_account: str
    asset_code: str
    asset_issuer: str
    amount: str


@dataclass(frozen=True)
class ClawbackClaimableBalanceExplanation:
    summary: str
    issuer: str
    balance_id: str


def explain_clawback(op: ClawbackOperation) -> ClawbackExplanation:
    summary = (
        f"The asset issuer reclaimed {op.amount} {op.asset_code} "
        f"from {op.from_account}. {CLAWBACK_CONTEXT}"
    )
    return ClawbackExplanation(
        summary=summary,
        issuer=op.source_account or UNKNOWN_ISSUER,
        from_account=op.from_account,
        asset_code=op.asset_code,
        asset_issuer=op.asset_issuer,
        amount=op.amount,
    )


def explain_clawback_claimable_balance(
    op: ClawbackClaimableBalanceOperation,
) -> ClawbackClaimableBalanceExplanation:
    summary = (
        f"The asset issuer clawed back claimable balance "
        f"{shorten_balance_id(op.balance_id)}. {CLAWBACK_CONTEXT}"
    )
    return ClawbackClaimableBalanceExplanation(
        summary=summary,
        issuer=op.source_account or UNKNOWN_ISSUER,
        balance_id=op.balance_id,
    )
