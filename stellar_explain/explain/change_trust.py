"""change_trust explanation.

A limit of "0" removes the trustline; any other limit adds or updates it.
"""

from dataclasses import dataclass

from stellar_explain.domain.operations import ChangeTrustOperation


@dataclass(frozen=True)
class ChangeTrustExplanation:
    summary: str
    trustor: str
    asset_code: str
    asset_issuer: str
    limit: str
    is_removal: bool


def explain_change_trust(op: ChangeTrustOperation) -> ChangeTrustExplanation:
    is_removal = op.limit == "0"
    if is_removal:
        summary = f"{op.trustor} removed trust for {op.asset_code}."
    else:
        summary = (
            f"{op.trustor} opted in to hold up to {op.limit} {op.asset_code} "
            f"issued by {op.asset_issuer}."
        )
    return ChangeTrustExplanation(
        summary=summary,
        trustor=op.trustor,
        asset_code=op.asset_code,
        asset_issuer=op.asset_issuer,
        limit=op.limit,
        is_removal=is_removal,
    )
