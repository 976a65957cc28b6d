"""Payment explanation.

Known exchange and issuer addresses are rendered with their label when a
lookup is supplied. An optional fee context appends a note on whether the
transaction fee was standard or elevated.
"""

from dataclasses import dataclass

from stellar_explain.domain.fees import FeeStats
from stellar_explain.domain.mapper import UNKNOWN_ACCOUNT
from stellar_explain.domain.operations import PaymentOperation
from stellar_explain.explain.formatting import LabelLookup, display_address


@dataclass(frozen=True)
class PaymentExplanation:
    operation_id: str
    summary: str
    from_account: str
    to: str
    asset: str
    amount: str
    from_label: str | None = None
    to_label: str | None = None
    fee_note: str | None = None


def format_payment_asset(
    asset_type: str, asset_code: str | None, asset_issuer: str | None
) -> str:
    """``XLM`` for native, ``CODE (GABCDEFG...)`` for credit assets."""
    if asset_type == "native":
        return "XLM"
    if asset_code and asset_issuer:
        return f"{asset_code} ({asset_issuer[:8]}...)"
    if asset_code:
        return asset_code
    return "Unknown Asset"


def fee_note(fee_charged: int, fee_stats: FeeStats) -> str:
    if fee_stats.is_high_fee(fee_charged):
        return f"above average — {fee_stats.fee_multiplier(fee_charged)}x base fee"
    return "standard"


def _lookup(address: str, resolve_label: LabelLookup | None) -> str | None:
    if resolve_label is None or not address or address == UNKNOWN_ACCOUNT:
        return None
    return resolve_label(address)


def explain_payment(
    op: PaymentOperation,
    resolve_label: LabelLookup | None = None,
    fee_context: tuple[int, FeeStats] | None = None,
) -> PaymentExplanation:
    """Explain a payment, optionally with label resolution and a fee note."""
    sender = op.source_account or UNKNOWN_ACCOUNT
    asset = format_payment_asset(op.asset_type, op.asset_code, op.asset_issuer)
    from_label = _lookup(sender, resolve_label)
    to_label = _lookup(op.destination, resolve_label)

    from_display = display_address(sender, from_label)
    to_display = display_address(op.destination, to_label)
    summary = f"{from_display} sent {op.amount} {asset} to {to_display}"

    note = None
    if fee_context is not None:
        fee_charged, fee_stats = fee_context
        note = fee_note(fee_charged, fee_stats)
        summary = f"{summary} (fee: {note})"

    return PaymentExplanation(
        operation_id=op.id,
        summary=summary,
        from_account=sender,
        to=op.destination,
        asset=asset,
        amount=op.amount,
        from_label=from_label,
        to_label=to_label,
        fee_note=note,
    )
