"""manage_sell_offer / manage_buy_offer explanation."""

from dataclasses import dataclass
from enum import StrEnum

from stellar_explain.domain.operations import ManageOfferOperation, OfferType


class OfferAction(StrEnum):
    NEW = "new"
    UPDATE = "update"
    CANCEL = "cancel"


@dataclass(frozen=True)
class ManageOfferExplanation:
    summary: str
    seller: str
    selling_asset: str
    buying_asset: str
    amount: str
    price: str
    offer_id: int
    action: OfferAction


def explain_manage_offer(op: ManageOfferOperation) -> ManageOfferExplanation:
    """Explain an offer change.

    A zero amount on an existing offer is a cancellation regardless of the
    offer side or price. Otherwise ``offer_id == 0`` creates a new offer and
    anything else updates one.
    """
    if op.amount == "0" and op.offer_id > 0:
        summary = f"{op.seller} cancelled their existing offer #{op.offer_id}"
        action = OfferAction.CANCEL
    else:
        if op.offer_type is OfferType.SELL:
            side, base, quote = "sell", op.selling_asset, op.buying_asset
        else:
            side, base, quote = "buy", op.buying_asset, op.selling_asset
        summary = (
            f"{op.seller} placed an order to {side} {op.amount} {base} for {quote} "
            f"at a price of {op.price} {quote} per {base}"
        )
        action = OfferAction.NEW if op.offer_id == 0 else OfferAction.UPDATE

    return ManageOfferExplanation(
        summary=summary,
        seller=op.seller,
        selling_asset=op.selling_asset,
        buying_asset=op.buying_asset,
        amount=op.amount,
        price=op.price,
        offer_id=op.offer_id,
        action=action,
    )
