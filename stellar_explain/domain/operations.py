"""Operation domain models.

Internal representation of ledger operations, independent of the Horizon
wire format. Every variant is a frozen dataclass carrying only strings and
integers; amounts stay decimal strings so nothing is lost to float rounding.

``Operation`` is the closed union of all variants. Anything the mapper does
not recognise becomes an ``OtherOperation`` so explaining never fails on a
new upstream operation type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class OfferType(StrEnum):
    SELL = "sell"
    BUY = "buy"


class PathPaymentType(StrEnum):
    STRICT_SEND = "strict_send"
    STRICT_RECEIVE = "strict_receive"


@dataclass(frozen=True)
class PaymentOperation:
    """Sends an asset from one account to another."""

    operation_type: ClassVar[str] = "payment"

    id: str
    destination: str
    amount: str
    asset_type: str = "native"
    asset_code: str | None = None
    asset_issuer: str | None = None
    source_account: str | None = None


@dataclass(frozen=True)
class CreateAccountOperation:
    """Funds and activates a brand-new account."""

    operation_type: ClassVar[str] = "create_account"

    id: str
    funder: str
    new_account: str
    starting_balance: str


@dataclass(frozen=True)
class ChangeTrustOperation:
    """Adds, updates or removes a trustline. A limit of "0" removes it."""

    operation_type: ClassVar[str] = "change_trust"

    id: str
    trustor: str
    asset_code: str
    asset_issuer: str
    limit: str


@dataclass(frozen=True)
class ManageOfferOperation:
    """Creates, updates or cancels a DEX offer.

    Asset fields hold display strings produced by the mapper,
    e.g. ``"XLM (native)"`` or ``"USDC (GA5Z...)"``.
    """

    operation_type: ClassVar[str] = "manage_offer"

    id: str
    seller: str
    selling_asset: str
    buying_asset: str
    amount: str
    price: str
    offer_id: int
    offer_type: OfferType


@dataclass(frozen=True)
class PathPaymentOperation:
    """Payment that may convert through intermediate assets."""

    operation_type: ClassVar[str] = "path_payment"

    id: str
    destination: str
    send_asset: str
    send_amount: str
    dest_asset: str
    dest_amount: str
    payment_type: PathPaymentType
    path: tuple[str, ...] = ()
    source_account: str | None = None


@dataclass(frozen=True)
class ClawbackOperation:
    """Issuer reclaims a regulated asset from a holder's account."""

    operation_type: ClassVar[str] = "clawback"

    id: str
    from_account: str
    asset_code: str
    asset_issuer: str
    amount: str
    source_account: str | None = None


@dataclass(frozen=True)
class ClawbackClaimableBalanceOperation:
    """Issuer reclaims an unclaimed claimable balance."""

    operation_type: ClassVar[str] = "clawback_claimable_balance"

    id: str
    balance_id: str
    source_account: str | None = None


@dataclass(frozen=True)
class SetOptionsOperation:
    """Changes account settings. Every field except ``id`` is optional."""

    operation_type: ClassVar[str] = "set_options"

    id: str
    source_account: str | None = None
    inflation_dest: str | None = None
    master_weight: int | None = None
    low_threshold: int | None = None
    med_threshold: int | None = None
    high_threshold: int | None = None
    home_domain: str | None = None
    set_flags: int | None = None
    clear_flags: int | None = None
    signer_key: str | None = None
    signer_weight: int | None = None


@dataclass(frozen=True)
class OtherOperation:
    """Placeholder for operation types that are preserved but not explained."""

    id: str
    type_name: str

    @property
    def operation_type(self) -> str:
        return self.type_name


Operation = (
    PaymentOperation
    | CreateAccountOperation
    | ChangeTrustOperation
    | ManageOfferOperation
    | PathPaymentOperation
    | ClawbackOperation
    | ClawbackClaimableBalanceOperation
    | SetOptionsOperation
    | OtherOperation
)
