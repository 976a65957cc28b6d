"""Horizon wire records -> domain values.

Every wire record maps to some domain value; nothing here raises. Missing
fields resolve through the explicit ``_default_*`` helpers below so the
defaulting rule for each role is visible in one place.
"""

from stellar_explain.domain.account import Account, AccountFlags, Balance
from stellar_explain.domain.fees import FeeStats
from stellar_explain.domain.memo import Memo, MemoType
from stellar_explain.domain.operations import (
    ChangeTrustOperation,
    ClawbackClaimableBalanceOperation,
    ClawbackOperation,
    CreateAccountOperation,
    ManageOfferOperation,
    OfferType,
    Operation,
    OtherOperation,
    PathPaymentOperation,
    PathPaymentType,
    PaymentOperation,
    SetOptionsOperation,
)
from stellar_explain.domain.transaction import Transaction
from stellar_explain.schemas.horizon import (
    HorizonAccount,
    HorizonAsset,
    HorizonFeeStats,
    HorizonOperation,
    HorizonTransaction,
)

UNKNOWN_ACCOUNT = "Unknown"

_OFFER_TYPES = {
    "manage_sell_offer": OfferType.SELL,
    "manage_offer": OfferType.SELL,
    "manage_buy_offer": OfferType.BUY,
}

_PATH_PAYMENT_TYPES = {
    "path_payment_strict_send": PathPaymentType.STRICT_SEND,
    "path_payment_strict_receive": PathPaymentType.STRICT_RECEIVE,
    "path_payment": PathPaymentType.STRICT_RECEIVE,
}


def _default_amount(value: str | None) -> str:
    return value if value is not None else "0"


def _default_source_role(value: str | None) -> str:
    return value if value else UNKNOWN_ACCOUNT


def _default_destination_role(value: str | None) -> str:
    return value or ""


def _default_asset_part(value: str | None) -> str:
    return value or ""


def _default_offer_id(value: str | None) -> int:
    if value is None:
        return 0
    try:
        return int(value)
    except ValueError:
        return 0


def format_asset(asset_type: str | None, code: str | None, issuer: str | None) -> str:
    """Display string for an asset triple.

    ``native`` -> ``"XLM (native)"``; code and issuer -> ``"CODE (ISSUER)"``;
    code only -> ``"CODE"``; anything else -> ``"Unknown"``.
    """
    if asset_type == "native":
        return "XLM (native)"
    if code and issuer:
        return f"{code} ({issuer})"
    if code:
        return code
    return "Unknown"


def _format_hop(asset: HorizonAsset) -> str:
    return format_asset(asset.asset_type, asset.asset_code, asset.asset_issuer)


def _map_payment(op: HorizonOperation) -> PaymentOperation:
    return PaymentOperation(
        id=op.id,
        destination=_default_destination_role(op.to),
        amount=_default_amount(op.amount),
        asset_type=op.asset_type or "native",
        asset_code=op.asset_code,
        asset_issuer=op.asset_issuer,
        source_account=op.from_account or op.source_account,
    )


def _map_create_account(op: HorizonOperation) -> CreateAccountOperation:
    return CreateAccountOperation(
        id=op.id,
        funder=_default_source_role(op.funder or op.source_account),
        new_account=_default_destination_role(op.account),
        starting_balance=_default_amount(op.starting_balance),
    )


def _map_change_trust(op: HorizonOperation) -> ChangeTrustOperation:
    return ChangeTrustOperation(
        id=op.id,
        trustor=_default_source_role(op.trustor or op.source_account),
        asset_code=_default_asset_part(op.asset_code),
        asset_issuer=_default_asset_part(op.asset_issuer or op.trustee),
        limit=_default_amount(op.limit),
    )


def _map_manage_offer(op: HorizonOperation) -> ManageOfferOperation:
    return ManageOfferOperation(
        id=op.id,
        seller=_default_source_role(op.source_account),
        selling_asset=format_asset(
            op.selling_asset_type, op.selling_asset_code, op.selling_asset_issuer
        ),
        buying_asset=format_asset(
            op.buying_asset_type, op.buying_asset_code, op.buying_asset_issuer
        ),
        amount=_default_amount(op.amount),
        price=_default_amount(op.price),
        offer_id=_default_offer_id(op.offer_id),
        offer_type=_OFFER_TYPES[op.type],
    )


def _map_path_payment(op: HorizonOperation) -> PathPaymentOperation:
    return PathPaymentOperation(
        id=op.id,
        destination=_default_destination_role(op.to),
        send_asset=format_asset(
            op.source_asset_type, op.source_asset_code, op.source_asset_issuer
        ),
        send_amount=_default_amount(op.source_amount),
        dest_asset=format_asset(op.asset_type, op.asset_code, op.asset_issuer),
        dest_amount=_default_amount(op.amount),
        payment_type=_PATH_PAYMENT_TYPES[op.type],
        path=tuple(_format_hop(hop) for hop in op.path or []),
        source_account=op.from_account or op.source_account,
    )


def _map_clawback(op: HorizonOperation) -> ClawbackOperation:
    return ClawbackOperation(
        id=op.id,
        from_account=_default_destination_role(op.from_account),
        asset_code=_default_asset_part(op.asset_code),
        asset_issuer=_default_asset_part(op.asset_issuer),
        amount=_default_amount(op.amount),
        source_account=op.source_account,
    )


def _map_clawback_claimable_balance(op: HorizonOperation) -> ClawbackClaimableBalanceOperation:
    return ClawbackClaimableBalanceOperation(
        id=op.id,
        balance_id=_default_destination_role(op.balance_id),
        source_account=op.source_account,
    )


def _map_set_options(op: HorizonOperation) -> SetOptionsOperation:
    return SetOptionsOperation(
        id=op.id,
        source_account=op.source_account,
        inflation_dest=op.inflation_dest,
        master_weight=op.master_key_weight,
        low_threshold=op.low_threshold,
        med_threshold=op.med_threshold,
        high_threshold=op.high_threshold,
        home_domain=op.home_domain,
        set_flags=op.set_flags,
        clear_flags=op.clear_flags,
        signer_key=op.signer_key,
        signer_weight=op.signer_weight,
    )


_MAPPERS = {
    "payment": _map_payment,
    "create_account": _map_create_account,
    "change_trust": _map_change_trust,
    "manage_sell_offer": _map_manage_offer,
    "manage_buy_offer": _map_manage_offer,
    "manage_offer": _map_manage_offer,
    "path_payment_strict_send": _map_path_payment,
    "path_payment_strict_receive": _map_path_payment,
    "path_payment": _map_path_payment,
    "clawback": _map_clawback,
    "clawback_claimable_balance": _map_clawback_claimable_balance,
    "set_options": _map_set_options,
}


def map_operation(op: HorizonOperation) -> Operation:
    """Map one wire operation; unknown types become ``OtherOperation``."""
    mapper = _MAPPERS.get(op.type)
    if mapper is None:
        return OtherOperation(id=op.id, type_name=op.type)
    return mapper(op)


def map_memo(memo_type: str | None, memo: str | None) -> Memo | None:
    """Map Horizon's ``memo_type``/``memo`` pair; invalid or absent memos yield None."""
    if not memo_type or memo_type == MemoType.NONE:
        return None
    if memo is None:
        return None
    if memo_type == MemoType.TEXT:
        return Memo.text(memo)
    if memo_type == MemoType.ID:
        if not memo.isdigit():
            return None
        return Memo.id(int(memo))
    if memo_type == MemoType.HASH:
        return Memo.hash(memo)
    if memo_type == MemoType.RETURN:
        return Memo.return_hash(memo)
    return None


def map_transaction(tx: HorizonTransaction, operations: list[HorizonOperation]) -> Transaction:
    return Transaction(
        hash=tx.hash,
        successful=tx.successful,
        fee_charged=tx.fee_charged,
        operations=tuple(map_operation(op) for op in operations),
        memo=map_memo(tx.memo_type, tx.memo),
    )


def map_fee_stats(stats: HorizonFeeStats) -> FeeStats:
    return FeeStats(
        base_fee=stats.last_ledger_base_fee,
        min_fee=stats.min_fee,
        max_fee=stats.max_fee,
        mode_fee=stats.mode_fee,
        p90_fee=stats.p90_fee,
    )


def map_account(account: HorizonAccount) -> Account:
    return Account(
        account_id=account.account_id,
        sequence=account.sequence,
        balances=tuple(
            Balance(
                asset_type=b.asset_type,
                balance=b.balance,
                asset_code=b.asset_code,
                asset_issuer=b.asset_issuer,
            )
            for b in account.balances
        ),
        signer_count=len(account.signers),
        home_domain=account.home_domain or None,
        flags=AccountFlags(
            auth_required=account.flags.auth_required,
            auth_revocable=account.flags.auth_revocable,
            auth_immutable=account.flags.auth_immutable,
            auth_clawback_enabled=account.flags.auth_clawback_enabled,
        ),
    )
