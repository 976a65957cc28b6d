"""Generic per-operation dispatcher.

Maps any domain operation to a uniform ``OperationExplanation`` so callers
can list every operation in a transaction, including unsupported ones.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from stellar_explain.domain.operations import (
    ChangeTrustOperation,
    ClawbackClaimableBalanceOperation,
    ClawbackOperation,
    CreateAccountOperation,
    ManageOfferOperation,
    Operation,
    OtherOperation,
    PathPaymentOperation,
    PaymentOperation,
    SetOptionsOperation,
)
from stellar_explain.explain.change_trust import explain_change_trust
from stellar_explain.explain.clawback import (
    explain_clawback,
    explain_clawback_claimable_balance,
)
from stellar_explain.explain.create_account import explain_create_account
from stellar_explain.explain.formatting import LabelLookup
from stellar_explain.explain.manage_offer import explain_manage_offer
from stellar_explain.explain.path_payment import explain_path_payment
from stellar_explain.explain.payment import explain_payment
from stellar_explain.explain.set_options import explain_set_options
from stellar_explain.utils.dataclass_utils import to_dict


@dataclass(frozen=True)
class OperationExplanation:
    operation_id: str
    operation_type: str
    summary: str
    details: dict[str, Any] = field(default_factory=dict)


def _details(record: Any) -> dict[str, Any]:
    data = to_dict(record)
    data.pop("summary", None)
    data.pop("operation_id", None)
    if "from_account" in data:
        data["from"] = data.pop("from_account")
    return data


_EXPLAINERS: dict[type, Callable[[Any], Any]] = {
    CreateAccountOperation: explain_create_account,
    ChangeTrustOperation: explain_change_trust,
    ManageOfferOperation: explain_manage_offer,
    PathPaymentOperation: explain_path_payment,
    ClawbackOperation: explain_clawback,
    ClawbackClaimableBalanceOperation: explain_clawback_claimable_balance,
    SetOptionsOperation: explain_set_options,
}


def explain_operation(
    op: Operation, resolve_label: LabelLookup | None = None
) -> OperationExplanation:
    if isinstance(op, PaymentOperation):
        record = explain_payment(op, resolve_label=resolve_label)
    elif isinstance(op, OtherOperation):
        return OperationExplanation(
            operation_id=op.id,
            operation_type=op.operation_type,
            summary=f"This {op.operation_type} operation is not yet supported.",
        )
    else:
        record = _EXPLAINERS[type(op)](op)

    return OperationExplanation(
        operation_id=op.id,
        operation_type=op.operation_type,
        summary=record.summary,
        details=_details(record),
    )


def explain_operations(
    operations: tuple[Operation, ...] | list[Operation],
    resolve_label: LabelLookup | None = None,
) -> list[OperationExplanation]:
    return [explain_operation(op, resolve_label) for op in operations]
