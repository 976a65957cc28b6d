"""Transaction-level orchestrator.

Pure and synchronous: combines per-payment explanations with memo, fee and
ledger context into one ``TransactionExplanation``. The only failure is an
empty transaction.
"""

from dataclasses import dataclass

from stellar_explain.core.errors import EmptyTransactionError
from stellar_explain.domain.fees import FeeStats
from stellar_explain.domain.transaction import Transaction
from stellar_explain.explain.fees import explain_fee
from stellar_explain.explain.formatting import LabelLookup, format_ledger_time
from stellar_explain.explain.memo import explain_memo
from stellar_explain.explain.payment import PaymentExplanation, explain_payment

PRODUCT_NAME = "Stellar Explain"


@dataclass(frozen=True)
class TransactionExplanation:
    transaction_hash: str
    successful: bool
    summary: str
    payment_explanations: tuple[PaymentExplanation, ...] = ()
    skipped_operations: int = 0
    memo_explanation: str | None = None
    fee_explanation: str | None = None
    ledger_closed_at: str | None = None
    ledger: int | None = None


def build_transaction_summary(successful: bool, payment_count: int, skipped: int) -> str:
    status = "successful" if successful else "failed"

    if payment_count == 0:
        noun = "operation" if skipped == 1 else "operations"
        return (
            f"This {status} transaction contains {skipped} {noun} "
            f"that {PRODUCT_NAME} does not yet support."
        )

    payments = "1 payment" if payment_count == 1 else f"{payment_count} payments"
    parts = [f"This {status} transaction contains {payments}"]
    if skipped == 1:
        parts.append("1 other operation was skipped")
    elif skipped > 1:
        parts.append(f"{skipped} other operations were skipped")
    return ". ".join(parts) + "."


def add_ledger_context(summary: str, created_at: str | None, ledger: int | None) -> str:
    if created_at and ledger is not None:
        return (
            f"{summary} This transaction was confirmed on "
            f"{format_ledger_time(created_at)} (ledger #{ledger})."
        )
    if created_at:
        return f"{summary} This transaction was confirmed on {format_ledger_time(created_at)}."
    if ledger is not None:
        return f"{summary} Included in ledger #{ledger}."
    return summary


def explain_transaction(
    transaction: Transaction,
    fee_stats: FeeStats | None = None,
    *,
    created_at: str | None = None,
    ledger: int | None = None,
    resolve_label: LabelLookup | None = None,
) -> TransactionExplanation:
    """Explain a transaction.

    Args:
        transaction: Mapped transaction with its operations and memo
        fee_stats: Network fee snapshot; when None payments carry no fee
            note and the fee explanation falls back to the bare amount
        created_at: Ledger close time as returned by Horizon
        ledger: Ledger sequence number
        resolve_label: Optional address -> label lookup

    Raises:
        EmptyTransactionError: The transaction has no operations.
    """
    if not transaction.operations:
        raise EmptyTransactionError()

    payments = transaction.payment_operations()
    skipped = len(transaction.operations) - len(payments)
    fee_context = (transaction.fee_charged, fee_stats) if fee_stats is not None else None

    payment_explanations = tuple(
        explain_payment(op, resolve_label=resolve_label, fee_context=fee_context)
        for op in payments
    )

    summary = build_transaction_summary(transaction.successful, len(payments), skipped)
    summary = add_ledger_context(summary, created_at, ledger)

    return TransactionExplanation(
        transaction_hash=transaction.hash,
        successful=transaction.successful,
        summary=summary,
        payment_explanations=payment_explanations,
        skipped_operations=skipped,
        memo_explanation=explain_memo(transaction.memo),
        fee_explanation=explain_fee(transaction.fee_charged, fee_stats),
        ledger_closed_at=created_at,
        ledger=ledger,
    )
