"""Memo interpretation."""

from stellar_explain.domain.memo import Memo, MemoType
from stellar_explain.explain.formatting import shorten_hash

_TYPE_DESCRIPTIONS = {
    MemoType.NONE: "No memo",
    MemoType.TEXT: "Text memo",
    MemoType.ID: "ID memo",
    MemoType.HASH: "Hash memo",
    MemoType.RETURN: "Return memo",
}

_USAGE_CONTEXT = {
    MemoType.NONE: "No additional context provided",
    MemoType.TEXT: "Text memos are commonly used for payment references, order numbers, or short notes",
    MemoType.ID: "ID memos are commonly used for customer IDs, invoice numbers, or internal reference numbers",
    MemoType.HASH: (
        "Hash memos are commonly used to reference documents, contracts, "
        "or to implement hash time-locked contracts (HTLCs)"
    ),
    MemoType.RETURN: (
        "Return memos indicate refund or return transactions, "
        "referencing the original transaction"
    ),
}


def explain_memo(memo: Memo | None) -> str | None:
    """Return a sentence describing the memo, or None when there is none."""
    if memo is None or memo.kind is MemoType.NONE:
        return None
    if memo.kind is MemoType.TEXT:
        return f'This transaction includes a text memo: "{memo.value}"'
    if memo.kind is MemoType.ID:
        return (
            f"This transaction includes an ID memo: {memo.value}. "
            "This is typically used as a reference number, customer ID, or invoice number."
        )
    if memo.kind is MemoType.HASH:
        return (
            f"This transaction includes a hash memo: {shorten_hash(str(memo.value))}. "
            "This is typically used to reference a document, contract, or other data."
        )
    return (
        f"This transaction includes a return memo: {shorten_hash(str(memo.value))}. "
        "This indicates a refund or return transaction."
    )


def memo_type_description(memo: Memo | None) -> str:
    kind = memo.kind if memo is not None else MemoType.NONE
    return _TYPE_DESCRIPTIONS[kind]


def memo_usage_context(memo: Memo | None) -> str:
    kind = memo.kind if memo is not None else MemoType.NONE
    return _USAGE_CONTEXT[kind]
