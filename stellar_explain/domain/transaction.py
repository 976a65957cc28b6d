"""Transaction aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from stellar_explain.domain.memo import Memo
from stellar_explain.domain.operations import Operation, PaymentOperation


@dataclass(frozen=True)
class Transaction:
    hash: str
    successful: bool
    fee_charged: int
    operations: tuple[Operation, ...] = ()
    memo: Memo | None = None

    def payment_operations(self) -> list[PaymentOperation]:
        return [op for op in self.operations if isinstance(op, PaymentOperation)]

    def payment_count(self) -> int:
        return len(self.payment_operations())

    def has_payments(self) -> bool:
        return self.payment_count() > 0
