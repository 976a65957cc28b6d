"""Network fee statistics and stroop conversion.

Pure functions. All fees are integers in stroops.
"""

from __future__ import annotations

from dataclasses import dataclass

STROOPS_PER_XLM = 10_000_000
HIGH_FEE_MULTIPLIER = 5


def stroops_to_xlm(stroops: int) -> str:
    """Convert stroops to an XLM string with exactly 7 decimal places."""
    whole, fraction = divmod(stroops, STROOPS_PER_XLM)
    return f"{whole}.{fraction:07d}"


def is_high_fee(fee_charged: int, base_fee: int) -> bool:
    """A fee is high only when strictly above 5x the base fee."""
    return fee_charged > HIGH_FEE_MULTIPLIER * base_fee


def fee_multiplier(fee_charged: int, base_fee: int) -> int:
    return fee_charged // max(base_fee, 1)


@dataclass(frozen=True)
class FeeStats:
    base_fee: int
    min_fee: int
    max_fee: int
    mode_fee: int
    p90_fee: int

    @classmethod
    def default_network_fees(cls) -> FeeStats:
        return cls(base_fee=100, min_fee=100, max_fee=100_000, mode_fee=100, p90_fee=1000)

    def is_high_fee(self, fee_charged: int) -> bool:
        return is_high_fee(fee_charged, self.base_fee)

    def fee_multiplier(self, fee_charged: int) -> int:
        return fee_multiplier(fee_charged, self.base_fee)

    def recommended_fee(self, priority: str) -> int:
        """Suggest a fee for ``low``, ``medium`` or ``high`` priority."""
        if priority == "medium":
            return max(self.mode_fee, self.base_fee)
        if priority == "high":
            return max(self.p90_fee, self.mode_fee)
        return self.base_fee
