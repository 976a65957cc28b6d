"""Fee explanation."""

from stellar_explain.domain.fees import FeeStats, stroops_to_xlm


def explain_fee(fee_charged: int, fee_stats: FeeStats | None = None) -> str:
    """Describe the fee, comparing against network stats when available."""
    base = f"A fee of {stroops_to_xlm(fee_charged)} XLM was charged."
    if fee_stats is None:
        return base
    if fee_stats.is_high_fee(fee_charged):
        multiplier = fee_stats.fee_multiplier(fee_charged)
        return f"{base} This is above average — {multiplier}x the base fee."
    return f"{base} This is a standard network fee."
