"""set_options explanation.

Checks each optional field in a fixed order and collects one change
description per field that is present.
"""

from dataclasses import dataclass, field

from stellar_explain.domain.mapper import UNKNOWN_ACCOUNT
from stellar_explain.domain.operations import SetOptionsOperation
from stellar_explain.explain.formatting import describe_flags, join_natural, shorten_key


@dataclass(frozen=True)
class SetOptionsExplanation:
    summary: str
    account: str
    changes: list[str] = field(default_factory=list)


def _collect_changes(op: SetOptionsOperation) -> list[str]:
    changes: list[str] = []

    if op.inflation_dest is not None:
        changes.append(f"set inflation destination to {op.inflation_dest}")

    if op.master_weight is not None:
        if op.master_weight == 0:
            changes.append("disabled the master key")
        else:
            changes.append(f"set master key weight to {op.master_weight}")

    if op.low_threshold is not None:
        changes.append(f"set low threshold to {op.low_threshold}")
    if op.med_threshold is not None:
        changes.append(f"set medium threshold to {op.med_threshold}")
    if op.high_threshold is not None:
        changes.append(f"set high threshold to {op.high_threshold}")

    if op.home_domain is not None:
        if op.home_domain == "":
            changes.append("cleared the home domain")
        else:
            changes.append(f"set home domain to {op.home_domain}")

    if op.set_flags:
        changes.append(f"enabled account flag(s): {describe_flags(op.set_flags)}")
    if op.clear_flags:
        changes.append(f"disabled account flag(s): {describe_flags(op.clear_flags)}")

    if op.signer_key is not None:
        key = shorten_key(op.signer_key)
        if op.signer_weight is None:
            changes.append(f"modified signer {key}")
        elif op.signer_weight == 0:
            changes.append(f"removed signer {key}")
        else:
            changes.append(f"added signer {key} with weight {op.signer_weight}")

    return changes


def explain_set_options(op: SetOptionsOperation) -> SetOptionsExplanation:
    account = op.source_account or UNKNOWN_ACCOUNT
    changes = _collect_changes(op)
    if changes:
        summary = f"{account} updated their account: {join_natural(changes)}"
    else:
        summary = f"{account} submitted a set_options operation with no recognised changes."
    return SetOptionsExplanation(summary=summary, account=account, changes=changes)
