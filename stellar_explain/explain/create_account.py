"""create_account explanation."""

from dataclasses import dataclass

from stellar_explain.domain.operations import CreateAccountOperation


@dataclass(frozen=True)
class CreateAccountExplanation:
    summary: str
    funder: str
    new_account: str
    starting_balance: str


def explain_create_account(op: CreateAccountOperation) -> CreateAccountExplanation:
    summary = (
        f"{op.funder} created account {op.new_account} "
        f"with a starting balance of {op.starting_balance} XLM."
    )
    return CreateAccountExplanation(
        summary=summary,
        funder=op.funder,
        new_account=op.new_account,
        starting_balance=op.starting_balance,
    )
