"""Path payment (strict send / strict receive) explanation."""

from dataclasses import dataclass

from stellar_explain.domain.mapper import UNKNOWN_ACCOUNT
from stellar_explain.domain.operations import PathPaymentOperation


@dataclass(frozen=True)
class PathPaymentExplanation:
    summary: str
    sender: str
    destination: str
    send_asset: str
    send_amount: str
    dest_asset: str
    dest_amount: str
    payment_type: str
    path_description: str | None = None


def describe_path(path: tuple[str, ...]) -> str | None:
    if not path:
        return None
    n = len(path)
    return f"via {n} intermediate asset{'' if n == 1 else 's'}"


def explain_path_payment(op: PathPaymentOperation) -> PathPaymentExplanation:
    sender = op.source_account or UNKNOWN_ACCOUNT

    if op.send_asset == op.dest_asset:
        summary = f"{sender} sent {op.send_amount} {op.send_asset} to {op.destination}"
    else:
        summary = (
            f"{sender} sent {op.send_amount} {op.send_asset} which was converted to "
            f"{op.dest_amount} {op.dest_asset} received by {op.destination}"
        )

    path_description = describe_path(op.path)
    if path_description:
        summary = f"{summary} {path_description}"

    return PathPaymentExplanation(
        summary=summary,
        sender=sender,
        destination=op.destination,
        send_asset=op.send_asset,
        send_amount=op.send_amount,
        dest_asset=op.dest_asset,
        dest_amount=op.dest_amount,
        payment_type=op.payment_type.value,
        path_description=path_description,
    )
