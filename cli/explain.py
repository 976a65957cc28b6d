"""Command-line explainer.

    python -m cli.explain tx <hash> [--format text|json] [--network public|testnet]
    python -m cli.explain account <address> [--format text|json] [--network ...]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from stellar_explain.clients.horizon_client import HorizonClient
from stellar_explain.core.config import StellarNetwork, get_settings
from stellar_explain.core.errors import ExplainServiceError
from stellar_explain.explain.account import AccountExplanation
from stellar_explain.explain.transaction import TransactionExplanation
from stellar_explain.services.account_service import AccountService
from stellar_explain.services.explain_service import ExplainService
from stellar_explain.services.labels import LabelResolver
from stellar_explain.utils.dataclass_utils import to_dict


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--network",
        choices=[n.value for n in StellarNetwork],
        default=None,
        help="Stellar network (defaults to HORIZON_NETWORK / STELLAR_NETWORK)",
    )
    common.add_argument("--format", choices=["text", "json"], default="text", dest="output")

    parser = argparse.ArgumentParser(
        prog="stellar-explain",
        description="Explain Stellar transactions and accounts in plain language.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    tx = commands.add_parser("tx", parents=[common], help="Explain a transaction")
    tx.add_argument("hash")
    account = commands.add_parser("account", parents=[common], help="Explain an account")
    account.add_argument("address")
    return parser


def render_transaction(explanation: TransactionExplanation) -> str:
    lines = [explanation.summary, ""]
    for payment in explanation.payment_explanations:
        lines.append(f"  - {payment.summary}")
    if explanation.payment_explanations:
        lines.append("")
    if explanation.memo_explanation:
        lines.append(explanation.memo_explanation)
    if explanation.fee_explanation:
        lines.append(explanation.fee_explanation)
    return "\n".join(lines).rstrip()


def render_account(explanation: AccountExplanation) -> str:
    lines = [explanation.summary]
    for description in explanation.flag_descriptions:
        lines.append(f"  - {description}")
    return "\n".join(lines)


def _dump(record: Any) -> str:
    data = to_dict(record)
    for payment in data.get("payment_explanations", []):
        payment["from"] = payment.pop("from_account")
    return json.dumps(data, indent=2)


async def run(args: argparse.Namespace) -> str:
    settings = get_settings()
    horizon_config = settings.horizon
    if args.network:
        horizon_config = horizon_config.model_copy(
            update={"network": StellarNetwork(args.network), "base_url": None}
        )

    client = HorizonClient(horizon_config)
    try:
        if args.command == "tx":
            service = ExplainService(
                client,
                LabelResolver.for_network(horizon_config.network),
                fee_stats_timeout_seconds=horizon_config.fee_stats_timeout_seconds,
            )
            explanation = await service.explain_transaction(args.hash)
            renderer = render_transaction
        else:
            explanation = await AccountService(client).explain_account(args.address)
            renderer = render_account
    finally:
        await client.close()

    if args.output == "json":
        return _dump(explanation)
    return renderer(explanation)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        output = asyncio.run(run(args))
    except ExplainServiceError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
