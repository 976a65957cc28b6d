"""Account domain models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Balance:
    asset_type: str
    balance: str
    asset_code: str | None = None
    asset_issuer: str | None = None

    @property
    def is_native(self) -> bool:
        return self.asset_type == "native"


@dataclass(frozen=True)
class AccountFlags:
    auth_required: bool = False
    auth_revocable: bool = False
    auth_immutable: bool = False
    auth_clawback_enabled: bool = False


@dataclass(frozen=True)
class Account:
    account_id: str
    sequence: str
    balances: tuple[Balance, ...] = ()
    signer_count: int = 0
    home_domain: str | None = None
    flags: AccountFlags = AccountFlags()

    def native_balance(self) -> str | None:
        for balance in self.balances:
            if balance.is_native:
                return balance.balance
        return None

    def other_asset_count(self) -> int:
        return sum(1 for balance in self.balances if not balance.is_native)
