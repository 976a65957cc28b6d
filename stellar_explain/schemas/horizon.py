"""Pydantic models for the Horizon REST wire format.

Only the fields the explanation engine reads are declared; everything else
Horizon returns is ignored. Numeric fields arrive as decimal strings and are
parsed strictly, so a malformed value fails validation of the whole record.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Horizon's "flags" list form uses these names for each bit.
_FLAG_BITS = {
    "auth_required": 1,
    "auth_required_flag": 1,
    "auth_revocable": 2,
    "auth_revocable_flag": 2,
    "auth_immutable": 4,
    "auth_immutable_flag": 4,
    "auth_clawback_enabled": 8,
    "auth_clawback_enabled_flag": 8,
}


class HorizonModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class HorizonTransaction(HorizonModel):
    hash: str
    successful: bool
    fee_charged: int
    memo_type: str | None = None
    memo: str | None = None
    created_at: str | None = None
    ledger: int | None = None
    source_account: str | None = None
    operation_count: int | None = None

    @field_validator("fee_charged", mode="before")
    @classmethod
    def parse_fee_charged(cls, v: Any) -> int:
        if isinstance(v, bool):
            raise ValueError("fee_charged must be a non-negative integer")
        if isinstance(v, int):
            parsed = v
        else:
            text = str(v).strip()
            if not text.isdigit():
                raise ValueError("fee_charged must be a non-negative integer")
            parsed = int(text)
        if parsed < 0:
            raise ValueError("fee_charged must be a non-negative integer")
        return parsed


class HorizonAsset(HorizonModel):
    asset_type: str
    asset_code: str | None = None
    asset_issuer: str | None = None


class HorizonOperation(HorizonModel):
    """Flattened union of every per-kind field Horizon may send."""

    id: str
    type: str
    source_account: str | None = None

    # payment / path payments
    from_account: str | None = Field(default=None, alias="from")
    to: str | None = None
    amount: str | None = None
    asset_type: str | None = None
    asset_code: str | None = None
    asset_issuer: str | None = None
    source_amount: str | None = None
    source_asset_type: str | None = None
    source_asset_code: str | None = None
    source_asset_issuer: str | None = None
    path: list[HorizonAsset] | None = None

    # create_account
    funder: str | None = None
    account: str | None = None
    starting_balance: str | None = None

    # change_trust
    trustor: str | None = None
    trustee: str | None = None
    limit: str | None = None

    # manage offers
    selling_asset_type: str | None = None
    selling_asset_code: str | None = None
    selling_asset_issuer: str | None = None
    buying_asset_type: str | None = None
    buying_asset_code: str | None = None
    buying_asset_issuer: str | None = None
    price: str | None = None
    offer_id: str | None = None

    # clawback_claimable_balance
    balance_id: str | None = None

    # set_options
    inflation_dest: str | None = None
    master_key_weight: int | None = None
    low_threshold: int | None = None
    med_threshold: int | None = None
    high_threshold: int | None = None
    home_domain: str | None = None
    set_flags: int | None = None
    clear_flags: int | None = None
    signer_key: str | None = None
    signer_weight: int | None = None

    @field_validator("offer_id", mode="before")
    @classmethod
    def offer_id_as_string(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("set_flags", "clear_flags", mode="before")
    @classmethod
    def normalise_flags(cls, v: Any) -> Any:
        """Accept either a bitmask or Horizon's list form (``[1, 2]`` or names)."""
        if v is None or isinstance(v, int):
            return v
        if isinstance(v, list):
            mask = 0
            for item in v:
                if isinstance(item, int):
                    mask |= item
                elif isinstance(item, str) and item in _FLAG_BITS:
                    mask |= _FLAG_BITS[item]
                elif isinstance(item, str) and item.isdigit():
                    mask |= int(item)
                else:
                    raise ValueError(f"unknown account flag: {item!r}")
            return mask
        return v


class HorizonFeeStats(HorizonModel):
    last_ledger_base_fee: int
    min_fee: int
    max_fee: int
    mode_fee: int
    p90_fee: int

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "HorizonFeeStats":
        """Flatten the ``/fee_stats`` body into one model."""
        fee_charged = payload.get("fee_charged") or {}
        return cls.model_validate(
            {
                "last_ledger_base_fee": payload.get("last_ledger_base_fee"),
                "min_fee": fee_charged.get("min"),
                "max_fee": fee_charged.get("max"),
                "mode_fee": fee_charged.get("mode"),
                "p90_fee": fee_charged.get("p90"),
            }
        )


class HorizonBalance(HorizonModel):
    asset_type: str
    balance: str
    asset_code: str | None = None
    asset_issuer: str | None = None


class HorizonAccountFlags(HorizonModel):
    auth_required: bool = False
    auth_revocable: bool = False
    auth_immutable: bool = False
    auth_clawback_enabled: bool = False


class HorizonSigner(HorizonModel):
    key: str
    weight: int = 0
    type: str | None = None


class HorizonAccount(HorizonModel):
    account_id: str
    sequence: str
    balances: list[HorizonBalance] = Field(default_factory=list)
    signers: list[HorizonSigner] = Field(default_factory=list)
    home_domain: str | None = None
    flags: HorizonAccountFlags = Field(default_factory=HorizonAccountFlags)
