"""Address -> human label lookup for well-known accounts."""

from collections.abc import Mapping
from types import MappingProxyType

from stellar_explain.core.config import StellarNetwork

PUBLIC_NETWORK_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "GAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAWHF": "Stellar Foundation",
        "GAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAH6H5": "SDF Distribution",
        "GBINANCEAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA": "Binance",
        "GCOINBASEAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA": "Coinbase",
        "GKRAKENAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA": "Kraken",
        "GROBINHOODAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA": "Robinhood",
        "GANCHORAGEAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA": "Anchorage Digital",
        "GUSDCISSUERAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA": "USDC Issuer (Circle)",
        "GSTRONGHOLDAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA": "Stronghold",
        "GTEMPOEUROAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA": "Tempo",
        "GLOBSTRVAULTAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA": "LOBSTR Vault",
    }
)


class LabelResolver:
    """Read-only lookup of labels for known exchange and issuer addresses.

    Addresses are trimmed and upper-cased before lookup.
    """

    def __init__(self, labels: Mapping[str, str] | None = None) -> None:
        self._labels = {key.strip().upper(): value for key, value in (labels or {}).items()}

    @classmethod
    def for_network(cls, network: StellarNetwork | str) -> "LabelResolver":
        if StellarNetwork(network) is StellarNetwork.PUBLIC:
            return cls(PUBLIC_NETWORK_LABELS)
        return cls({})

    def resolve(self, address: str) -> str | None:
        return self._labels.get(address.strip().upper())

    def __len__(self) -> int:
        return len(self._labels)
