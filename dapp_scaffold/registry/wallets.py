"""Wallet-connection providers and their chain compatibility."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, field_validator

from ..errors import InvalidOptionError
from .chains import CHAINS, Chain


class WalletProvider(str, Enum):
    """Third-party wallet integration used by the generated project."""

    RAINBOWKIT = "rainbowkit"
    CONNECTKIT = "connectkit"
    PRIVY = "privy"
    DYNAMIC = "dynamic"
    REOWN = "reown"
    THIRDWEB = "thirdweb"
    GETPARA = "getpara"
    WALLET_ADAPTER = "wallet-adapter"


class ProviderInfo(BaseModel):
    """Display metadata and supported chains for a provider."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    chains: tuple[Chain, ...]

    @field_validator("chains")
    @classmethod
    def _non_empty(cls, value: tuple[Chain, ...]) -> tuple[Chain, ...]:
        if not value:
            raise ValueError("a provider must support at least one chain")
        return value


# Declaration order is the selection order; the first compatible entry is a
# chain's default provider.
WALLET_PROVIDERS = MappingProxyType({
    WalletProvider.RAINBOWKIT: ProviderInfo(
        name="RainbowKit",
        description="Best UX for connecting wallets (recommended)",
        chains=(Chain.EVM,),
    ),
    WalletProvider.CONNECTKIT: ProviderInfo(
        name="ConnectKit",
        description="Beautiful, customizable wallet connection UI",
        chains=(Chain.EVM,),
    ),
    WalletProvider.PRIVY: ProviderInfo(
        name="Privy",
        description="Email, social, and wallet login with embedded wallets",
        chains=(Chain.EVM, Chain.SOLANA),
    ),
    WalletProvider.DYNAMIC: ProviderInfo(
        name="Dynamic",
        description="Multi-chain auth with embedded wallets and onramps",
        chains=(Chain.EVM, Chain.SOLANA),
    ),
    WalletProvider.REOWN: ProviderInfo(
        name="Reown (AppKit)",
        description="WalletConnect's official SDK (formerly Web3Modal)",
        chains=(Chain.EVM, Chain.SOLANA),
    ),
    WalletProvider.THIRDWEB: ProviderInfo(
        name="Thirdweb",
        description="Full-stack web3 development platform with embedded wallets",
        chains=(Chain.EVM, Chain.SOLANA),
    ),
    WalletProvider.GETPARA: ProviderInfo(
        name="GetPara (Capsule)",
        description="Embedded wallets with MPC key management",
        chains=(Chain.EVM,),
    ),
    WalletProvider.WALLET_ADAPTER: ProviderInfo(
        name="Solana Wallet Adapter",
        description="Standard Solana wallet connection (recommended)",
        chains=(Chain.SOLANA,),
    ),
})


def providers_for_chain(chain: Chain) -> list[WalletProvider]:
    """Return the providers supporting *chain*, in declaration order."""
    return [key for key, info in WALLET_PROVIDERS.items() if chain in info.chains]


def default_provider(chain: Chain) -> WalletProvider | None:
    """Return the default provider for *chain* (the first compatible one)."""
    providers = providers_for_chain(chain)
    return providers[0] if providers else None


def is_provider_compatible(wallet: WalletProvider, chain: Chain) -> bool:
    """Return ``True`` if *wallet* supports *chain*."""
    info = WALLET_PROVIDERS.get(wallet)
    return info is not None and chain in info.chains


def parse_wallet(value: str | WalletProvider) -> WalletProvider:
    """Parse a wallet provider identifier case-insensitively.

    Raises:
        InvalidOptionError: If *value* is not a known provider.
    """
    if isinstance(value, WalletProvider):
        return value
    try:
        return WalletProvider(value.strip().lower())
    except ValueError:
        valid = ", ".join(w.value for w in WalletProvider)
        raise InvalidOptionError(
            f'Invalid wallet provider "{value}".\n  Valid options: {valid}'
        ) from None


def validate_registry() -> list[str]:
    """Check the registry invariants and return a list of problems (empty if sound).

    Every provider must reference only known chains, and every chain must
    have at least one compatible provider.
    """
    problems: list[str] = []
    for wallet, info in WALLET_PROVIDERS.items():
        for chain in info.chains:
            if chain not in CHAINS:
                problems.append(f"{wallet.value} references unknown chain {chain!r}")
    for chain in CHAINS:
        if default_provider(chain) is None:
            problems.append(f"{chain.value} has no compatible wallet provider")
    return problems
