"""Static chain / wallet provider registry and dependency tables.

Quick usage::

    from dapp_scaffold.registry import Chain, providers_for_chain

    providers_for_chain(Chain.SOLANA)
    # [WalletProvider.PRIVY, WalletProvider.DYNAMIC, ...]
"""

from dapp_scaffold.registry.chains import CHAINS, DEFAULT_CHAIN, Chain, ChainInfo, parse_chain
from dapp_scaffold.registry.dependencies import (
    ALL_WALLET_DEPS,
    VERSIONS,
    chain_dependencies,
    wallet_dependencies,
)
from dapp_scaffold.registry.wallets import (
    WALLET_PROVIDERS,
    ProviderInfo,
    WalletProvider,
    default_provider,
    is_provider_compatible,
    parse_wallet,
    providers_for_chain,
    validate_registry,
)

__all__ = [
    "ALL_WALLET_DEPS",
    "CHAINS",
    "DEFAULT_CHAIN",
    "VERSIONS",
    "WALLET_PROVIDERS",
    "Chain",
    "ChainInfo",
    "ProviderInfo",
    "WalletProvider",
    "chain_dependencies",
    "default_provider",
    "is_provider_compatible",
    "parse_chain",
    "parse_wallet",
    "providers_for_chain",
    "validate_registry",
    "wallet_dependencies",
]
