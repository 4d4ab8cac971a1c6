"""Dependency versions for every chain / wallet provider combination.

Update versions here when upgrading the generated project's dependencies.
"""

from __future__ import annotations

from types import MappingProxyType

from .chains import Chain
from .wallets import WalletProvider

VERSIONS = MappingProxyType({
    # EVM base
    "wagmi": "^2.19.5",
    "viem": "^2.44.4",
    # Solana base
    "@solana/web3.js": "^1.98.0",
    "@solana/wallet-adapter-react": "^0.15.35",
    "@solana/wallet-adapter-react-ui": "^0.9.35",
    "@solana/wallet-adapter-wallets": "^0.19.32",
    # Wallet providers
    "@rainbow-me/rainbowkit": "^2.2.10",
    "connectkit": "^1.8.2",
    "@privy-io/react-auth": "^2.4.1",
    "@privy-io/wagmi": "^1.0.2",
    "@dynamic-labs/ethereum": "^4.0.0",
    "@dynamic-labs/solana": "^4.0.0",
    "@dynamic-labs/sdk-react-core": "^4.0.0",
    "@dynamic-labs/wagmi-connector": "^4.0.0",
    "@reown/appkit": "^1.6.1",
    "@reown/appkit-adapter-wagmi": "^1.6.1",
    "@reown/appkit-adapter-solana": "^1.6.1",
    "thirdweb": "^5.80.0",
    "@getpara/react-sdk": "^2.0.0",
})

_CHAIN_PACKAGES: dict[Chain, tuple[str, ...]] = {
    Chain.EVM: ("wagmi", "viem"),
    Chain.SOLANA: (
        "@solana/web3.js",
        "@solana/wallet-adapter-react",
        "@solana/wallet-adapter-react-ui",
        "@solana/wallet-adapter-wallets",
    ),
}

_WALLET_PACKAGES: dict[tuple[Chain, WalletProvider], tuple[str, ...]] = {
    (Chain.EVM, WalletProvider.RAINBOWKIT): ("@rainbow-me/rainbowkit",),
    (Chain.EVM, WalletProvider.CONNECTKIT): ("connectkit",),
    (Chain.EVM, WalletProvider.PRIVY): ("@privy-io/react-auth", "@privy-io/wagmi"),
    (Chain.EVM, WalletProvider.DYNAMIC): (
        "@dynamic-labs/ethereum",
        "@dynamic-labs/sdk-react-core",
        "@dynamic-labs/wagmi-connector",
    ),
    (Chain.EVM, WalletProvider.REOWN): ("@reown/appkit", "@reown/appkit-adapter-wagmi"),
    (Chain.EVM, WalletProvider.THIRDWEB): ("thirdweb",),
    (Chain.EVM, WalletProvider.GETPARA): ("@getpara/react-sdk",),
    # wallet-adapter only needs the Solana base packages
    (Chain.SOLANA, WalletProvider.WALLET_ADAPTER): (),
    (Chain.SOLANA, WalletProvider.PRIVY): ("@privy-io/react-auth",),
    (Chain.SOLANA, WalletProvider.DYNAMIC): (
        "@dynamic-labs/solana",
        "@dynamic-labs/sdk-react-core",
    ),
    (Chain.SOLANA, WalletProvider.REOWN): ("@reown/appkit", "@reown/appkit-adapter-solana"),
    (Chain.SOLANA, WalletProvider.THIRDWEB): ("thirdweb",),
}

# Every wallet-related dependency any combination has ever added.  These are
# removed from package.json before the selected set is applied.
ALL_WALLET_DEPS: tuple[str, ...] = (
    # EVM
    "@rainbow-me/rainbowkit",
    "@privy-io/react-auth",
    "@privy-io/wagmi",
    "@dynamic-labs/ethereum",
    "@dynamic-labs/sdk-react-core",
    "@dynamic-labs/wagmi-connector",
    "@reown/appkit",
    "@reown/appkit-adapter-wagmi",
    "thirdweb",
    "@getpara/react-sdk",
    "connectkit",
    "wagmi",
    "viem",
    # Solana
    "@dynamic-labs/solana",
    "@reown/appkit-adapter-solana",
    "@solana/web3.js",
    "@solana/wallet-adapter-react",
    "@solana/wallet-adapter-react-ui",
    "@solana/wallet-adapter-wallets",
)


def chain_dependencies(chain: Chain) -> dict[str, str]:
    """Return the base dependencies every project on *chain* needs."""
    return {name: VERSIONS[name] for name in _CHAIN_PACKAGES.get(chain, ())}


def wallet_dependencies(chain: Chain, wallet: WalletProvider) -> dict[str, str]:
    """Return the extra dependencies *wallet* needs on *chain*.

    Unknown or incompatible combinations yield an empty mapping; rejecting
    them is the caller's job.
    """
    return {name: VERSIONS[name] for name in _WALLET_PACKAGES.get((chain, wallet), ())}
