"""dapp-scaffold -- create a Next.js dApp for a chain and wallet provider of your choice."""

__version__ = "0.1.0"
