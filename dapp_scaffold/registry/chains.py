"""Supported blockchains."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from ..errors import InvalidOptionError


class Chain(str, Enum):
    """Target blockchain ecosystem of the generated project."""

    EVM = "evm"
    SOLANA = "solana"


class ChainInfo(BaseModel):
    """Display metadata for a chain."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str


CHAINS = MappingProxyType({
    Chain.EVM: ChainInfo(
        name="Ethereum (EVM)",
        description="Ethereum, Polygon, Base, Arbitrum, etc.",
    ),
    Chain.SOLANA: ChainInfo(
        name="Solana",
        description="Solana blockchain",
    ),
})

DEFAULT_CHAIN = Chain.EVM


def parse_chain(value: str | Chain) -> Chain:
    """Parse a chain identifier case-insensitively.

    Raises:
        InvalidOptionError: If *value* is not a known chain.
    """
    if isinstance(value, Chain):
        return value
    try:
        return Chain(value.strip().lower())
    except ValueError:
        valid = ", ".join(c.value for c in Chain)
        raise InvalidOptionError(
            f'Invalid chain "{value}".\n  Valid options: {valid}'
        ) from None
