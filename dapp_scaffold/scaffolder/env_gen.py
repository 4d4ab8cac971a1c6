"""Generate the ``.env.example`` file for the selected provider.

Each provider has a Jinja2 template under ``env_templates/`` listing the
credentials it needs.  The chain only decides how the deployed contract is
addressed (``NEXT_PUBLIC_CONTRACT_ADDRESS`` on EVM, ``NEXT_PUBLIC_PROGRAM_ID``
on Solana).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..registry import Chain, WalletProvider

ENV_EXAMPLE_FILENAME = ".env.example"

_ENV_TEMPLATE_DIR = Path(__file__).parent / "env_templates"

# RainbowKit and ConnectKit both authenticate against WalletConnect Cloud.
ENV_TEMPLATES: dict[WalletProvider, str] = {
    WalletProvider.RAINBOWKIT: "walletconnect.env.j2",
    WalletProvider.CONNECTKIT: "walletconnect.env.j2",
    WalletProvider.WALLET_ADAPTER: "wallet-adapter.env.j2",
    WalletProvider.PRIVY: "privy.env.j2",
    WalletProvider.DYNAMIC: "dynamic.env.j2",
    WalletProvider.REOWN: "reown.env.j2",
    WalletProvider.THIRDWEB: "thirdweb.env.j2",
    WalletProvider.GETPARA: "getpara.env.j2",
}


def env_context(chain: Chain) -> dict[str, Any]:
    """Return the chain-dependent template variables."""
    if chain == Chain.EVM:
        return {
            "chain_comment": "# Contract configuration",
            "address_var": "NEXT_PUBLIC_CONTRACT_ADDRESS=",
            "address_noun": "smart contract",
        }
    return {
        "chain_comment": "# Program configuration",
        "address_var": "NEXT_PUBLIC_PROGRAM_ID=",
        "address_noun": "program",
    }


class EnvRenderer:
    """Renders provider ``.env`` templates.

    Undefined template variables raise instead of rendering as empty
    strings, so a template and :func:`env_context` cannot drift apart
    silently.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir else _ENV_TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, chain: Chain, wallet: WalletProvider) -> str:
        template = self.env.get_template(ENV_TEMPLATES[wallet])
        return template.render(**env_context(chain))

    def write(self, project_path: str | Path, chain: Chain, wallet: WalletProvider) -> Path:
        """Write ``.env.example`` into *project_path*, replacing any existing file."""
        out = Path(project_path) / ENV_EXAMPLE_FILENAME
        out.write_text(self.render(chain, wallet), encoding="utf-8")
        return out

    def available_templates(self) -> list[str]:
        """Sorted names of the ``.j2`` files in the template directory."""
        if not self.template_dir.is_dir():
            return []
        return sorted(p.name for p in self.template_dir.glob("*.j2"))


def render_env_example(
    chain: Chain, wallet: WalletProvider, renderer: EnvRenderer | None = None
) -> str:
    """Return the ``.env.example`` content for *chain* and *wallet*."""
    return (renderer or EnvRenderer()).render(chain, wallet)


def update_env_example(
    project_path: str | Path,
    chain: Chain,
    wallet: WalletProvider,
    renderer: EnvRenderer | None = None,
) -> Path:
    """Write ``.env.example`` for *chain* and *wallet* into *project_path*."""
    return (renderer or EnvRenderer()).write(project_path, chain, wallet)
