"""Rewrite the generated project's ``package.json``."""

from __future__ import annotations

from pathlib import Path

from ..registry import (
    ALL_WALLET_DEPS,
    CHAINS,
    WALLET_PROVIDERS,
    Chain,
    WalletProvider,
    chain_dependencies,
    wallet_dependencies,
)
from ..utils import load_json, write_json

MANIFEST_FILENAME = "package.json"

_CHAIN_LABELS: dict[Chain, str] = {
    Chain.EVM: "Ethereum",
    Chain.SOLANA: "Solana",
}


def project_description(chain: Chain, wallet: WalletProvider) -> str:
    """Return the ``description`` written into the manifest."""
    chain_label = _CHAIN_LABELS.get(chain, CHAINS[chain].name)
    return f"A Next.js dApp built on {chain_label} with {WALLET_PROVIDERS[wallet].name}"


def merge_dependencies(
    dependencies: dict[str, str], chain: Chain, wallet: WalletProvider
) -> dict[str, str]:
    """Return *dependencies* with every wallet dependency replaced by the selected set.

    Keys are sorted by code point so the output does not depend on locale
    or on the order of the input.
    """
    merged = {k: v for k, v in dependencies.items() if k not in ALL_WALLET_DEPS}
    merged.update(chain_dependencies(chain))
    merged.update(wallet_dependencies(chain, wallet))
    return dict(sorted(merged.items()))


def update_package_json(
    project_path: str | Path,
    project_name: str,
    chain: Chain,
    wallet: WalletProvider,
) -> Path:
    """Patch ``package.json`` in *project_path* for the selected combination.

    Sets ``name`` and ``description``, swaps the wallet dependencies and
    writes the file back with two-space indentation and a trailing newline.
    Running it twice with the same arguments leaves the file byte-identical.

    Returns:
        Path of the rewritten manifest.

    Raises:
        FileNotFoundError: If the manifest is missing.
        json.JSONDecodeError: If the manifest is not a JSON object.
    """
    manifest_path = Path(project_path) / MANIFEST_FILENAME
    pkg = load_json(manifest_path)

    pkg["name"] = project_name
    pkg["description"] = project_description(chain, wallet)
    pkg["dependencies"] = merge_dependencies(pkg.get("dependencies") or {}, chain, wallet)

    write_json(pkg, manifest_path)
    return manifest_path
