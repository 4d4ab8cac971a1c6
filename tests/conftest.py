"""Shared pytest fixtures for the dapp-scaffold test suite.

Provides reusable fixtures for:
- Miniature template trees (base, chain and provider layers)
- A ScaffoldConfig pointing at those trees
- A scripted prompter that replays queued answers
- Resolved options for the common chain / provider combinations
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from dapp_scaffold.config import PackageManager, ScaffoldConfig
from dapp_scaffold.models import ResolvedOptions
from dapp_scaffold.prompts import CANCELLED, Choice
from dapp_scaffold.registry import Chain, WalletProvider


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------

BASE_PACKAGE_JSON: dict[str, Any] = {
    "name": "web3-starter",
    "version": "0.1.0",
    "private": True,
    "scripts": {"dev": "next dev"},
    "dependencies": {
        "next": "^15.1.0",
        "react": "^19.0.0",
        "wagmi": "^2.0.0",
        "viem": "^2.0.0",
        "@rainbow-me/rainbowkit": "^1.0.0",
    },
}


def write_files(root: Path, files: dict[str, str]) -> None:
    """Create *files* (relative path -> content) under *root*."""
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    """A small but complete templates directory.

    Layout::

        base/      package.json, README.md, app/page.tsx, components/Header.tsx,
                   node_modules/, .next/, .git/   (the last three are excluded)
        evm/       app/page.tsx, lib/chains.ts, base/ (marker), one dir per provider
        solana/    app/page.tsx, one dir per provider
    """
    root = tmp_path / "templates"
    write_files(root / "base", {
        "package.json": json.dumps(BASE_PACKAGE_JSON, indent=2) + "\n",
        "README.md": "# Starter\n",
        "app/page.tsx": "base page\n",
        "components/Header.tsx": "base header\n",
        "node_modules/left-pad/index.js": "module.exports = 1\n",
        ".next/cache.json": "{}\n",
        ".git/HEAD": "ref: refs/heads/main\n",
    })
    write_files(root / "evm", {
        "app/page.tsx": "evm page\n",
        "lib/chains.ts": "export const chains = []\n",
        "base/SHOULD_NOT_COPY.txt": "marker\n",
        "shared.txt": "evm shared\n",
    })
    write_files(root / "solana", {
        "app/page.tsx": "solana page\n",
    })
    for wallet in (
        WalletProvider.RAINBOWKIT,
        WalletProvider.CONNECTKIT,
        WalletProvider.PRIVY,
        WalletProvider.DYNAMIC,
        WalletProvider.REOWN,
        WalletProvider.THIRDWEB,
        WalletProvider.GETPARA,
    ):
        write_files(root / "evm" / wallet.value, {
            "components/Providers.tsx": f"evm {wallet.value} providers\n",
        })
    for wallet in (
        WalletProvider.WALLET_ADAPTER,
        WalletProvider.PRIVY,
        WalletProvider.DYNAMIC,
        WalletProvider.REOWN,
        WalletProvider.THIRDWEB,
    ):
        write_files(root / "solana" / wallet.value, {
            "components/Providers.tsx": f"solana {wallet.value} providers\n",
            "components/Header.tsx": f"solana {wallet.value} header\n",
        })
    return root


@pytest.fixture
def config(template_tree: Path) -> ScaffoldConfig:
    """ScaffoldConfig pointing at the miniature template tree."""
    return ScaffoldConfig(templates_dir=template_tree)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Directory projects are created in."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def make_options(workspace: Path) -> Callable[..., ResolvedOptions]:
    """Factory for ResolvedOptions rooted in ``workspace``."""

    def _make(
        chain: Chain = Chain.EVM,
        wallet: WalletProvider = WalletProvider.RAINBOWKIT,
        name: str = "my-dapp",
        **kwargs: Any,
    ) -> ResolvedOptions:
        return ResolvedOptions(
            project_name=name,
            chain=chain,
            wallet=wallet,
            project_path=(workspace / name).resolve(),
            package_manager=kwargs.pop("package_manager", PackageManager.NPM),
            **kwargs,
        )

    return _make


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------


class ScriptedPrompter:
    """Prompter that replays queued answers.

    ``text`` feeds answers through the validator the way an interactive
    prompt would re-ask, recording every rejection in ``validation_errors``.
    An exhausted queue, or a queued ``CANCELLED``, cancels the prompt.
    """

    def __init__(self, *answers: Any) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[str, str, Any]] = []
        self.validation_errors: list[str] = []

    def _next(self) -> Any:
        if not self.answers:
            return CANCELLED
        return self.answers.pop(0)

    def text(self, message: str, default: str = "", validate=None):
        self.calls.append(("text", message, default))
        while True:
            answer = self._next()
            if answer is CANCELLED:
                return CANCELLED
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.validation_errors.append(error)

    def select(self, message: str, options: Sequence[Choice], default=None):
        self.calls.append(("select", message, [o.value for o in options]))
        return self._next()

    def confirm(self, message: str, default: bool = False):
        self.calls.append(("confirm", message, default))
        return self._next()


@pytest.fixture
def make_prompter() -> Callable[..., ScriptedPrompter]:
    """Factory returning a ScriptedPrompter with the given answers."""
    return ScriptedPrompter


@pytest.fixture(autouse=True)
def _no_user_agent(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep package manager detection independent of how pytest was launched."""
    monkeypatch.delenv("npm_config_user_agent", raising=False)
