"""Pydantic v2 models for the options of a scaffolding run."""

from __future__ import annotations

from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .config import PackageManager
from .registry import CHAINS, WALLET_PROVIDERS, Chain, WalletProvider, is_provider_compatible


class CLIOptions(BaseModel):
    """Raw options bag collected from the command line.

    Unset fields are filled in interactively, or with defaults when ``yes``
    is set.
    """

    project_name: str | None = Field(default=None)
    chain: Chain | None = Field(default=None)
    wallet: WalletProvider | None = Field(default=None)
    yes: bool = Field(default=False, description="Skip prompts and use defaults")
    git: bool = Field(default=False, description="Initialise a git repository")
    install: bool = Field(default=False, description="Install dependencies after creation")
    package_manager: PackageManager | None = Field(default=None)


class ResolvedOptions(BaseModel):
    """The fully determined configuration of one generation run.

    Built once by the orchestrator after every validation has passed and
    never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str
    chain: Chain
    wallet: WalletProvider
    project_path: Path
    package_manager: PackageManager = PackageManager.NPM
    git: bool = False
    install: bool = False

    @model_validator(mode="after")
    def _check_combination(self) -> "ResolvedOptions":
        if not is_provider_compatible(self.wallet, self.chain):
            raise ValueError(
                f"{WALLET_PROVIDERS[self.wallet].name} doesn't support {CHAINS[self.chain].name}"
            )
        if not self.project_path.is_absolute():
            raise ValueError("project_path must be absolute")
        return self
