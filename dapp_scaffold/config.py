"""dapp-scaffold configuration.

Typed configuration for a scaffolding run.  Settings use Pydantic v2 models
so they are validated at construction time and can be built from environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .naming import validate_project_name

_PACKAGED_TEMPLATES = Path(__file__).parent / "templates"


class PackageManager(str, Enum):
    """Package managers the generated project can be installed with."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


def detect_package_manager(user_agent: str | None = None) -> PackageManager:
    """Detect the package manager that invoked us from ``npm_config_user_agent``.

    Falls back to npm when the variable is unset, empty or unrecognised.
    """
    if user_agent is None:
        user_agent = os.environ.get("npm_config_user_agent", "")
    if user_agent.startswith("yarn"):
        return PackageManager.YARN
    if user_agent.startswith("pnpm"):
        return PackageManager.PNPM
    if user_agent.startswith("bun"):
        return PackageManager.BUN
    return PackageManager.NPM


class ScaffoldConfig(BaseModel):
    """Global dapp-scaffold configuration.

    Holds the template location, the non-interactive defaults and the
    timeouts for the best-effort post actions.  Instances are created once
    by the CLI entry point and passed through the rest of the system.
    """

    templates_dir: Path = Field(default=_PACKAGED_TEMPLATES)
    default_project_name: str = Field(default="my-dapp")
    default_chain: str = Field(default="evm")
    base_excludes: tuple[str, ...] = Field(default=("node_modules", ".next", ".git"))
    git_timeout: int = Field(default=60, ge=1, description="git subprocess timeout in seconds")
    install_timeout: int = Field(
        default=600, ge=1, description="Dependency install timeout in seconds"
    )
    conflict_display_limit: int = Field(default=5, ge=1)

    @field_validator("default_project_name")
    @classmethod
    def _valid_default_name(cls, value: str) -> str:
        validation = validate_project_name(value)
        if not validation.valid:
            problems = "; ".join(validation.problems or [])
            raise ValueError(f"invalid default project name \"{value}\": {problems}")
        return value

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def base_template(self) -> Path:
        """Root of the chain-independent base template."""
        return self.templates_dir / "base"

    def chain_template(self, chain: str) -> Path:
        """Root of the chain template, which also holds the provider subtrees."""
        return self.templates_dir / str(getattr(chain, "value", chain))

    def wallet_template(self, chain: str, wallet: str) -> Path:
        """Provider subtree for *wallet* under *chain*."""
        return self.chain_template(chain) / str(getattr(wallet, "value", wallet))

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            DAPP_TEMPLATES_DIR, DAPP_DEFAULT_NAME, DAPP_GIT_TIMEOUT,
            DAPP_INSTALL_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("DAPP_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["DAPP_TEMPLATES_DIR"])
        if os.environ.get("DAPP_DEFAULT_NAME"):
            kwargs["default_project_name"] = os.environ["DAPP_DEFAULT_NAME"]
        if os.environ.get("DAPP_GIT_TIMEOUT"):
            kwargs["git_timeout"] = int(os.environ["DAPP_GIT_TIMEOUT"])
        if os.environ.get("DAPP_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["DAPP_INSTALL_TIMEOUT"])
        return cls(**kwargs)
