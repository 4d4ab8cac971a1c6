"""Main scaffolding generator.

Takes a ``ResolvedOptions`` and materialises the project directory by
overlaying the base, chain and wallet templates, then rewriting
``package.json`` and ``.env.example`` for the selected combination.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from ..config import ScaffoldConfig
from ..errors import GenerationError, TemplateNotFoundError, categorize_error
from ..models import ResolvedOptions
from ..registry import CHAINS, WALLET_PROVIDERS
from .env_gen import EnvRenderer, update_env_example
from .manifest import update_package_json
from .overlay import overlay_base, overlay_chain, overlay_wallet

_REINSTALL_HINT = "pip install --force-reinstall dapp-scaffold"


class ProjectGenerator:
    """Materialises one project from the template layers.

    Generation happens inside a failure boundary: if any step raises, the
    destination is removed again (when this run created it) and the error
    is re-raised as a categorised :class:`GenerationError`.
    """

    def __init__(self, options: ResolvedOptions, config: ScaffoldConfig | None = None) -> None:
        self.options = options
        self.config = config or ScaffoldConfig()
        self.renderer = EnvRenderer()

    # -- Template locations ------------------------------------------------

    @property
    def base_template(self) -> Path:
        return self.config.base_template

    @property
    def chain_template(self) -> Path:
        return self.config.chain_template(self.options.chain)

    @property
    def wallet_template(self) -> Path:
        return self.config.wallet_template(self.options.chain, self.options.wallet)

    def check_templates(self) -> None:
        """Verify every template directory needed for this run exists.

        Raises:
            TemplateNotFoundError: If the templates root, the base template or
                the wallet template is missing.
        """
        templates_dir = self.config.templates_dir
        if not templates_dir.is_dir():
            raise TemplateNotFoundError(
                f"Templates directory not found at {templates_dir}\n"
                f"  This is likely a corrupted installation. Try reinstalling:\n"
                f"  {_REINSTALL_HINT}"
            )
        if not self.base_template.is_dir():
            raise TemplateNotFoundError(
                f"Base template not found at {self.base_template}\n"
                f"  This is likely a corrupted installation. Try reinstalling:\n"
                f"  {_REINSTALL_HINT}"
            )
        if not self.wallet_template.is_dir():
            raise TemplateNotFoundError(
                f"Template for {WALLET_PROVIDERS[self.options.wallet].name} on "
                f"{CHAINS[self.options.chain].name} not found.\n"
                f"  Expected path: {self.wallet_template}\n"
                f"  This wallet/chain combination may not be supported yet."
            )

    # -- Public API --------------------------------------------------------

    async def generate(self) -> Path:
        """Generate the project and return its root directory.

        Raises:
            TemplateNotFoundError: Before anything is written, if a template
                directory is missing.
            GenerationError: If writing the project fails part-way.
        """
        self.check_templates()

        project_root = self.options.project_path
        created = not project_root.exists()

        try:
            # 1. Base template
            await asyncio.to_thread(
                overlay_base, self.base_template, project_root, self.config.base_excludes
            )

            # 2. Chain-wide files (overwrite base files)
            await asyncio.to_thread(overlay_chain, self.chain_template, project_root)

            # 3. Wallet-specific files (overwrite chain files)
            await asyncio.to_thread(overlay_wallet, self.wallet_template, project_root)

            # 4. package.json
            await asyncio.to_thread(
                update_package_json,
                project_root,
                self.options.project_name,
                self.options.chain,
                self.options.wallet,
            )

            # 5. .env.example
            await asyncio.to_thread(
                update_env_example,
                project_root,
                self.options.chain,
                self.options.wallet,
                self.renderer,
            )
        except Exception as exc:
            if created:
                await asyncio.to_thread(shutil.rmtree, project_root, True)
            category = categorize_error(exc)
            raise GenerationError(
                _describe_failure(category, project_root, exc), category=category, cause=exc
            ) from exc

        return project_root


def _describe_failure(category: str, project_root: Path, exc: BaseException) -> str:
    """Return the user-facing message for a failed generation."""
    if category == "permission":
        return (
            f"Permission denied. Unable to write to {project_root}\n"
            f"  Try running with appropriate permissions or choose a different location."
        )
    if category == "disk_space":
        return "Not enough disk space to create project."
    if category == "not_found":
        return f"File or directory not found during project creation.\n  {exc}"
    if category == "invalid_manifest":
        return f"The template package.json could not be parsed.\n  {exc}"
    return f"An error occurred while creating the project:\n  {exc}"
