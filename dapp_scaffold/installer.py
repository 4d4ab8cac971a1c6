"""Dependency installation for the generated project."""

from __future__ import annotations

from pathlib import Path

from .config import PackageManager
from .utils import run_command

INSTALL_COMMANDS: dict[PackageManager, list[str]] = {
    PackageManager.NPM: ["npm", "install"],
    PackageManager.YARN: ["yarn"],
    PackageManager.PNPM: ["pnpm", "install"],
    PackageManager.BUN: ["bun", "install"],
}

RUN_COMMANDS: dict[PackageManager, str] = {
    PackageManager.NPM: "npm run dev",
    PackageManager.YARN: "yarn dev",
    PackageManager.PNPM: "pnpm dev",
    PackageManager.BUN: "bun dev",
}


def get_install_command(package_manager: PackageManager) -> str:
    """Return the shell command that installs dependencies."""
    return " ".join(INSTALL_COMMANDS[PackageManager(package_manager)])


def get_run_command(package_manager: PackageManager) -> str:
    """Return the shell command that starts the dev server."""
    return RUN_COMMANDS[PackageManager(package_manager)]


async def install(root: str | Path, package_manager: PackageManager, timeout: int = 600) -> bool:
    """Install dependencies in *root*.  Returns ``True`` on exit status 0."""
    returncode, _stdout, _stderr = await run_command(
        INSTALL_COMMANDS[PackageManager(package_manager)], cwd=root, timeout=timeout
    )
    return returncode == 0
