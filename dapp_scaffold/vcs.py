"""Best-effort git repository initialisation for a freshly generated project."""

from __future__ import annotations

import asyncio
from pathlib import Path

from .utils import remove_path, run_command

INITIAL_COMMIT_MESSAGE = "Initial commit from create-dapp"


async def _run_git(*args: str, cwd: str | Path | None = None, timeout: int = 60) -> bool:
    """Run a git command and return ``True`` if it exited with status 0."""
    returncode, _stdout, _stderr = await run_command(["git", *args], cwd=cwd, timeout=timeout)
    return returncode == 0


async def is_in_git_repository(cwd: str | Path, timeout: int = 60) -> bool:
    return await _run_git("rev-parse", "--is-inside-work-tree", cwd=cwd, timeout=timeout)


async def is_in_mercurial_repository(cwd: str | Path, timeout: int = 60) -> bool:
    returncode, _stdout, _stderr = await run_command(
        ["hg", "--cwd", ".", "root"], cwd=cwd, timeout=timeout
    )
    return returncode == 0


async def is_default_branch_set(cwd: str | Path, timeout: int = 60) -> bool:
    return await _run_git("config", "init.defaultBranch", cwd=cwd, timeout=timeout)


async def try_git_init(root: str | Path, timeout: int = 60) -> bool:
    """Initialise a git repository at *root* with an initial commit.

    Returns ``False`` without touching anything when git is unavailable or
    *root* already lives inside a git or Mercurial work tree.  If any step
    after ``git init`` fails, the new ``.git`` directory is removed again.
    """
    root_path = Path(root)

    if not await _run_git("--version", timeout=timeout):
        return False
    if await is_in_git_repository(root_path, timeout) or await is_in_mercurial_repository(
        root_path, timeout
    ):
        return False

    if not await _run_git("init", cwd=root_path, timeout=timeout):
        return False

    steps: list[tuple[str, ...]] = []
    if not await is_default_branch_set(root_path, timeout):
        steps.append(("checkout", "-b", "main"))
    steps.append(("add", "-A"))
    steps.append(("commit", "-m", INITIAL_COMMIT_MESSAGE))

    for step in steps:
        if not await _run_git(*step, cwd=root_path, timeout=timeout):
            await asyncio.to_thread(remove_path, root_path / ".git")
            return False
    return True
