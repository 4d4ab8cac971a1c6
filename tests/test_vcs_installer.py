"""Unit tests for git initialisation (dapp_scaffold.vcs) and dependency installation
(dapp_scaffold.installer).

Tests cover:
- try_git_init happy path and the exact git command sequence
- Skipping when git is missing or the target is already under version control
- Rollback of .git when a later step fails
- Install / run commands per package manager
- install() success and failure
- run_command with a missing executable
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from dapp_scaffold.config import PackageManager
from dapp_scaffold.installer import get_install_command, get_run_command, install
from dapp_scaffold.utils import run_command
from dapp_scaffold.vcs import INITIAL_COMMIT_MESSAGE, try_git_init

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _fake_run_command(failures: dict[tuple[str, ...], int] | None = None, on_init=None):
    """Return an AsyncMock standing in for ``run_command``.

    Commands listed in *failures* (matched on their leading arguments) exit
    with the given code; everything else succeeds.  *on_init* is called with
    the cwd when ``git init`` runs.
    """
    failures = failures or {}

    async def _run(cmd, cwd=None, timeout=120, env=None):
        if cmd[:2] == ["git", "init"] and on_init is not None:
            on_init(cwd)
        for prefix, code in failures.items():
            if tuple(cmd[: len(prefix)]) == prefix:
                return (code, "", "failed")
        return (0, "", "")

    return AsyncMock(side_effect=_run)


def _commands(mock: AsyncMock) -> list[list[str]]:
    return [c.args[0] for c in mock.await_args_list]


def _make_git_dir(cwd) -> None:
    (Path(cwd) / ".git").mkdir()


# ---------------------------------------------------------------------------
# try_git_init
# ---------------------------------------------------------------------------


class TestTryGitInit:
    async def test_success(self, tmp_path: Path):
        fake = _fake_run_command(
            failures={
                ("git", "rev-parse"): 128,
                ("hg",): 255,
                ("git", "config", "init.defaultBranch"): 1,
            }
        )
        with patch("dapp_scaffold.vcs.run_command", fake):
            assert await try_git_init(tmp_path) is True

        assert _commands(fake) == [
            ["git", "--version"],
            ["git", "rev-parse", "--is-inside-work-tree"],
            ["hg", "--cwd", ".", "root"],
            ["git", "init"],
            ["git", "config", "init.defaultBranch"],
            ["git", "checkout", "-b", "main"],
            ["git", "add", "-A"],
            ["git", "commit", "-m", INITIAL_COMMIT_MESSAGE],
        ]

    async def test_default_branch_configured(self, tmp_path: Path):
        fake = _fake_run_command(failures={("git", "rev-parse"): 128, ("hg",): 127})
        with patch("dapp_scaffold.vcs.run_command", fake):
            assert await try_git_init(tmp_path) is True
        assert ["git", "checkout", "-b", "main"] not in _commands(fake)

    async def test_git_missing(self, tmp_path: Path):
        fake = _fake_run_command(failures={("git",): 127})
        with patch("dapp_scaffold.vcs.run_command", fake):
            assert await try_git_init(tmp_path) is False
        assert _commands(fake) == [["git", "--version"]]

    async def test_already_in_git_repository(self, tmp_path: Path):
        fake = _fake_run_command()
        with patch("dapp_scaffold.vcs.run_command", fake):
            assert await try_git_init(tmp_path) is False
        assert ["git", "init"] not in _commands(fake)

    async def test_already_in_mercurial_repository(self, tmp_path: Path):
        fake = _fake_run_command(failures={("git", "rev-parse"): 128})
        with patch("dapp_scaffold.vcs.run_command", fake):
            assert await try_git_init(tmp_path) is False
        assert ["git", "init"] not in _commands(fake)

    async def test_commit_failure_removes_git_dir(self, tmp_path: Path):
        fake = _fake_run_command(
            failures={("git", "rev-parse"): 128, ("hg",): 127, ("git", "commit"): 1},
            on_init=_make_git_dir,
        )
        with patch("dapp_scaffold.vcs.run_command", fake):
            assert await try_git_init(tmp_path) is False
        assert not (tmp_path / ".git").exists()

    async def test_passes_timeout(self, tmp_path: Path):
        fake = _fake_run_command(failures={("git", "rev-parse"): 128, ("hg",): 127})
        with patch("dapp_scaffold.vcs.run_command", fake):
            await try_git_init(tmp_path, timeout=5)
        assert all(c.kwargs["timeout"] == 5 for c in fake.await_args_list)


# ---------------------------------------------------------------------------
# Installer
# ---------------------------------------------------------------------------


class TestCommands:
    @pytest.mark.parametrize(
        "manager, install_cmd, run_cmd",
        [
            (PackageManager.NPM, "npm install", "npm run dev"),
            (PackageManager.YARN, "yarn", "yarn dev"),
            (PackageManager.PNPM, "pnpm install", "pnpm dev"),
            (PackageManager.BUN, "bun install", "bun dev"),
        ],
    )
    def test_commands(self, manager, install_cmd, run_cmd):
        assert get_install_command(manager) == install_cmd
        assert get_run_command(manager) == run_cmd


class TestInstall:
    async def test_success(self, tmp_path: Path):
        fake = AsyncMock(return_value=(0, "added 1 package", ""))
        with patch("dapp_scaffold.installer.run_command", fake):
            assert await install(tmp_path, PackageManager.PNPM, timeout=30) is True
        fake.assert_awaited_once_with(["pnpm", "install"], cwd=tmp_path, timeout=30)

    async def test_failure(self, tmp_path: Path):
        fake = AsyncMock(return_value=(1, "", "ERR!"))
        with patch("dapp_scaffold.installer.run_command", fake):
            assert await install(tmp_path, PackageManager.NPM) is False


class TestRunCommand:
    async def test_missing_executable(self, tmp_path: Path):
        returncode, stdout, stderr = await run_command(
            ["definitely-not-a-real-binary-5f1c"], cwd=tmp_path
        )
        assert returncode == 127
        assert stdout == ""
        assert "Command not found" in stderr
