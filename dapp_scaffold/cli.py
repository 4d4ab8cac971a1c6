"""Command-line entry point for ``create-dapp``.

Usage::

    create-dapp
    create-dapp my-dapp --chain evm --wallet rainbowkit
    create-dapp my-solana-app -c solana -w dynamic --yes
    python -m dapp_scaffold my-dapp --git --install
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from typing import NoReturn

from . import __version__
from .config import PackageManager, ScaffoldConfig
from .errors import InvalidOptionError
from .models import CLIOptions
from .naming import validate_project_name
from .orchestrator import HELP_HINT, Orchestrator
from .registry import CHAINS, WALLET_PROVIDERS, parse_chain, parse_wallet, providers_for_chain
from .utils import print_banner, print_error

PROG = "create-dapp"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise InvalidOptionError(message[:1].upper() + message[1:] + ".")


def _providers_epilog() -> str:
    lines = ["Wallet providers:"]
    for chain, chain_info in CHAINS.items():
        lines.append(f"  {chain_info.name} ({chain.value}):")
        for wallet in providers_for_chain(chain):
            lines.append(f"    {wallet.value:<16}{WALLET_PROVIDERS[wallet].description}")
    lines.extend([
        "",
        "Examples:",
        f"  {PROG}",
        f"  {PROG} my-dapp",
        f"  {PROG} my-dapp --chain evm --wallet rainbowkit",
        f"  {PROG} my-solana-app -c solana -w dynamic",
        f"  {PROG} my-dapp --yes",
        f"  {PROG} my-dapp --git --install",
    ])
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = _ArgumentParser(
        prog=PROG,
        description="Create a Next.js dApp with your preferred wallet provider.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_providers_epilog(),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        metavar="project-name",
        help="Directory and package name of the new project",
    )
    parser.add_argument(
        "-c", "--chain",
        type=parse_chain,
        default=None,
        help=f"Blockchain to use ({', '.join(c.value for c in CHAINS)})",
    )
    parser.add_argument(
        "-w", "--wallet",
        type=parse_wallet,
        default=None,
        metavar="PROVIDER",
        help="Wallet provider to use",
    )
    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Skip prompts and use defaults",
    )
    parser.add_argument("--git", action="store_true", help="Initialize a git repository")
    parser.add_argument(
        "--install", action="store_true", help="Install dependencies after creation"
    )
    for manager in PackageManager:
        parser.add_argument(
            f"--use-{manager.value}",
            dest="package_manager",
            action="store_const",
            const=manager,
            help=f"Use {manager.value} as the package manager",
        )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{PROG} v{__version__}",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> CLIOptions:
    """Parse *argv* into ``CLIOptions``.

    The project name is validated here so that a bad name fails before any
    prompt is shown.

    Raises:
        InvalidOptionError: For unknown flags, invalid values or an invalid
            project name.
    """
    args = build_parser().parse_args(argv)

    if args.project_name is not None:
        validation = validate_project_name(args.project_name)
        if not validation.valid:
            problems = "\n  ".join(validation.problems or [])
            raise InvalidOptionError(f'Invalid project name "{args.project_name}".\n  {problems}')

    return CLIOptions(
        project_name=args.project_name,
        chain=args.chain,
        wallet=args.wallet,
        yes=args.yes,
        git=args.git,
        install=args.install,
        package_manager=args.package_manager,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``create-dapp`` / ``python -m dapp_scaffold``."""
    try:
        cli_options = parse_args(argv)
        config = ScaffoldConfig.from_env()
    except (InvalidOptionError, ValueError) as exc:
        print_error(str(exc), HELP_HINT)
        sys.exit(1)

    print_banner(PROG, f"v{__version__}")
    orchestrator = Orchestrator(config)
    sys.exit(asyncio.run(orchestrator.run(cli_options)))


if __name__ == "__main__":
    main()
