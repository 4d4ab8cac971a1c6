"""dapp-scaffold orchestrator.

Drives one scaffolding run through its states:

CollectingName -> CollectingChain -> CollectingProvider ->
ValidatingDestination -> HandlingConflicts -> Generating -> PostActions -> Done

Any interactive step can end the run in ``Aborted`` (the user cancelled);
destination validation, conflict handling and generation can end it in
``Failed``.  Cancellation exits 0, failures exit 1.
"""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rich.markup import escape

from .config import PackageManager, ScaffoldConfig, detect_package_manager
from .errors import IncompatibleProviderError, InvalidOptionError, PreconditionError, ScaffoldError
from .installer import get_install_command, get_run_command, install
from .models import CLIOptions, ResolvedOptions
from .naming import validate_project_name
from .prompts import CANCELLED, Cancelled, Choice, Prompter, RichPrompter, is_cancel
from .registry import (
    CHAINS,
    WALLET_PROVIDERS,
    Chain,
    WalletProvider,
    parse_chain,
    providers_for_chain,
)
from .scaffolder.conflicts import format_conflicts, get_conflicting_files, remove_conflicts
from .scaffolder.generator import ProjectGenerator
from .utils import (
    console,
    format_duration,
    is_writeable,
    print_error,
    print_farewell,
    print_success,
    print_summary_table,
    print_warning,
)
from .vcs import try_git_init

HELP_HINT = "Run [cyan]create-dapp --help[/cyan] for usage information."
FAREWELL = "See you next time!"
OVERWRITE_DECLINED = "Operation cancelled."


class Step(str, Enum):
    """States of a scaffolding run."""

    COLLECTING_NAME = "collecting_name"
    COLLECTING_CHAIN = "collecting_chain"
    COLLECTING_PROVIDER = "collecting_provider"
    VALIDATING_DESTINATION = "validating_destination"
    HANDLING_CONFLICTS = "handling_conflicts"
    GENERATING = "generating"
    POST_ACTIONS = "post_actions"
    DONE = "done"
    ABORTED = "aborted"
    FAILED = "failed"


@dataclass(frozen=True)
class PostActionResult:
    """Outcome of the best-effort post actions (``None`` = not requested)."""

    git_initialized: bool | None = None
    installed: bool | None = None


class Orchestrator:
    """Resolves options, generates the project and runs post actions.

    Attributes:
        config: Global scaffolding configuration.
        prompter: Interactive front end used for missing options.
        cwd: Directory the project folder is created in.
        step: Current state of the run.
        abort_message: Farewell shown when the run ends in ``ABORTED``.
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        prompter: Prompter | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.prompter = prompter or RichPrompter()
        self.cwd = Path(cwd) if cwd is not None else Path(os.getcwd())
        self.step = Step.COLLECTING_NAME
        self.abort_message = FAREWELL

    # ------------------------------------------------------------------
    # Option resolution
    # ------------------------------------------------------------------

    def _abort(self, message: str = FAREWELL) -> Cancelled:
        self.step = Step.ABORTED
        self.abort_message = message
        return CANCELLED

    def _fail(self, error: ScaffoldError) -> ScaffoldError:
        self.step = Step.FAILED
        return error

    def resolve(self, cli: CLIOptions) -> ResolvedOptions | Cancelled:
        """Turn the CLI options into ``ResolvedOptions``, prompting for the rest.

        Returns:
            The resolved options, or ``CANCELLED`` if the user backed out.

        Raises:
            InvalidOptionError: For an invalid name, or an incompatible wallet
                in non-interactive mode.
            PreconditionError: If the destination is not writable or holds
                conflicting files that may not be overwritten.
        """
        self.step = Step.COLLECTING_NAME
        project_name = self._collect_name(cli)
        if is_cancel(project_name):
            return self._abort()

        self.step = Step.COLLECTING_CHAIN
        chain = self._collect_chain(cli)
        if is_cancel(chain):
            return self._abort()

        self.step = Step.COLLECTING_PROVIDER
        wallet = self._collect_wallet(cli, chain)
        if is_cancel(wallet):
            return self._abort()

        self.step = Step.VALIDATING_DESTINATION
        project_path = (self.cwd / project_name).resolve()
        self._check_writeable(project_path)

        if project_path.exists():
            if not project_path.is_dir():
                raise self._fail(
                    PreconditionError(
                        f"{project_path} already exists and is not a directory.\n"
                        f"  Choose a different project name or remove the file."
                    )
                )
            self.step = Step.HANDLING_CONFLICTS
            outcome = self._handle_conflicts(project_name, project_path, cli.yes)
            if is_cancel(outcome):
                return outcome

        return ResolvedOptions(
            project_name=project_name,
            chain=chain,
            wallet=wallet,
            project_path=project_path,
            package_manager=cli.package_manager or detect_package_manager(),
            git=cli.git,
            install=cli.install,
        )

    def _collect_name(self, cli: CLIOptions) -> str | Cancelled:
        if cli.project_name:
            validation = validate_project_name(cli.project_name)
            if not validation.valid:
                problems = "\n  ".join(validation.problems or [])
                raise self._fail(
                    InvalidOptionError(f'Invalid project name "{cli.project_name}".\n  {problems}')
                )
            return cli.project_name

        default_name = self.config.default_project_name
        if cli.yes:
            return default_name

        def _validate(value: str) -> str | None:
            if not value:
                return "Project name is required"
            validation = validate_project_name(value)
            if not validation.valid:
                return (validation.problems or ["Invalid project name"])[0]
            return None

        return self.prompter.text(
            "What is your project named?", default=default_name, validate=_validate
        )

    def _collect_chain(self, cli: CLIOptions) -> Chain | Cancelled:
        if cli.chain is not None:
            return cli.chain

        default_chain = parse_chain(self.config.default_chain)
        if cli.yes:
            return default_chain

        options = [
            Choice(value=chain, label=info.name, hint=info.description)
            for chain, info in CHAINS.items()
        ]
        return self.prompter.select(
            "Which blockchain do you want to build on?", options, default=default_chain
        )

    def _collect_wallet(self, cli: CLIOptions, chain: Chain) -> WalletProvider | Cancelled:
        available = providers_for_chain(chain)
        wallet = cli.wallet

        if wallet is not None and wallet not in available:
            if cli.yes:
                raise self._fail(
                    IncompatibleProviderError(
                        WALLET_PROVIDERS[wallet].name,
                        CHAINS[chain].name,
                        [w.value for w in available],
                    )
                )
            print_warning(
                f"{WALLET_PROVIDERS[wallet].name} doesn't support {CHAINS[chain].name}. "
                f"Please choose another provider."
            )
            wallet = None

        if wallet is not None:
            return wallet
        if cli.yes:
            return available[0]

        options = [
            Choice(value=w, label=WALLET_PROVIDERS[w].name, hint=WALLET_PROVIDERS[w].description)
            for w in available
        ]
        return self.prompter.select(
            "Which wallet provider do you want to use?", options, default=available[0]
        )

    def _check_writeable(self, project_path: Path) -> None:
        root = project_path.parent
        if not is_writeable(root):
            raise self._fail(
                PreconditionError(
                    f"The directory {root} is not writable.\n"
                    f"  Please check your permissions and try again."
                )
            )

    def _handle_conflicts(
        self, project_name: str, project_path: Path, non_interactive: bool
    ) -> None | Cancelled:
        try:
            conflicts = get_conflicting_files(project_path)
        except OSError as exc:
            raise self._fail(
                PreconditionError(f"Unable to read {project_path}: {exc.strerror or exc}")
            ) from exc
        if not conflicts:
            return None

        listing = format_conflicts(conflicts, self.config.conflict_display_limit)
        message = f"Directory {project_name} contains files that could conflict:\n  {listing}"
        if non_interactive:
            raise self._fail(PreconditionError(message))

        print_warning(message)
        overwrite = self.prompter.confirm("Would you like to overwrite these files?", default=False)
        if is_cancel(overwrite) or not overwrite:
            return self._abort(OVERWRITE_DECLINED)

        try:
            remove_conflicts(project_path, conflicts)
        except OSError as exc:
            raise self._fail(
                PreconditionError(
                    f"Unable to remove conflicting files in {project_path}: {exc.strerror or exc}\n"
                    f"  Please check your permissions and try again."
                )
            ) from exc
        return None

    # ------------------------------------------------------------------
    # Generation and post actions
    # ------------------------------------------------------------------

    async def generate(self, options: ResolvedOptions) -> Path:
        """Run the generator (``GENERATING`` state)."""
        self.step = Step.GENERATING
        generator = ProjectGenerator(options, self.config)
        try:
            return await generator.generate()
        except ScaffoldError as exc:
            raise self._fail(exc) from exc

    async def post_actions(self, options: ResolvedOptions) -> PostActionResult:
        """Initialise git and install dependencies if requested.

        Both are best effort: failures are reported as warnings and never
        fail the run.
        """
        self.step = Step.POST_ACTIONS
        git_initialized: bool | None = None
        installed: bool | None = None

        if options.git:
            with console.status("[cyan]Initializing git repository...[/cyan]"):
                git_initialized = await try_git_init(
                    options.project_path, timeout=self.config.git_timeout
                )
            if git_initialized:
                print_success("Git repository initialized!")
            else:
                print_warning("Git initialization skipped or failed (git may not be installed)")

        if options.install:
            manager = options.package_manager.value
            with console.status(f"[cyan]Installing dependencies with {manager}...[/cyan]"):
                installed = await install(
                    options.project_path,
                    options.package_manager,
                    timeout=self.config.install_timeout,
                )
            if installed:
                print_success("Dependencies installed!")
            else:
                print_warning("Failed to install dependencies")

        return PostActionResult(git_initialized=git_initialized, installed=installed)

    # ------------------------------------------------------------------
    # Full run
    # ------------------------------------------------------------------

    async def run(self, cli: CLIOptions) -> int:
        """Execute a complete run and return the process exit code."""
        started = time.monotonic()
        try:
            options = self.resolve(cli)
            if is_cancel(options):
                print_farewell(self.abort_message)
                return 0

            with console.status("[cyan]Creating your dApp...[/cyan]"):
                await self.generate(options)
            print_success("Project created!")

            result = await self.post_actions(options)
        except ScaffoldError as exc:
            self.step = Step.FAILED
            print_error(str(exc), HELP_HINT if exc.show_help_hint else None)
            return 1

        self.step = Step.DONE
        show_project_summary(options, installed=bool(result.installed))
        console.print(
            f"[bold green]Happy building![/bold green] "
            f"[dim](done in {format_duration(time.monotonic() - started)})[/dim]"
        )
        return 0


def next_steps(project_name: str, package_manager: PackageManager, installed: bool) -> list[str]:
    """Return the commands the user should run next."""
    steps = [f"cd {project_name}"]
    if not installed:
        steps.append(get_install_command(package_manager))
    steps.append(get_run_command(package_manager))
    return steps


def show_project_summary(options: ResolvedOptions, installed: bool) -> None:
    """Print the configuration summary and the numbered next steps."""
    console.print()
    print_summary_table(
        {
            "Chain": f"[cyan]{CHAINS[options.chain].name}[/cyan]",
            "Wallet": f"[cyan]{escape(WALLET_PROVIDERS[options.wallet].name)}[/cyan]",
            "Path": f"[dim]{escape(str(options.project_path))}[/dim]",
        },
        title="Project",
    )
    console.print()
    console.print("[bold]Next steps:[/bold]")
    for index, step in enumerate(
        next_steps(options.project_name, options.package_manager, installed), start=1
    ):
        console.print(f"  [dim]{index}.[/dim] [cyan]{escape(step)}[/cyan]")
    console.print()
