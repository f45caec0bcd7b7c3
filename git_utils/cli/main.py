"""Command-line entry point for git-utils"""

import argparse
import sys
from typing import Callable, List, Optional

import git
from rich.console import Console

from git_utils.cli.args import parse_args
from git_utils.config import Config
from git_utils.constants import EXIT_CANCELLED, EXIT_FAILURE, EXIT_NOT_A_REPOSITORY, EXIT_SUCCESS
from git_utils.exceptions import GitUtilsError, RepositoryError
from git_utils.logging_config import DEFAULT_LOG_FILE, get_logger, setup_logging
from git_utils.services.alias_installer import AliasInstaller, resolve_executable
from git_utils.services.git import ActionExecutor, GitRepository, RefSource
from git_utils.services.git.repository import error_text
from git_utils.session import Outcome, Session, SessionResult

console = Console()
logger = get_logger(__name__)


def build_config(parsed_args: argparse.Namespace) -> Config:
    """Build the picker config from parsed `switch` arguments."""
    log_file = parsed_args.log_file or (DEFAULT_LOG_FILE if parsed_args.log else None)
    return Config(
        scope=parsed_args.scope,
        action=parsed_args.action,
        initial_query=parsed_args.query,
        wrap_cursor=parsed_args.wrap,
        confirm_destructive=not parsed_args.yes,
        require_clean_worktree=not parsed_args.no_clean_check,
        force_delete=parsed_args.force,
        protected_branches=list(parsed_args.protected),
        working_dir=parsed_args.working_dir,
        verbose=parsed_args.verbose,
        debug=parsed_args.debug,
        log_file=log_file,
    )


def run_switch(config: Config, picker: Optional[Callable[[Session], SessionResult]] = None) -> int:
    """List branches, run the picker and report what happened.

    Args:
        config: Picker configuration
        picker: Runs the session interactively (defaults to the Textual picker)

    Returns:
        Process exit code
    """
    if picker is None:
        from git_utils.tui import run_picker
        picker = run_picker

    repository = GitRepository.open(config.working_dir)
    try:
        refs = RefSource(repository, config.recent_limit).list_refs(config.ref_scope)
        if not refs:
            console.print("[yellow]No branches to switch to.[/yellow]")
            return EXIT_FAILURE

        executor = ActionExecutor(repository, config)
        session = Session(refs, executor, config)
        result = picker(session)
    finally:
        repository.close()

    if result.action_result is not None:
        console.print(f"[green]{result.action_result.message}[/green]")
    elif result.outcome is Outcome.CANCELLED:
        console.print("[yellow]Cancelled[/yellow]")
    return result.exit_code


def run_install(parsed_args: argparse.Namespace) -> int:
    """Register the git aliases."""
    executable = resolve_executable()
    installer = AliasInstaller(executable, working_dir=parsed_args.working_dir)
    for alias, command in installer.install(parsed_args.scope):
        console.print(f"Aliasing `git {alias}` to `git-utils {command}`")
    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        if parsed_args.command == "install":
            log_file = parsed_args.log_file or (DEFAULT_LOG_FILE if parsed_args.log else None)
            setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug, log_file=log_file)
            return run_install(parsed_args)

        config = build_config(parsed_args)

        if parsed_args.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        # The picker owns the screen, so logs only go to a file
        setup_logging(
            verbose=config.verbose, debug=config.debug, tui_mode=True, log_file=config.log_file
        )
        return run_switch(config)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return EXIT_CANCELLED
    except RepositoryError as e:
        console.print(f"[red]Error: {e}[/red]")
        return EXIT_NOT_A_REPOSITORY
    except GitUtilsError as e:
        console.print(f"[red]Error: {e}[/red]")
        return EXIT_FAILURE
    except git.exc.GitCommandError as e:
        console.print(f"[red]Error: {error_text(e)}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
