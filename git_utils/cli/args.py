"""Command-line argument parsing for git-utils."""

import argparse
from typing import List, Optional

from git_utils.__version__ import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="git-utils",
        description="Interactive git helpers",
        epilog="Run 'git-utils install' to make the helpers available as git aliases "
        "(e.g. 'git iswitch').",
    )
    parser.add_argument("--version", action="version", version=f"git-utils {__version__}")
    parser.add_argument(
        "--log", action="store_true", help="Log git commands to git-utils.log"
    )
    parser.add_argument("--log-file", metavar="PATH", help="Log git commands to PATH")
    parser.add_argument("--working-dir", metavar="DIR", help="Override working directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    install = subparsers.add_parser("install", help="Install git aliases")
    scope = install.add_mutually_exclusive_group()
    scope.add_argument(
        "-u", "--user", dest="scope", action="store_const", const="user",
        help="Install aliases for this user (default)",
    )
    scope.add_argument(
        "-s", "--system", dest="scope", action="store_const", const="system",
        help="Install aliases for the whole system - available to all users",
    )
    scope.add_argument(
        "-l", "--local", dest="scope", action="store_const", const="local",
        help="Install aliases only in this repo",
    )
    install.set_defaults(scope="user")

    switch = subparsers.add_parser("switch", help="Interactively switch branches")
    switch.add_argument("query", nargs="?", default="", help="Initial filter text")
    refs = switch.add_mutually_exclusive_group()
    refs.add_argument(
        "-r", "--remote", dest="scope", action="store_const", const="remote",
        help="Create/switch to a remote tracking branch",
    )
    refs.add_argument(
        "-a", "--all", dest="scope", action="store_const", const="all",
        help="List local and remote branches",
    )
    action = switch.add_mutually_exclusive_group()
    action.add_argument(
        "-d", "--delete", dest="action", action="store_const", const="delete",
        help="Delete the selected branch instead of switching to it",
    )
    action.add_argument(
        "-m", "--rename", dest="action", action="store_const", const="rename",
        help="Rename the selected branch instead of switching to it",
    )
    switch.add_argument(
        "-f", "--force", action="store_true", help="Delete even if the branch is not merged"
    )
    switch.add_argument(
        "-y", "--yes", action="store_true", help="Skip the confirmation before deleting"
    )
    switch.add_argument(
        "--wrap", action="store_true", help="Wrap the cursor around the ends of the list"
    )
    switch.add_argument(
        "--protected", nargs="*", default=["main", "master"],
        help="Branches that may not be deleted",
    )
    switch.add_argument(
        "--no-clean-check", action="store_true",
        help="Allow switching with uncommitted changes (git may still refuse)",
    )
    switch.set_defaults(scope="local", action="checkout")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
