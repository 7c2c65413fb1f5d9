"""CLI Main Entry Point"""

import os
from dataclasses import replace

from subchangelog.changelog import ChangeLog
from subchangelog.config import Config, load_config
from subchangelog.git import Git, Repo, get_submodules_changes
from subchangelog.output import dim, print_error, print_info, print_warning
from subchangelog.output.actions import set_failed, set_output

from subchangelog.cli.args import parse_args
from subchangelog.cli.commands import display_config


def _apply_overrides(args, config: Config) -> Config:
    """Resolve settings from args, env, or config into a new Config.

    Precedence: CLI args > environment variables > config file
    """
    return replace(
        config,
        output_name=args.output_name or os.environ.get('SUBCHANGELOG_OUTPUT_NAME') or config.output_name,
        gitmodules=args.gitmodules or os.environ.get('SUBCHANGELOG_GITMODULES') or config.gitmodules,
        include_submodules=config.include_submodules and not args.no_submodules,
    )


def _print_submodules(submodules) -> None:
    """Print each submodule with its old and new revision."""
    for submodule in submodules:
        state = "changed" if submodule.is_changed else "unchanged"
        print(dim(f"{submodule} ({state})"))


def generate_changelog(config: Config, repo_path: str | None = None, verbose: bool = False) -> str:
    """Collect the latest commit and moved submodules into rendered changelog text."""
    git = Git(cwd=repo_path)
    repo = Repo(git, gitmodules=config.gitmodules)
    changelog = ChangeLog(headers=config.headers)
    changelog.add(repo.get_latest_commit())

    if config.include_submodules:
        submodules = repo.get_submodules()
        if verbose:
            _print_submodules(submodules)
        changelog.extend(get_submodules_changes(submodules, git))

    return changelog.build()


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.display_config:
        return display_config()

    config = _apply_overrides(args, load_config())

    try:
        result = generate_changelog(config, repo_path=args.repo, verbose=args.verbose)
        if not result:
            print_warning("No conventional commits found in the latest commit or moved submodules")
        print_info(f"Generated changelog \n {result}")
        set_output(config.output_name, result)
    except Exception as e:
        print_error(str(e))
        return set_failed(str(e))

    return 0
