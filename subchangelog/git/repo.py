"""Repo - Latest commit and submodules of the working tree."""

from pathlib import Path
from typing import Iterable, Optional

from subchangelog.changelog import Change
from subchangelog.git.parsers import split_gitmodules
from subchangelog.git.runner import Git
from subchangelog.git.submodule import Submodule


class Repo:
    """Top-level repository the changelog is generated for."""

    def __init__(self, git: Optional[Git] = None, gitmodules: str = ".gitmodules"):
        self.git = git or Git()
        self.gitmodules_path = self.git.cwd / Path(gitmodules)

    def get_latest_commit(self) -> Change:
        return Change.parse(self.git.latest_commit_message())

    def get_submodules(self) -> list[Submodule]:
        """One Submodule per stanza of the .gitmodules file."""
        text = self.gitmodules_path.read_text(encoding='utf-8')
        return [Submodule.from_stanza(stanza, self.git) for stanza in split_gitmodules(text)]


def get_submodules_changes(submodules: Iterable[Submodule], git: Git) -> list[Change]:
    """Changes of every submodule whose pointer moved, in submodule order."""
    changes = []
    for submodule in submodules:
        if submodule.is_changed:
            changes.extend(submodule.get_changes(git))
    return changes
