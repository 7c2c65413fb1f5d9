"""Git Operations Package"""

from subchangelog.git.runner import Git, GitError
from subchangelog.git.parsers import ParseError, StanzaFields, parse_revisions, parse_stanza, split_gitmodules
from subchangelog.git.submodule import Submodule
from subchangelog.git.repo import Repo, get_submodules_changes

__all__ = [
    "Git",
    "GitError",
    "ParseError",
    "StanzaFields",
    "parse_revisions",
    "parse_stanza",
    "split_gitmodules",
    "Submodule",
    "Repo",
    "get_submodules_changes",
]
