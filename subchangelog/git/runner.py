"""Git Runner - Run git commands and capture their output."""

import subprocess
from pathlib import Path
from typing import Optional


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class Git:
    """Runs git in a working tree and returns stdout as text."""

    def __init__(self, cwd: Optional[Path] = None, verify: bool = True):
        self.cwd = Path(cwd) if cwd else Path.cwd()
        if verify:
            self._verify_git_available()
            self._verify_in_repo()

    def run(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self.run('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self.run('rev-parse', '--git-dir')
        except GitError:
            raise GitError(f"Not inside a git repository: {self.cwd}")

    def latest_commit_message(self) -> str:
        """Full message of HEAD."""
        return self.run('log', '--format=%B', '-n1')

    def last_commit_diff(self, path: str) -> str:
        """Diff of ``path`` between HEAD^ and HEAD."""
        return self.run('diff', 'HEAD^..HEAD', '--', path)

    def log_messages(self, path: str, since: str, until: str) -> str:
        """Messages of the commits in ``since..until`` inside the repo at ``path``."""
        return self.run('-C', path, 'log', f'{since}..{until}', '--format=%B')
