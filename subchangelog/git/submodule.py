"""Submodule - A .gitmodules entry and the revisions it moved between."""

from dataclasses import dataclass

from subchangelog.changelog import Change
from subchangelog.git.parsers import parse_revisions, parse_stanza
from subchangelog.git.runner import Git


@dataclass(frozen=True)
class Submodule:
    """A submodule and the pointer move recorded by the last commit."""
    name: str
    path: str
    url: str
    revision: str
    previous_revision: str

    @property
    def is_changed(self) -> bool:
        return self.revision != self.previous_revision

    @classmethod
    def from_stanza(cls, stanza: str, git: Git) -> 'Submodule':
        """Parse a .gitmodules stanza and look up its revisions in the last commit."""
        fields = parse_stanza(stanza)
        previous_revision, revision = parse_revisions(git.last_commit_diff(fields.path), fields.path)
        return cls(
            name=fields.name,
            path=fields.path,
            url=fields.url,
            revision=revision,
            previous_revision=previous_revision,
        )

    def get_changes(self, git: Git) -> list[Change]:
        """Valid changes from the commits between the two revisions."""
        output = git.log_messages(self.path, self.previous_revision, self.revision)
        changes = [Change.parse(line, self.name) for line in output.split('\n')]
        return [change for change in changes if change.is_valid]

    def __str__(self) -> str:
        return (
            f"Name: {self.name} Path: {self.path} Url: {self.url}\n"
            f"Revision: {self.revision}\n"
            f"Old revision: {self.previous_revision}"
        )
