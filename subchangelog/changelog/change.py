"""Change - One conventional-commit entry parsed from a commit message."""

from dataclasses import dataclass
from typing import Optional

from subchangelog import COMMIT_TYPE_NAMES


@dataclass(frozen=True)
class Change:
    """A commit message reduced to its type, module and description."""
    type: Optional[str] = None
    module: str = ""
    message: str = ""

    @property
    def is_valid(self) -> bool:
        return self.type is not None

    @classmethod
    def parse(cls, comment: Optional[str], module: Optional[str] = None) -> 'Change':
        """Parse the first line of ``comment`` that starts with a known type.

        The type is the text before the first colon on that line, the message
        is everything after it. Other lines are ignored. When no line carries
        a known type the result is invalid.
        """
        module = module or ""
        if not comment:
            return cls(module=module)

        for line in comment.split('\n'):
            candidate, sep, rest = line.partition(':')
            if sep and candidate in COMMIT_TYPE_NAMES:
                return cls(type=candidate, module=module, message=rest.strip())

        return cls(module=module)

    def __str__(self) -> str:
        return f"- {self.message}"
