"""ChangeLog - Group changes by commit type and module, render as text."""

from typing import Iterable, Optional

from subchangelog import COMMIT_TYPES
from subchangelog.changelog.change import Change


class ChangeLog:
    """Ordered two-level grouping: commit type -> module -> changes.

    Types and modules render in the order they were first added.
    """

    def __init__(self, headers: Optional[dict[str, str]] = None):
        self.headers = {**COMMIT_TYPES, **(headers or {})}
        self._changes: dict[str, dict[str, list[Change]]] = {}

    def add(self, change: Change) -> None:
        if not change.is_valid:
            return
        modules = self._changes.setdefault(change.type, {})
        modules.setdefault(change.module, []).append(change)

    def extend(self, changes: Iterable[Change]) -> None:
        for change in changes:
            self.add(change)

    def __len__(self) -> int:
        return sum(len(entries) for modules in self._changes.values() for entries in modules.values())

    @property
    def is_empty(self) -> bool:
        return not self._changes

    def _header(self, commit_type: str) -> str:
        if commit_type in self.headers:
            return f"\n{self.headers[commit_type]}:\n"
        return f"\n{commit_type}\n"

    def _module_logs(self, modules: dict[str, list[Change]]) -> str:
        parts = []
        for module, entries in modules.items():
            if module:
                parts.append(f"{module}\n")
            parts.extend(f"{entry}\n" for entry in entries)
            parts.append("\n")
        return "".join(parts)

    def build(self) -> str:
        """Render the changelog. Safe to call repeatedly."""
        return "".join(
            self._header(commit_type) + self._module_logs(modules)
            for commit_type, modules in self._changes.items()
        )
