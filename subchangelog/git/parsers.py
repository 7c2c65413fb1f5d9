"""Parsers for .gitmodules stanzas and submodule diff markers."""

import re
from typing import NamedTuple

SUBMODULE_MARKER = '[submodule'

_NAME_RE = re.compile(r'^\s*"(?P<name>[^"]*)"\s*\]\s*$')
_REVISION_RE = re.compile(r'^(?P<sign>[-+])Subproject commit (?P<sha>\S+)')
_COMMENT_PREFIXES = ('#', ';')


class ParseError(ValueError):
    """Raised when .gitmodules or diff text does not have the expected shape."""
    pass


class StanzaFields(NamedTuple):
    name: str
    path: str
    url: str


def _is_blank_or_comment(text: str) -> bool:
    return all(not line.strip() or line.strip().startswith(_COMMENT_PREFIXES) for line in text.split('\n'))


def split_gitmodules(text: str) -> list[str]:
    """Split .gitmodules text into stanza bodies, one per submodule marker.

    Text before the first marker is dropped when it holds only blank or
    comment lines.
    """
    head, *stanzas = text.split(SUBMODULE_MARKER)
    if not _is_blank_or_comment(head):
        stanzas.insert(0, head)
    return [fragment for fragment in stanzas if fragment.strip()]


def parse_stanza(text: str) -> StanzaFields:
    """Parse the body of one ``[submodule "name"]`` section.

    The first line holds the quoted name; the rest are ``key = value`` pairs
    or bare boolean keys.
    """
    lines = text.split('\n')
    match = _NAME_RE.match(lines[0])
    if not match:
        raise ParseError(f"Submodule stanza has no quoted name: {lines[0].strip()!r}")
    name = match.group('name')

    values = {}
    for line in lines[1:]:
        line = line.strip()
        if not line or line.startswith(_COMMENT_PREFIXES):
            continue
        key, sep, value = line.partition('=')
        # A bare key is a boolean set to true
        values[key.strip()] = value.strip() if sep else 'true'

    for key in ('path', 'url'):
        if not values.get(key):
            raise ParseError(f"Submodule '{name}' has no {key}")

    return StanzaFields(name=name, path=values['path'], url=values['url'])


def parse_revisions(diff: str, path: str) -> tuple[str, str]:
    """Return ``(previous_revision, revision)`` from a submodule pointer diff.

    Markers are taken in textual order; anything past the first two is ignored.
    """
    revisions = []
    for line in diff.split('\n'):
        match = _REVISION_RE.match(line)
        if match:
            revisions.append(match.group('sha'))

    if len(revisions) < 2:
        raise ParseError(
            f"Expected two 'Subproject commit' lines in the last commit's diff "
            f"of '{path}', found {len(revisions)}"
        )
    return revisions[0], revisions[1]
