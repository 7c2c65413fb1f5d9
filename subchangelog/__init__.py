"""
Submodule Changelog

Changelog generation for CI release steps from the latest commit and the
commit histories of moved git submodules.
"""

__version__ = "1.0.0"

# Centralized commit types - single source of truth
# Used by: changelog/change.py (validation), changelog/log.py (section headers)
COMMIT_TYPES = {
    'build': 'Build system',
    'ci': 'Build system',
    'docs': 'Documentation',
    'feat': 'Enhancements',
    'fix': 'Bugs',
    'perf': 'Enhancements',
    'refactor': 'Enhancements',
    'test': 'Bugs',
}

# List of type names for validation
COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
