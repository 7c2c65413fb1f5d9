"""Changelog Package"""

from subchangelog.changelog.change import Change
from subchangelog.changelog.log import ChangeLog

__all__ = [
    "Change",
    "ChangeLog",
]
